# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command class, the owner of every option and parameter group
declared for one command line.

A Command drives the staged pipeline that turns tokenizer output into values:

- Registration: options and parameter groups (such as `ChoiceGroup`) are
  registered at declaration time, in order.
- Parse: external. The tokenizer supplies an invocation map from each registered
  `Option` to its list of `Invocation`s. Options missing from the map resolve as
  having no invocations.
- Finalize: ungrouped options first, then every parameter group in registration
  order, each given the full invocation map.
- Post-validate: the same order again, only after everything is finalized.

Errors raised by any stage propagate unchanged. `main()` is the only place that
catches `UsageError`, to render it and exit.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from optgroups.console import render_usage_error
from optgroups.exceptions import NoSuchOption, RegistrationError, UsageError
from optgroups.logger import logger
from optgroups.parser.choice_group import ChoiceGroup, group_choice
from optgroups.parser.context import Context
from optgroups.parser.invocation import Invocation
from optgroups.parser.option import Option
from optgroups.parser.option_group import OptionGroup
from optgroups.protocols import ParameterGroup


class Command:
    """
    Registration target and finalization coordinator for one command.

    Attributes:
        name (str): Command name used in contexts and error messages.
        help (str): Help text for the command.
        parent (Command | None): Enclosing command, for the command path.
    """

    def __init__(self, name: str, help: str = "", parent: Command | None = None) -> None:
        self.name = name
        self.help = help
        self.parent = parent
        self._options: list[Option] = []
        self._flag_map: dict[str, Option] = {}
        self._option_groups: list[ParameterGroup] = []

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    @property
    def option_groups(self) -> tuple[ParameterGroup, ...]:
        return tuple(self._option_groups)

    def check_options(self, options: Iterable[Option]) -> None:
        """
        Raise `RegistrationError` if `options` cannot all be registered together.

        Nothing is changed, so a caller registering several options can check them
        all first and never leave the command half-registered.
        """
        seen: dict[str, Option] = {}
        for option in options:
            if any(existing is option for existing in self._options):
                raise RegistrationError(
                    f"Option '{option.option_name}' is already registered with '{self.name}'"
                )
            for flag in option.flags:
                owner = self._flag_map.get(flag) or seen.get(flag)
                if owner is not None:
                    raise RegistrationError(
                        f"Flag '{flag}' is already used by {owner!r} in '{self.name}'"
                    )
            for flag in option.flags:
                seen[flag] = option

    def register_option(self, option: Option) -> None:
        """Make `option` visible to the tokenizer and to finalize."""
        self.check_options([option])
        for flag in option.flags:
            self._flag_map[flag] = option
        self._options.append(option)
        logger.debug("[%s] Registered option %r", self.name, option)

    def register_option_group(self, group: ParameterGroup) -> None:
        """Add a parameter group to the finalize and post-validate passes."""
        if any(existing is group for existing in self._option_groups):
            raise RegistrationError(f"Parameter group {group!r} is already registered")
        self._option_groups.append(group)

    def add_option(self, *flags: str, **kwargs: Any) -> Option:
        """Declare and register an ungrouped option."""
        option = Option(*flags, **kwargs)
        self.register_option(option)
        return option

    def add_group_choice(
        self,
        *flags: str,
        choices: Mapping[str, OptionGroup] | Iterable[tuple[str, OptionGroup]],
        required: bool = False,
        **option_kwargs: Any,
    ) -> ChoiceGroup:
        """
        Declare a discriminator option selecting one of `choices` and register it.

        Args:
            *flags: Flags of the discriminator option.
            choices: Candidate groups, as a mapping or as `(key, group)` pairs.
            required: Raise `MissingParameter` when the discriminator is not given.
            **option_kwargs: Forwarded to the discriminator `Option`.

        Returns:
            ChoiceGroup: The registered binding; read `.value` after `parse()`.
        """
        pairs = choices.items() if isinstance(choices, Mapping) else choices
        binding = group_choice(Option(*flags, **option_kwargs), *pairs)
        if required:
            binding = binding.required()
        return binding.register(self)

    def get_option(self, name: str) -> Option | None:
        """Look an option up by one of its flags or by its dest."""
        if name in self._flag_map:
            return self._flag_map[name]
        for option in self._options:
            if option.dest == name:
                return option
        return None

    def invocations_from(
        self, captured: Iterable[tuple[str, Sequence[str]]]
    ) -> dict[Option, list[Invocation]]:
        """
        Build an invocation map from `(flag, values)` pairs already split by a
        tokenizer, in command line order.

        Raises:
            NoSuchOption: If a flag was never registered with this command.
        """
        invocations: dict[Option, list[Invocation]] = {}
        for flag, values in captured:
            option = self._flag_map.get(flag)
            if option is None:
                raise NoSuchOption(flag, context=self.make_context())
            invocations.setdefault(option, []).append(Invocation(flag, tuple(values)))
        return invocations

    def make_context(self) -> Context:
        parent = self.parent.make_context() if self.parent else None
        return Context(self.name, parent=parent)

    def parse(
        self, invocations_by_option: Mapping[Option, Sequence[Invocation]] | None = None
    ) -> dict[str, Any]:
        """
        Finalize and post-validate every registered parameter.

        Returns:
            dict[str, Any]: Ungrouped option values by dest. A parameter group's
            value is stored under its own dest, replacing the raw discriminator key.
        """
        invocations_by_option = invocations_by_option or {}
        context = self.make_context()
        ungrouped = [option for option in self._options if option.parameter_group is None]

        for option in ungrouped:
            option.finalize(context, invocations_by_option.get(option, ()))
        for group in self._option_groups:
            group.finalize(context, invocations_by_option)

        for option in ungrouped:
            option.post_validate(context)
        for group in self._option_groups:
            group.post_validate(context)

        result = {option.dest: option.value for option in ungrouped}
        for group in self._option_groups:
            result[group.dest] = group.value
        return result

    def main(
        self, invocations_by_option: Mapping[Option, Sequence[Invocation]] | None = None
    ) -> dict[str, Any]:
        """Parse, rendering any `UsageError` and exiting with its exit code."""
        try:
            return self.parse(invocations_by_option)
        except UsageError as error:
            logger.debug("[%s] Usage error: %s", self.name, error)
            render_usage_error(error)
            raise SystemExit(error.exit_code) from error

    def __repr__(self) -> str:
        return (
            f"Command(name={self.name!r}, options={len(self._options)}, "
            f"groups={len(self._option_groups)})"
        )
