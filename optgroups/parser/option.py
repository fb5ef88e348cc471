# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Option`, a single declared command-line parameter.

An `Option` is declared once, registered with a `Command`, receives zero or more
`Invocation`s from the tokenizer and is then finalized into a typed value. Options
that live inside an `OptionGroup` carry a back-reference to the binding that routes
their invocations (`parameter_group`) and to the name of their group
(`group_name`). Both are set once at registration and never change afterwards.

Lifecycle:
    declared -> registered -> finalize(context, invocations) -> post_validate(context)

Key Attributes:
- `flags`: One or more short/long flags (e.g. `-p`, `--port`)
- `dest`: Key used in parsed results, derived from the longest flag by default
- `type`: Coercion target passed to `coerce_value`
- `default`: Value used when the option received no invocations
- `required`: Enforced in `post_validate`, never during finalize
- `choices`: Allowed coerced values, if restricted
- `validator`: Callable raising `ValueError` on a bad value, run in `post_validate`
- `suggestions`: Completion candidates, metadata only
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Sequence

from optgroups.exceptions import (
    BadParameterValue,
    IllegalStateError,
    MissingParameter,
    RegistrationError,
)
from optgroups.logger import logger
from optgroups.parser.parser_types import BindingState
from optgroups.parser.utils import coerce_value

if TYPE_CHECKING:
    from optgroups.parser.context import Context
    from optgroups.parser.invocation import Invocation
    from optgroups.protocols import ParameterGroup


class Option:
    """
    Represents one command-line option.

    Options hash and compare by identity: they are the keys of the invocation map
    handed over by the tokenizer, and two declarations with the same flags are
    still two different options.
    """

    def __init__(
        self,
        *flags: str,
        dest: str | None = None,
        type: Any = str,
        default: Any = None,
        required: bool = False,
        choices: Sequence[Any] | None = None,
        help: str = "",
        validator: Callable[[Any], Any] | None = None,
        suggestions: Sequence[str] | None = None,
    ) -> None:
        self._validate_flags(flags)
        self.flags: tuple[str, ...] = tuple(flags)
        self.dest: str = dest or self._get_dest_from_flags(self.flags)
        self.type = type
        self.default = default
        self.required = required
        self.choices: list[Any] | None = list(choices) if choices is not None else None
        self.help = help
        self.validator = validator
        self.suggestions: list[str] | None = (
            list(suggestions) if suggestions is not None else None
        )
        self.parameter_group: ParameterGroup | None = None
        self.group_name: str | None = None
        self.state = BindingState.UNFINALIZED
        self._value: Any = None

    @staticmethod
    def _validate_flags(flags: tuple[str, ...]) -> None:
        if not flags:
            raise RegistrationError("No flags provided")
        for flag in flags:
            if not isinstance(flag, str):
                raise RegistrationError(f"Flag '{flag}' must be a string")
            if not flag.startswith("-") or flag.strip("-") == "":
                raise RegistrationError(f"Invalid option flag '{flag}'")

    @staticmethod
    def _get_dest_from_flags(flags: tuple[str, ...]) -> str:
        longest = max(flags, key=len)
        dest = longest.lstrip("-").replace("-", "_").lower()
        if dest[:1].isdigit():
            raise RegistrationError("dest must not start with a digit")
        return dest

    @property
    def option_name(self) -> str:
        """The flag used to name this option in messages."""
        return max(self.flags, key=len)

    def copy(self, **overrides: Any) -> Option:
        """Return an unregistered, unfinalized option with the same declaration."""
        declaration: dict[str, Any] = {
            "dest": self.dest,
            "type": self.type,
            "default": self.default,
            "required": self.required,
            "choices": self.choices,
            "help": self.help,
            "validator": self.validator,
            "suggestions": self.suggestions,
        }
        declaration.update(overrides)
        flags = declaration.pop("flags", self.flags)
        return Option(*flags, **declaration)

    def bind_group(self, parameter_group: ParameterGroup, group_name: str | None) -> None:
        """Tag this option with the binding and group that own it."""
        if self.parameter_group is not None and self.parameter_group is not parameter_group:
            raise RegistrationError(
                f"Option '{self.option_name}' already belongs to another parameter group"
            )
        self.parameter_group = parameter_group
        self.group_name = group_name

    def finalize(self, context: Context, invocations: Sequence[Invocation]) -> None:
        """Resolve the typed value from this option's own invocations."""
        if self.state is BindingState.FINALIZED:
            raise IllegalStateError(f"Option '{self.option_name}' was already finalized")

        if not invocations:
            value = self.default
        else:
            raw = invocations[-1].value
            if raw is None:
                raise BadParameterValue(
                    "option requires a value", param=self, context=context
                )
            try:
                value = coerce_value(raw, self.type)
            except ValueError as error:
                raise BadParameterValue(str(error), param=self, context=context) from error
            if self.choices is not None and value not in self.choices:
                raise BadParameterValue(
                    f"invalid choice: {raw}. "
                    f"(choose from {', '.join(map(str, self.choices))})",
                    param=self,
                    context=context,
                )

        self._value = value
        self.state = BindingState.FINALIZED
        logger.debug(
            "[%s] Finalized '%s' from %d invocation(s)",
            context.command_name,
            self.dest,
            len(invocations),
        )

    @property
    def value(self) -> Any:
        if self.state is not BindingState.FINALIZED:
            raise IllegalStateError(
                f"Cannot read option '{self.option_name}' before parsing command line"
            )
        return self._value

    def post_validate(self, context: Context) -> None:
        """Enforce `required` and run the validator once every value is final."""
        value = self.value
        if value is None:
            if self.required:
                raise MissingParameter(self, context=context)
            return
        if self.validator is not None:
            try:
                self.validator(value)
            except ValueError as error:
                raise BadParameterValue(str(error), param=self, context=context) from error

    def __repr__(self) -> str:
        group = f", group={self.group_name!r}" if self.group_name else ""
        return f"Option({', '.join(self.flags)}, dest={self.dest!r}{group})"
