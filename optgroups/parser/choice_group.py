# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ChoiceGroup`, the binding that lets one discriminator option select exactly
one of several `OptionGroup`s at parse time.

Binding happens in two phases:

1. Registration (`register(command)`), at declaration time. The discriminator, the
   binding itself and every option of every candidate group are registered with
   the command. All sub-options have to be visible to the tokenizer because the
   chosen group is not known until the discriminator has been read.
2. Finalize (`finalize(context, invocations_by_option)`), once per parse. The
   discriminator's value is looked up in the `GroupTable`; only the matched group
   is finalized, with the invocation map restricted to its own options. The
   transform turns the chosen group (or None) into the value exposed by `value`.

`post_validate(context)` then validates the chosen group only. Groups that were not
chosen are never finalized and never validated, so their required options are not
enforced.

Example Usage:
    command = Command("serve")
    mode = group_choice(
        Option("--mode"),
        ("http", HttpOptions("HTTP")),
        ("grpc", GrpcOptions("gRPC")),
    ).required().register(command)

    command.parse(invocations)
    mode.value  # the HttpOptions or GrpcOptions instance
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Mapping, Sequence, TypeVar

from optgroups.exceptions import (
    BadParameterValue,
    IllegalStateError,
    MissingParameter,
    RegistrationError,
)
from optgroups.logger import logger
from optgroups.parser.context import Context
from optgroups.parser.group_table import GroupTable
from optgroups.parser.invocation import Invocation
from optgroups.parser.option import Option
from optgroups.parser.option_group import OptionGroup
from optgroups.parser.parser_types import BindingState

if TYPE_CHECKING:
    from optgroups.command import Command

GroupT = TypeVar("GroupT", bound=OptionGroup)
OutT = TypeVar("OutT")


class ChoiceGroup(Generic[GroupT, OutT]):
    """
    Coordinates a discriminator option, its group table and a transform.

    Attributes:
        option (Option): The discriminator whose value selects a group.
        groups (GroupTable): Candidate groups by key. Shared, read-only.
        transform (Callable[[GroupT | None], OutT]): Turns the chosen group, or
            None when the discriminator was not given, into `value`.
    """

    group_name: str | None = None
    group_help: str | None = None

    def __init__(
        self,
        option: Option,
        groups: GroupTable | Mapping[str, GroupT],
        transform: Callable[[GroupT | None], OutT],
    ) -> None:
        self.option = option
        self.groups = groups if isinstance(groups, GroupTable) else GroupTable(groups)
        self.transform = transform
        self.state = BindingState.UNFINALIZED
        self._value: Any = None
        self._chosen_group: GroupT | None = None
        self._command: Command | None = None

    @property
    def dest(self) -> str:
        return self.option.dest

    def register(self, command: Command) -> ChoiceGroup[GroupT, OutT]:
        """Register the discriminator, this binding and every sub-option with `command`."""
        if self._command is not None:
            raise RegistrationError(
                f"Choice '{self.option.option_name}' is already registered with "
                f"'{self._command.name}'"
            )
        for group in self.groups.values():
            for option in group.options:
                if option.parameter_group is not None and option.parameter_group is not self:
                    raise RegistrationError(
                        f"Option '{option.option_name}' already belongs to another "
                        "parameter group"
                    )
        if any(existing is self for existing in command.option_groups):
            raise RegistrationError(f"Parameter group {self!r} is already registered")
        command.check_options(
            [self.option, *(option for group in self.groups.values() for option in group.options)]
        )

        command.register_option(self.option)
        command.register_option_group(self)
        for group in self.groups.values():
            for option in group.options:
                option.bind_group(self, group.name)
                command.register_option(option)
            group.freeze()
        self._command = command
        logger.debug(
            "[%s] Registered choice '%s' with groups: %s",
            command.name,
            self.option.option_name,
            self.groups.keys_text(),
        )
        return self

    def required(self) -> ChoiceGroup[GroupT, GroupT]:
        """
        Return a binding on the same option and groups that raises `MissingParameter`
        when the discriminator was not given.

        The plain binding must not be registered; register the returned one instead.
        """
        if self._command is not None:
            raise RegistrationError(
                f"Cannot make '{self.option.option_name}' required after registration"
            )
        option = self.option

        def _require(group: GroupT | None) -> GroupT:
            if group is None:
                raise MissingParameter(option)
            return group

        return ChoiceGroup(option, self.groups, _require)

    def finalize(
        self,
        context: Context,
        invocations_by_option: Mapping[Option, Sequence[Invocation]],
    ) -> None:
        if self.state is BindingState.FINALIZED:
            raise IllegalStateError(
                f"Choice '{self.option.option_name}' was already finalized"
            )

        key = self.option.value
        if key is None:
            logger.debug(
                "[%s] No group chosen for '%s'",
                context.command_name,
                self.option.option_name,
            )
            self._store(self._apply_transform(None, context))
            return

        group = self.groups.get(key)
        if group is None:
            raise BadParameterValue(
                f"invalid choice: {key}. (choose from {self.groups.keys_text()})",
                param=self.option,
                context=context,
            )

        owned = set(group.options)
        group.finalize(
            context,
            {
                option: invocations
                for option, invocations in invocations_by_option.items()
                if option in owned
            },
        )
        self._chosen_group = group
        logger.debug(
            "[%s] '%s' chose group '%s'",
            context.command_name,
            self.option.option_name,
            key,
        )
        self._store(self._apply_transform(group, context))

    def _apply_transform(self, group: GroupT | None, context: Context) -> OutT:
        try:
            return self.transform(group)
        except MissingParameter as error:
            if error.context is None:
                error.context = context
            raise

    def _store(self, value: OutT) -> None:
        self._value = value
        self.state = BindingState.FINALIZED

    @property
    def value(self) -> OutT:
        if self.state is not BindingState.FINALIZED:
            raise IllegalStateError(
                "Cannot read from option delegate before parsing command line"
            )
        return self._value

    def get_value(self) -> OutT:
        return self.value

    @property
    def chosen_group(self) -> GroupT | None:
        return self._chosen_group

    def post_validate(self, context: Context) -> None:
        if self._chosen_group is None:
            return
        self._chosen_group.post_validate(context)

    def __repr__(self) -> str:
        return (
            f"ChoiceGroup(option={self.option.option_name!r}, "
            f"groups=[{self.groups.keys_text()}], state={self.state})"
        )


def group_choice(
    option: Option,
    *pairs: tuple[str, GroupT],
    choices: Mapping[str, GroupT] | None = None,
) -> ChoiceGroup[GroupT, GroupT | None]:
    """
    Turn `option` into a discriminator selecting one of the given groups.

    Groups can be passed as a mapping, as `(key, group)` pairs, or both; the mapping
    comes first, and a key repeated in the pairs keeps its position but takes the
    pair's group. The discriminator is copied with the keys as its suggestions; its
    default, if any, is looked up like any given value.

    Example:
        group_choice(Option("--db"), ("sqlite", SqliteOptions()), ("pg", PgOptions()))
    """
    entries: list[tuple[str, GroupT]] = list((choices or {}).items()) + list(pairs)
    table = GroupTable(entries)
    return ChoiceGroup(option.copy(suggestions=list(table)), table, lambda group: group)


def required(binding: ChoiceGroup[GroupT, GroupT | None]) -> ChoiceGroup[GroupT, GroupT]:
    """Functional spelling of `ChoiceGroup.required()`."""
    return binding.required()
