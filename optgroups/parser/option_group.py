# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionGroup`, a named bundle of options that are finalized and validated
together.

Options can be declared as class attributes of a subclass, or added to an
instance with `add_option()` before it is registered:

    class ServerOptions(OptionGroup):
        host = Option("--host", default="localhost")
        port = Option("--port", type=int, required=True)

    group = ServerOptions("Server")
    group.add_option("--tls", type=bool, default=False)

Class-level declarations are copied per instance, so two instances of the same
group class never share an `Option`. Membership is frozen once the group has been
registered through a binding.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence

from optgroups.exceptions import BadOptionGroupUsage, IllegalStateError, RegistrationError
from optgroups.parser.context import Context
from optgroups.parser.invocation import Invocation
from optgroups.parser.option import Option
from optgroups.parser.parser_types import BindingState

RESERVED_ATTRIBUTES = frozenset({"name", "help", "validator", "state", "_frozen", "_options"})


class OptionGroup:
    """
    A named, ordered set of options plus an optional validation hook.

    Attributes:
        name (str | None): Group name shown to users; None for anonymous groups.
        help (str): Help text for the group.
        validator (Callable[[OptionGroup], Any] | None): Called after every option
            in the group passed its own post-validation. Raise `ValueError` to
            reject the combination.
    """

    def __init__(
        self,
        name: str | None = None,
        help: str = "",
        options: Iterable[Option] | None = None,
        validator: Callable[[OptionGroup], Any] | None = None,
    ) -> None:
        self.name = name
        self.help = help
        self.validator = validator
        self.state = BindingState.UNFINALIZED
        self._frozen = False
        self._options: list[Option] = []
        for attr_name, declared in self._declared_options().items():
            option = declared.copy()
            setattr(self, attr_name, option)
            self._options.append(option)
        for option in options or ():
            self._append(option)

    @classmethod
    def _declared_options(cls) -> dict[str, Option]:
        declared: dict[str, Option] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, attr in vars(klass).items():
                if not isinstance(attr, Option):
                    continue
                if attr_name in RESERVED_ATTRIBUTES or hasattr(OptionGroup, attr_name):
                    raise RegistrationError(
                        f"Option '{attr.option_name}' cannot be declared as "
                        f"'{klass.__name__}.{attr_name}': the name is used by OptionGroup"
                    )
                declared[attr_name] = attr
        return declared

    def _append(self, option: Option) -> None:
        if self._frozen:
            raise RegistrationError(
                f"Cannot add '{option.option_name}' to group '{self.name}' after registration"
            )
        if any(existing is option for existing in self._options):
            raise RegistrationError(
                f"Option '{option.option_name}' is already in group '{self.name}'"
            )
        self._options.append(option)

    def add_option(self, *flags: str, **kwargs: Any) -> Option:
        """Declare a new option in this group and return it."""
        option = Option(*flags, **kwargs)
        self._append(option)
        return option

    def freeze(self) -> None:
        """Fix membership; called when a binding registers this group."""
        self._frozen = True

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    def get(self, dest: str) -> Any:
        """Return the finalized value of the option stored under `dest`."""
        for option in self._options:
            if option.dest == dest:
                return option.value
        raise KeyError(dest)

    def values(self) -> dict[str, Any]:
        return {option.dest: option.value for option in self._options}

    def finalize(
        self,
        context: Context,
        invocations_by_option: Mapping[Option, Sequence[Invocation]],
    ) -> None:
        if self.state is BindingState.FINALIZED:
            raise IllegalStateError(f"Option group '{self.name}' was already finalized")
        for option in self._options:
            option.finalize(context, invocations_by_option.get(option, ()))
        self.state = BindingState.FINALIZED

    def post_validate(self, context: Context) -> None:
        for option in self._options:
            option.post_validate(context)
        if self.validator is not None:
            try:
                self.validator(self)
            except ValueError as error:
                raise BadOptionGroupUsage(str(error), context=context) from error

    def __repr__(self) -> str:
        flags = ", ".join(option.option_name for option in self._options)
        return f"{type(self).__name__}(name={self.name!r}, options=[{flags}])"
