# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by optgroups.

Declaration-time misuse, integration bugs and user input errors are kept in
separate branches so the surrounding CLI can render the user-facing ones and let
the others crash loudly.

Exception Hierarchy:
- OptgroupsError
    ├── RegistrationError
    ├── IllegalStateError
    └── UsageError
        ├── BadParameterValue
        ├── MissingParameter
        ├── NoSuchOption
        └── BadOptionGroupUsage
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optgroups.parser.context import Context
    from optgroups.parser.option import Option


class OptgroupsError(Exception):
    """Base exception for optgroups."""


class RegistrationError(OptgroupsError):
    """Exception raised when options or groups are declared or registered incorrectly."""


class IllegalStateError(OptgroupsError):
    """Exception raised when a value is read before finalize, or finalized twice."""


class UsageError(OptgroupsError):
    """
    Base class for errors caused by what the user typed.

    Carries the offending parameter and the command context so the surrounding
    CLI can render them; `exit_code` is what `Command.main` exits with.
    """

    exit_code: int = 2

    def __init__(
        self,
        message: str,
        param: Option | None = None,
        context: Context | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.param = param
        self.context = context

    def format_message(self) -> str:
        return self.message

    def __str__(self) -> str:
        return self.format_message()


class BadParameterValue(UsageError):
    """Exception raised when a parameter was given a value it cannot accept."""

    def format_message(self) -> str:
        if self.param is None:
            return f"Invalid value: {self.message}"
        return f'Invalid value for "{self.param.option_name}": {self.message}'


class MissingParameter(UsageError):
    """Exception raised when a required parameter was not given on the command line."""

    def __init__(self, param: Option, context: Context | None = None) -> None:
        super().__init__("", param=param, context=context)

    def format_message(self) -> str:
        assert self.param is not None
        message = f'Missing option "{self.param.option_name}".'
        if self.param.suggestions:
            message += f" (choose from {', '.join(map(str, self.param.suggestions))})"
        return message


class NoSuchOption(UsageError):
    """Exception raised when an invocation names a flag no option was registered for."""

    def __init__(self, flag: str, context: Context | None = None) -> None:
        super().__init__(f"No such option: {flag}", context=context)
        self.flag = flag


class BadOptionGroupUsage(UsageError):
    """Exception raised when a group's own validator rejects its combined values."""
