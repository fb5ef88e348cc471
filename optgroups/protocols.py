# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for the parameter group delegates a `Command` drives.

Protocols:
- ParameterGroup: anything a command finalizes and post-validates as one unit
  after its ungrouped options, in registration order.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from optgroups.parser.context import Context
    from optgroups.parser.invocation import Invocation
    from optgroups.parser.option import Option


@runtime_checkable
class ParameterGroup(Protocol):
    group_name: str | None
    group_help: str | None

    @property
    def dest(self) -> str: ...

    @property
    def value(self) -> Any: ...

    def finalize(
        self,
        context: Context,
        invocations_by_option: Mapping[Option, Sequence[Invocation]],
    ) -> None: ...

    def post_validate(self, context: Context) -> None: ...
