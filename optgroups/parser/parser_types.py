# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State models shared by options and choice bindings.

- `BindingState`: explicit two-phase lifecycle flag. Values are only readable
  once the holder has moved to `FINALIZED`.
"""
from __future__ import annotations

from enum import Enum


class BindingState(Enum):
    UNFINALIZED = "unfinalized"
    FINALIZED = "finalized"

    def __str__(self) -> str:
        return self.value
