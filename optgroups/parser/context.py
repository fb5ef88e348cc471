# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""Defines `Context`, the command identity carried into finalize and into errors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Context:
    command_name: str
    parent: Context | None = None
    obj: Any = None

    @property
    def command_path(self) -> str:
        if self.parent is None:
            return self.command_name
        return f"{self.parent.command_path} {self.command_name}"
