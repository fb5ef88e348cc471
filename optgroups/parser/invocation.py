# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""Defines `Invocation`, one captured occurrence of an option on the command line."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Invocation:
    """
    One occurrence of an option, as handed over by the tokenizer.

    Attributes:
        name (str): The flag that was used, e.g. `--mode` or `-m`.
        values (tuple[str, ...]): Raw, uncoerced values given with that flag.
    """

    name: str
    values: tuple[str, ...] = ()

    @classmethod
    def of(cls, name: str, *values: str) -> Invocation:
        return cls(name, tuple(values))

    @property
    def value(self) -> str | None:
        """The last raw value, or None for a bare flag."""
        return self.values[-1] if self.values else None
