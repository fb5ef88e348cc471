# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `GroupTable`, the immutable mapping from discriminator key to `OptionGroup`
that a `ChoiceGroup` resolves against.

Keys are matched exactly: case-sensitive, no normalization. When the same key is
supplied more than once the last group wins and a warning is logged; pass
`strict=True` to reject duplicates instead. A duplicated key keeps the position of
its first occurrence, which is the order used when listing valid keys.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from optgroups.exceptions import RegistrationError
from optgroups.logger import logger
from optgroups.parser.option_group import OptionGroup


class GroupTable(Mapping[str, OptionGroup]):
    """Read-only, ordered mapping of discriminator keys to option groups."""

    def __init__(
        self,
        choices: Mapping[str, OptionGroup] | Iterable[tuple[str, OptionGroup]] = (),
        strict: bool = False,
    ) -> None:
        pairs = choices.items() if isinstance(choices, Mapping) else choices
        table: dict[str, OptionGroup] = {}
        for key, group in pairs:
            if not isinstance(key, str):
                raise RegistrationError(f"Group key {key!r} must be a string")
            if not isinstance(group, OptionGroup):
                raise RegistrationError(
                    f"Value for key '{key}' must be an OptionGroup, got {type(group).__name__}"
                )
            if key in table:
                if strict:
                    raise RegistrationError(f"Duplicate group key '{key}'")
                logger.warning(
                    "Group key '%s' supplied more than once, keeping the last group", key
                )
            table[key] = group

        if not table:
            raise RegistrationError("A group table needs at least one group")

        seen: dict[int, str] = {}
        for key, group in table.items():
            if id(group) in seen:
                raise RegistrationError(
                    f"Keys '{seen[id(group)]}' and '{key}' share the same OptionGroup instance"
                )
            seen[id(group)] = key

        self._groups: Mapping[str, OptionGroup] = MappingProxyType(table)

    @classmethod
    def from_pairs(cls, *pairs: tuple[str, OptionGroup], strict: bool = False) -> GroupTable:
        return cls(pairs, strict=strict)

    def __getitem__(self, key: str) -> OptionGroup:
        return self._groups[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def keys_text(self) -> str:
        """Valid keys in declaration order, comma-joined."""
        return ", ".join(self._groups)

    def __repr__(self) -> str:
        return f"GroupTable({dict(self._groups)!r})"
