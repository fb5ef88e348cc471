# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative command loader: builds a `Command`, its options and its group choices
from a YAML or TOML file.

Example (YAML):

    name: deploy
    options:
      - flags: ["--verbose", "-v"]
        type: bool
        default: false
    choices:
      - flags: ["--target"]
        required: true
        groups:
          - key: k8s
            name: Kubernetes
            options:
              - flags: ["--namespace"]
                required: true
          - key: vm
            options:
              - flags: ["--host"]
              - flags: ["--port"]
                type: int
                default: 22
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from optgroups.command import Command
from optgroups.logger import logger
from optgroups.parser.option import Option
from optgroups.parser.option_group import OptionGroup

TYPE_NAMES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": Path,
    "datetime": datetime,
}


class RawOption(BaseModel):
    """Raw option model for command configuration."""

    flags: list[str]
    dest: str | None = None
    type: str = "str"
    default: Any = None
    required: bool = False
    choices: list[Any] | None = None
    help: str = ""

    @field_validator("flags")
    @classmethod
    def validate_flags(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("an option needs at least one flag")
        return value

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        if value not in TYPE_NAMES:
            raise ValueError(
                f"unknown option type '{value}', expected one of {', '.join(TYPE_NAMES)}"
            )
        return value

    def to_option(self) -> Option:
        return Option(
            *self.flags,
            dest=self.dest,
            type=TYPE_NAMES[self.type],
            default=self.default,
            required=self.required,
            choices=self.choices,
            help=self.help,
        )


class RawOptionGroup(BaseModel):
    """One candidate group of a group choice, selected by `key`."""

    key: str
    name: str | None = None
    help: str = ""
    options: list[RawOption] = Field(default_factory=list)

    def to_group(self) -> OptionGroup:
        return OptionGroup(
            name=self.name or self.key,
            help=self.help,
            options=[raw.to_option() for raw in self.options],
        )


class RawGroupChoice(BaseModel):
    """A discriminator option and its candidate groups."""

    flags: list[str]
    dest: str | None = None
    help: str = ""
    required: bool = False
    groups: list[RawOptionGroup]

    @field_validator("groups")
    @classmethod
    def validate_groups(cls, value: list[RawOptionGroup]) -> list[RawOptionGroup]:
        if not value:
            raise ValueError("a group choice needs at least one group")
        return value


class CommandConfig(BaseModel):
    """Command configuration model."""

    name: str
    help: str = ""
    options: list[RawOption] = Field(default_factory=list)
    choices: list[RawGroupChoice] = Field(default_factory=list)

    def to_command(self) -> Command:
        command = Command(self.name, help=self.help)
        for raw_option in self.options:
            command.register_option(raw_option.to_option())
        for raw_choice in self.choices:
            command.add_group_choice(
                *raw_choice.flags,
                choices=[(raw.key, raw.to_group()) for raw in raw_choice.groups],
                required=raw_choice.required,
                dest=raw_choice.dest,
                help=raw_choice.help,
            )
        return command


def loader(file_path: Path | str) -> Command:
    """
    Load a command declaration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (`.yaml`, `.yml` or `.toml`).

    Returns:
        Command: A command with every option and group choice registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or does not hold a mapping.
        pydantic.ValidationError: If the declaration is malformed.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with a command name.\n"
            "Example:\n"
            "name: 'deploy'\n"
            "choices:\n"
            "  - flags: ['--target']\n"
            "    groups:\n"
            "      - key: 'vm'\n"
            "        options:\n"
            "          - flags: ['--host']"
        )

    logger.debug("Loading command declaration from '%s'", path)
    return CommandConfig(**raw_config).to_command()
