"""
Optgroups

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import Command
from .parser import (
    ChoiceGroup,
    Context,
    GroupTable,
    Invocation,
    Option,
    OptionGroup,
    group_choice,
    required,
)

logger = logging.getLogger("optgroups")

__all__ = [
    "ChoiceGroup",
    "Command",
    "Context",
    "GroupTable",
    "Invocation",
    "Option",
    "OptionGroup",
    "group_choice",
    "required",
]
