"""
Optgroups

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .choice_group import ChoiceGroup, group_choice, required
from .context import Context
from .group_table import GroupTable
from .invocation import Invocation
from .option import Option
from .option_group import OptionGroup
from .parser_types import BindingState

__all__ = [
    "BindingState",
    "ChoiceGroup",
    "Context",
    "GroupTable",
    "Invocation",
    "Option",
    "OptionGroup",
    "group_choice",
    "required",
]
