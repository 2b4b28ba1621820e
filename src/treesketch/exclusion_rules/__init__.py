"""Exclusion rules for filtering entries by name."""

from .base_rules import BaseExclusionRules
from .ignore_file import IGNORE_FILE_NAME, collect_ignore_file_patterns, parse_ignore_lines
from .name_rules import DEFAULT_IGNORED_NAMES, NameExclusionRules, is_excluded, parse_ignore_list

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_IGNORED_NAMES",
    "IGNORE_FILE_NAME",
    "NameExclusionRules",
    "collect_ignore_file_patterns",
    "is_excluded",
    "parse_ignore_lines",
    "parse_ignore_list",
]
