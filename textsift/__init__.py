"""
textsift: strip invisible artifacts and normalize typography in generated text.
"""

from .cleaner.classify import CodepointRule, classify, contains_emoji
from .cleaner.clean import (
    Issue,
    Report,
    SummaryEntry,
    clean,
    clean_lines,
    clean_with,
    find_issues,
    inspect,
    is_clean,
    normalize,
)
from .cleaner.config import PRESETS, Configuration, InvalidPreset, get_preset

__all__ = [
    "clean",
    "clean_with",
    "clean_lines",
    "normalize",
    "inspect",
    "find_issues",
    "is_clean",
    "classify",
    "contains_emoji",
    "get_preset",
    "Configuration",
    "CodepointRule",
    "InvalidPreset",
    "Issue",
    "PRESETS",
    "Report",
    "SummaryEntry",
]

__version__ = "0.1.0"
