# textsift/cleaner/classify.py
from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Literal, Mapping, Optional

from .mappings import (
    CONTROL_NAMES,
    DASH_MAP,
    ELLIPSIS,
    EMOJI_RANGES,
    INVISIBLE_CHARS,
    KEYCAP,
    LAYOUT_CONTROLS,
    NAME_OVERRIDES,
    QUOTE_MAP,
    SKIN_TONE_RANGE,
    SPACE_VARIANTS,
    VARIATION_SELECTOR_RANGE,
    ZWJ,
)

__all__ = [
    "Category",
    "CodepointRule",
    "RULES",
    "classify",
    "contains_emoji",
    "char_name",
    "hex_code",
    "is_genuine_emoji",
]

Category = Literal[
    "control",
    "invisible",
    "space",
    "dash",
    "quote",
    "ellipsis",
    "emoji",
    "emoji_modifier",
]


@dataclass(frozen=True)
class CodepointRule:
    """
    Classification result for one code point.

    :param category: Category the code point belongs to.
    :param name: Human-readable display name.
    :param replacement: Text substituted by :func:`~textsift.cleaner.clean.clean`
        when the category is enabled (``""`` means removal). ``None`` for
        emoji, which are never replaced.
    """

    category: Category
    name: str
    replacement: Optional[str] = None


def hex_code(cp: int) -> str:
    return f"U+{cp:04X}"


def char_name(cp: int) -> str:
    """
    Display name: explicit override, then the Unicode database, then ``U+XXXX``.
    """
    if cp in NAME_OVERRIDES:
        return NAME_OVERRIDES[cp]
    return unicodedata.name(chr(cp), "") or hex_code(cp)


def _control_name(cp: int) -> str:
    return CONTROL_NAMES.get(cp, f"CONTROL_{cp:02X}")


def _build_rules() -> Mapping[int, CodepointRule]:
    rules: Dict[int, CodepointRule] = {}

    for cp in [*range(0x00, 0x20), 0x7F, *range(0x80, 0xA0)]:
        if cp in LAYOUT_CONTROLS:
            continue
        rules[cp] = CodepointRule("control", _control_name(cp), "")

    for cp in INVISIBLE_CHARS:
        rules[cp] = CodepointRule("invisible", char_name(cp), "")

    for cp in SPACE_VARIANTS:
        rules[cp] = CodepointRule("space", char_name(cp), " ")
    for cp, repl in DASH_MAP.items():
        rules[cp] = CodepointRule("dash", char_name(cp), repl)
    for cp, repl in QUOTE_MAP.items():
        rules[cp] = CodepointRule("quote", char_name(cp), repl)
    rules[ELLIPSIS] = CodepointRule("ellipsis", char_name(ELLIPSIS), "...")

    return MappingProxyType(rules)


# Static rule table for every non-emoji special code point.
RULES = _build_rules()

# ZWJ inside a string that carries real emoji.
_ZWJ_IN_SEQUENCE = CodepointRule("emoji_modifier", char_name(ZWJ))


def _in_range(cp: int, bounds) -> bool:
    return bounds[0] <= cp <= bounds[1]


def _is_emoji_modifier(cp: int) -> bool:
    return (
        _in_range(cp, SKIN_TONE_RANGE)
        or _in_range(cp, VARIATION_SELECTOR_RANGE)
        or cp == KEYCAP
    )


def is_genuine_emoji(cp: int) -> bool:
    """
    True for code points in the emoji blocks. Modifiers, variation selectors
    and ZWJ are not genuine emoji on their own.
    """
    if _is_emoji_modifier(cp):
        return False
    return any(lo <= cp <= hi for lo, hi in EMOJI_RANGES)


def contains_emoji(text: str) -> bool:
    """
    Whole-string flag deciding how ZWJ is classified everywhere in ``text``.
    """
    return any(is_genuine_emoji(ord(ch)) for ch in text)


def classify(cp: int, *, emoji_context: bool = False) -> Optional[CodepointRule]:
    """
    Classify a single code point.

    :param cp: Unicode scalar value (lone surrogates are accepted and
        reported as unrecognized).
    :param emoji_context: Result of :func:`contains_emoji` for the string
        the code point comes from.
    :returns: The matching rule, or ``None`` for ordinary content.
    """
    if _is_emoji_modifier(cp):
        return CodepointRule("emoji_modifier", char_name(cp))
    if is_genuine_emoji(cp):
        return CodepointRule("emoji", char_name(cp))
    if cp == ZWJ and emoji_context:
        return _ZWJ_IN_SEQUENCE
    return RULES.get(cp)
