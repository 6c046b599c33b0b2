# textsift/cleaner/config.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional, Tuple, Union

from .classify import Category

__all__ = [
    "Configuration",
    "InvalidPreset",
    "PRESETS",
    "PresetName",
    "get_preset",
    "resolve_config",
    "is_category_enabled",
]

logger = logging.getLogger(__name__)

PresetName = Literal["strict", "standard", "lenient", "llm"]


class InvalidPreset(ValueError):
    """
    Raised when a preset name is not in the registry.
    """

    def __init__(self, name: str, available: Tuple[str, ...]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown preset: {name!r}. Available: {', '.join(available)}"
        )


@dataclass(frozen=True)
class Configuration:
    """
    Which categories to act on and how to shape whitespace.

    :param invisible: Remove/detect control and invisible characters.
    :param spaces: Normalize/detect Unicode spaces.
    :param dashes: Normalize/detect dash variants (soft hyphen is removed).
    :param quotes: Normalize/detect curly and angled quotes. Opt-in.
    :param ellipsis: Normalize/detect the horizontal ellipsis.
    :param preserve_line_breaks: Keep LF/CR. When off they are dropped.
    :param preserve_tabs: Keep TAB. When off tabs are dropped.
    :param keyboard_only: Drop anything that is not printable ASCII, a
        preserved layout control, or emoji.
    :param collapse_whitespace: Collapse whitespace runs into one space.
    :param trim: Strip leading/trailing ASCII whitespace.
    """

    invisible: bool = True
    spaces: bool = True
    dashes: bool = False
    quotes: bool = False
    ellipsis: bool = False
    preserve_line_breaks: bool = True
    preserve_tabs: bool = True
    keyboard_only: bool = False
    collapse_whitespace: bool = False
    trim: bool = False


PRESETS: Mapping[str, Configuration] = MappingProxyType(
    {
        # printable ASCII only, one line
        "strict": Configuration(
            invisible=True,
            spaces=True,
            dashes=True,
            quotes=True,
            ellipsis=True,
            preserve_line_breaks=False,
            preserve_tabs=False,
            keyboard_only=True,
            collapse_whitespace=True,
            trim=True,
        ),
        # keep structure, normalize typography
        "standard": Configuration(
            invisible=True,
            spaces=True,
            dashes=True,
            quotes=True,
            ellipsis=True,
            preserve_line_breaks=True,
            preserve_tabs=False,
            collapse_whitespace=False,
            trim=True,
        ),
        # artifacts and spaces only
        "lenient": Configuration(
            invisible=True,
            spaces=True,
            dashes=False,
            quotes=False,
            ellipsis=False,
            preserve_line_breaks=True,
            preserve_tabs=True,
            collapse_whitespace=False,
            trim=False,
        ),
        # common chat-model output artifacts
        "llm": Configuration(
            invisible=True,
            spaces=True,
            dashes=True,
            quotes=True,
            ellipsis=True,
            preserve_line_breaks=True,
            preserve_tabs=False,
            collapse_whitespace=True,
            trim=True,
        ),
    }
)

# category -> Configuration toggle
_CATEGORY_TOGGLES: Mapping[str, str] = MappingProxyType(
    {
        "control": "invisible",
        "invisible": "invisible",
        "space": "spaces",
        "dash": "dashes",
        "quote": "quotes",
        "ellipsis": "ellipsis",
    }
)


def get_preset(name: str) -> Configuration:
    """
    Look up a preset by name.

    :raises InvalidPreset: If ``name`` is not registered.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise InvalidPreset(name, tuple(PRESETS)) from None


def resolve_config(
    config: Union[Configuration, str, None] = None, **overrides: Any
) -> Configuration:
    """
    Build the effective configuration for one call.

    :param config: A :class:`Configuration`, a preset name, or ``None`` for
        defaults.
    :param overrides: Field overrides applied on top (``dashes=True`` ...).
    :raises InvalidPreset: For an unknown preset name.
    :raises TypeError: For an unknown override field.
    """
    if config is None:
        base = Configuration()
    elif isinstance(config, str):
        base = get_preset(config)
        logger.debug("Resolved preset %r", config)
    else:
        base = config
    return replace(base, **overrides) if overrides else base


def is_category_enabled(category: Optional[Category], config: Configuration) -> bool:
    """
    Whether ``config`` acts on ``category``. Emoji categories never are.
    """
    toggle = _CATEGORY_TOGGLES.get(category) if category else None
    return bool(toggle) and getattr(config, toggle)
