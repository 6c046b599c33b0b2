# textsift/cleaner/clean.py
from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Literal, Optional, Tuple, Union

from .classify import Category, CodepointRule, classify, contains_emoji, hex_code
from .config import (
    PRESETS,
    Configuration,
    InvalidPreset,
    is_category_enabled,
    resolve_config,
)

__all__ = [
    "clean",
    "clean_with",
    "clean_lines",
    "normalize",
    "inspect",
    "find_issues",
    "is_clean",
    "Issue",
    "Report",
    "SummaryEntry",
]

logger = logging.getLogger(__name__)

ConfigArg = Union[Configuration, str, None]
IssueKind = Literal["control", "invisible", "typography"]

# ---------------------------------------------------------------------------
# Pre-compiled regexes
# ---------------------------------------------------------------------------

# Whitespace collapsing, keyed by (preserve_line_breaks, preserve_tabs).
# ASCII only: Unicode spaces are the "spaces" category's business.
RE_COLLAPSE = MappingProxyType(
    {
        (True, True): re.compile(r"[ \t]+"),
        (True, False): re.compile(r" +"),
        (False, True): re.compile(r"[ \n\r]+"),
        (False, False): re.compile(r"[ \t\n\r]+"),
    }
)

TRIM_CHARS = " \t\n\r"

# kept or dropped by the preserve_line_breaks / preserve_tabs flags
LAYOUT_CHARS = "\t\n\r"

_EMOJI_CATEGORIES = ("emoji", "emoji_modifier")


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Issue:
    """
    One flagged character found by :func:`inspect`.

    :param char: The character itself.
    :param code: Unicode scalar value.
    :param hex: ``U+XXXX`` form of ``code``. Shadows the builtin inside the
        class body only; the name is part of the exported report format.
    :param position: Zero-based code point index in the inspected string.
    :param category: Classifier category.
    :param name: Display name.
    """

    char: str
    code: int
    hex: str
    position: int
    category: Category
    name: str

    @property
    def kind(self) -> IssueKind:
        if self.category in ("control", "invisible"):
            return self.category
        return "typography"


@dataclass(frozen=True)
class SummaryEntry:
    count: int
    code: str


@dataclass(frozen=True)
class Report:
    """
    Inspection report. Everything except ``issues`` is derived.
    """

    issues: Tuple[Issue, ...] = field(default_factory=tuple)

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @property
    def is_clean(self) -> bool:
        return not self.issues

    @property
    def summary(self) -> Dict[str, SummaryEntry]:
        """
        Issues grouped by name, in first-seen order.
        """
        counts: Dict[str, int] = {}
        codes: Dict[str, str] = {}
        for issue in self.issues:
            counts[issue.name] = counts.get(issue.name, 0) + 1
            codes.setdefault(issue.name, issue.hex)
        return {name: SummaryEntry(n, codes[name]) for name, n in counts.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "clean": self.is_clean,
            "issue_count": self.issue_count,
            "issues": [
                {**asdict(issue), "kind": issue.kind} for issue in self.issues
            ],
            "summary": {name: asdict(s) for name, s in self.summary.items()},
        }

    def to_jsonl(self, path: str | Path) -> None:
        """
        Export issues as JSONL, one issue per line.
        """
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as f:
            for issue in self.issues:
                row = {**asdict(issue), "kind": issue.kind}
                f.write(json.dumps(row, ensure_ascii=False) + "\n")


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------


def _is_keyboard_char(ch: str, cfg: Configuration) -> bool:
    if " " <= ch <= "~":
        return True
    if ch in "\n\r":
        return cfg.preserve_line_breaks
    if ch == "\t":
        return cfg.preserve_tabs
    return False


def _substitute(ch: str, rule: Optional[CodepointRule], cfg: Configuration) -> str:
    """
    Output for a single character: itself, its replacement, or nothing.
    """
    if rule is not None and rule.category in _EMOJI_CATEGORIES:
        return ch
    if rule is not None and is_category_enabled(rule.category, cfg):
        # replacements are ASCII already
        return rule.replacement or ""
    if ch in LAYOUT_CHARS:
        return ch if _is_keyboard_char(ch, cfg) else ""
    if cfg.keyboard_only and not _is_keyboard_char(ch, cfg):
        return ""
    return ch


def _pass_characters(s: str, cfg: Configuration) -> str:
    emoji_context = contains_emoji(s)
    return "".join(
        _substitute(ch, classify(ord(ch), emoji_context=emoji_context), cfg)
        for ch in s
    )


def _pass_collapse_whitespace(s: str, cfg: Configuration) -> str:
    if not cfg.collapse_whitespace:
        return s
    pattern = RE_COLLAPSE[(cfg.preserve_line_breaks, cfg.preserve_tabs)]
    return pattern.sub(" ", s)


def _pass_trim(s: str, cfg: Configuration) -> str:
    return s.strip(TRIM_CHARS) if cfg.trim else s


# --- clean ------------------------------------------------------


def clean(text: str, config: ConfigArg = None, **overrides: Any) -> str:
    """
    Remove artifacts and normalize typography.

    :param text: Text to clean. Never mutated.
    :param config: :class:`~textsift.cleaner.config.Configuration`, preset
        name, or ``None`` for defaults (artifacts and spaces only).
    :param overrides: Configuration fields to override, e.g. ``dashes=True``.
    :returns: Cleaned text.
    :raises InvalidPreset: For an unknown preset name, before any scanning.
    """
    cfg = resolve_config(config, **overrides)
    if not text:
        return text

    s = _pass_characters(text, cfg)
    s = _pass_collapse_whitespace(s, cfg)
    s = _pass_trim(s, cfg)
    return s


def clean_with(text: str, preset: str = "standard") -> str:
    """
    Clean with a named preset (``strict``, ``standard``, ``lenient``, ``llm``).
    """
    return clean(text, preset)


def normalize(text: str) -> str:
    """
    Map every typography variant to ASCII and drop artifacts, keeping layout.
    """
    return clean(
        text,
        Configuration(
            dashes=True,
            quotes=True,
            ellipsis=True,
            preserve_line_breaks=True,
            preserve_tabs=True,
        ),
    )


def clean_lines(
    lines: Iterable[str], config: ConfigArg = None, **overrides: Any
) -> List[str]:
    """
    Clean an iterable of strings with :func:`~textsift.cleaner.clean.clean`.

    Each line is its own string: the emoji context is computed per line.
    """
    cfg = resolve_config(config, **overrides)
    return [clean(x, cfg) for x in lines]


# --- inspect ----------------------------------------------------


def inspect(text: str, config: ConfigArg = None, **overrides: Any) -> Report:
    """
    Report flagged characters without touching the text.

    A character is reported iff :func:`clean` with the same configuration
    would remove or substitute it on category grounds.
    """
    cfg = resolve_config(config, **overrides)
    emoji_context = contains_emoji(text)
    issues: List[Issue] = []
    for position, ch in enumerate(text):
        cp = ord(ch)
        rule = classify(cp, emoji_context=emoji_context)
        if rule is None or not is_category_enabled(rule.category, cfg):
            continue
        issues.append(
            Issue(
                char=ch,
                code=cp,
                hex=hex_code(cp),
                position=position,
                category=rule.category,
                name=rule.name,
            )
        )
    return Report(issues=tuple(issues))


def find_issues(text: str, config: ConfigArg = None, **overrides: Any) -> List[Issue]:
    return list(inspect(text, config, **overrides).issues)


def is_clean(text: str, config: ConfigArg = None, **overrides: Any) -> bool:
    return inspect(text, config, **overrides).is_clean


# --- CLI --------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="textsift",
        description="Remove invisible artifacts and normalize typography.",
    )
    ap.add_argument("file", nargs="?", help="input file (default: stdin)")
    ap.add_argument(
        "--preset", default=None, help=f"one of: {', '.join(PRESETS)}"
    )
    ap.add_argument("--inspect", action="store_true", help="print a JSON report")
    ap.add_argument("--dashes", action="store_true", default=None)
    ap.add_argument("--quotes", action="store_true", default=None)
    ap.add_argument("--ellipsis", action="store_true", default=None)
    ap.add_argument("--keyboard-only", action="store_true", default=None)
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: List[str] | None = None) -> None:
    """
    CLI entrypoint.

    Usage::

        textsift < infile.txt > outfile.txt
        textsift --inspect --preset llm infile.txt

    :param argv: Optional argv (defaults to ``sys.argv[1:]``).
    :returns: None.
    """
    ap = _build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides = {
        k: v
        for k, v in (
            ("dashes", args.dashes),
            ("quotes", args.quotes),
            ("ellipsis", args.ellipsis),
            ("keyboard_only", args.keyboard_only),
        )
        if v is not None
    }
    try:
        cfg = resolve_config(args.preset, **overrides)
    except InvalidPreset as exc:
        ap.error(str(exc))

    try:
        if args.file:
            data = Path(args.file).read_text(encoding="utf-8")
        else:
            data = sys.stdin.read()
    except UnicodeDecodeError as exc:
        ap.error(f"input is not valid UTF-8: {exc}")

    if args.inspect:
        rep = inspect(data, cfg)
        logger.info("Found %d issue(s)", rep.issue_count)
        sys.stdout.write(json.dumps(rep.to_dict(), ensure_ascii=False, indent=2) + "\n")
    else:
        sys.stdout.write(clean(data, cfg))
