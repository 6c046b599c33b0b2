import dataclasses

import pytest

from textsift import (
    PRESETS,
    Configuration,
    InvalidPreset,
    clean,
    clean_lines,
    clean_with,
    get_preset,
    inspect,
    normalize,
)
from textsift.cleaner.clean import RE_COLLAPSE


def test_registry_names():
    assert list(PRESETS) == ["strict", "standard", "lenient", "llm"]
    assert get_preset("llm") is PRESETS["llm"]


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        PRESETS["custom"] = Configuration()


def test_configuration_is_frozen():
    cfg = Configuration()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.dashes = True


def test_unknown_preset_lists_valid_names():
    with pytest.raises(InvalidPreset, match="strict, standard, lenient, llm") as exc:
        clean("text", "aggressive")
    assert exc.value.name == "aggressive"
    assert isinstance(exc.value, ValueError)


def test_unknown_preset_raises_before_scanning():
    with pytest.raises(InvalidPreset):
        clean("", "nope")
    with pytest.raises(InvalidPreset):
        inspect("", "nope")
    with pytest.raises(InvalidPreset):
        clean_with("x", "nope")


def test_unknown_override_is_a_type_error():
    with pytest.raises(TypeError):
        clean("x", emojis=False)


def test_strict_preset():
    raw = "  Hello\u00a0\u201cworld\u201d\u2026\n\tnext При  "
    assert clean(raw, "strict") == 'Hello "world"...next'


def test_standard_preset():
    raw = "  \u2018Hi\u2019 \u2014 there\u2026\n\tok\u00a0 "
    assert clean_with(raw) == "'Hi' - there...\nok"


def test_lenient_preset_keeps_typography():
    raw = " \u201cq\u201d\u2014x\u2026\u00a0\u200b "
    assert clean(raw, "lenient") == " \u201cq\u201d\u2014x\u2026  "


def test_llm_preset_collapses_spaces_but_keeps_lines():
    raw = "Sure!\u00a0 Here\u2019s   the\u2014answer\u2026\n\n  Done\u200b."
    assert clean(raw, "llm") == "Sure! Here's the-answer...\n\n Done."


def test_preset_with_overrides():
    raw = "a\u2014b"
    assert clean(raw, "lenient", dashes=True) == "a-b"
    assert PRESETS["lenient"].dashes is False


def test_explicit_configuration_object():
    cfg = Configuration(ellipsis=True, trim=True)
    assert clean("  Wait\u2026  ", cfg) == "Wait..."


def test_normalize_converts_all_typography():
    raw = "\u201cA\u201d \u2013 \u2018b\u2019\u2026\t\u00a0c\n"
    assert normalize(raw) == "\"A\" - 'b'...\t c\n"


def test_clean_lines():
    lines = ["a\u00a0b", "\U0001F44B\u200d", "x\u200dy"]
    assert clean_lines(lines) == ["a b", "\U0001F44B\u200d", "xy"]
    assert clean_lines(["a\u2014b"], dashes=True) == ["a-b"]


@pytest.mark.parametrize(
    "preserve_line_breaks, preserve_tabs, expected",
    [
        (True, True, "a b\n\n c"),
        (True, False, "a b\n\n c"),
        (False, True, "a \t b c"),
        (False, False, "a b c"),
    ],
)
def test_collapse_whitespace_modes(preserve_line_breaks, preserve_tabs, expected):
    raw = "a  \t b\n\n c"
    cleaned = clean(
        raw,
        collapse_whitespace=True,
        preserve_line_breaks=preserve_line_breaks,
        preserve_tabs=preserve_tabs,
    )
    assert cleaned == expected


@pytest.mark.parametrize(
    "preset, expected",
    [("strict", "ab"), ("standard", "ab"), ("lenient", "a\tb"), ("llm", "ab")],
)
def test_presets_drop_tabs_unless_preserved(preset, expected):
    assert clean("a\tb", preset) == expected


def test_layout_flags_drop_without_keyboard_only():
    assert clean("a\tb\nc\r\n", preserve_tabs=False) == "ab\nc\r\n"
    assert clean("a\tb\nc\r\n", preserve_line_breaks=False) == "a\tbc"
    # not preserving tabs never keeps more than preserving them
    raw = "a \t\t b"
    assert clean(raw, preserve_tabs=False, collapse_whitespace=True) == "a b"
    assert clean(raw, preserve_tabs=True, collapse_whitespace=True) == "a b"


def test_keyboard_only_keeps_ascii_and_emoji():
    raw = "При \U0001F44B world\u2014!\n"
    assert clean(raw, keyboard_only=True) == " \U0001F44B world!\n"
    assert clean(raw, keyboard_only=True, preserve_line_breaks=False) == " \U0001F44B world!"


def test_keyboard_only_overrides_disabled_categories():
    cfg = Configuration(spaces=False, quotes=False, keyboard_only=True)
    assert clean("a\u00a0b\u2019", cfg) == "ab"
    assert inspect("a\u00a0b\u2019", cfg).issue_count == 0


def test_trim_only_touches_ascii_whitespace():
    assert clean(" \t x \n", trim=True) == "x"
    assert clean("\u00a0x\u00a0", spaces=False, trim=True) == "\u00a0x\u00a0"


def test_collapse_patterns_are_read_only():
    with pytest.raises(TypeError):
        RE_COLLAPSE[(True, True)] = None
