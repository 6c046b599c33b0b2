# textsift mappings: static, read-only character tables.

from types import MappingProxyType

# Emoji blocks (inclusive ranges). Order matters only for readability.
EMOJI_RANGES = (
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F300, 0x1F5FF),  # misc symbols and pictographs
    (0x1F680, 0x1F6FF),  # transport and map
    (0x1F700, 0x1F77F),  # alchemical symbols
    (0x1F780, 0x1F7FF),  # geometric shapes extended
    (0x1F800, 0x1F8FF),  # supplemental arrows-C
    (0x1F900, 0x1F9FF),  # supplemental symbols and pictographs
    (0x1FA00, 0x1FA6F),  # chess symbols
    (0x1FA70, 0x1FAFF),  # symbols and pictographs extended-A
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats
    (0x1F1E6, 0x1F1FF),  # regional indicators (flags)
    (0x1F100, 0x1F1FF),  # enclosed alphanumeric supplement
    (0x1F200, 0x1F251),  # enclosed ideographic supplement
    (0x2300, 0x23FF),  # misc technical
    (0x2B50, 0x2B55),  # stars
)

# Emoji modifiers: never standalone emoji, never removed.
SKIN_TONE_RANGE = (0x1F3FB, 0x1F3FF)
VARIATION_SELECTOR_RANGE = (0xFE00, 0xFE0F)
KEYCAP = 0x20E3

ZWJ = 0x200D

# C0 / C1 controls with a dedicated display name.
CONTROL_NAMES = MappingProxyType(
    {
        0x00: "NULL",
        0x07: "BELL",
        0x08: "BACKSPACE",
        0x0B: "VERTICAL TAB",
        0x0C: "FORM FEED",
        0x1B: "ESCAPE",
        0x7F: "DELETE",
        0x85: "NEXT LINE",
    }
)

# TAB, LF, CR are layout whitespace, not artifacts.
LAYOUT_CONTROLS = frozenset({0x09, 0x0A, 0x0D})

# Zero-width and formatting characters.
INVISIBLE_CHARS = frozenset(
    {
        0x200B,  # zero width space
        0x200C,  # zero width non-joiner
        0x200D,  # zero width joiner (kept inside emoji sequences)
        0x200E,  # left-to-right mark
        0x200F,  # right-to-left mark
        0x202A,  # left-to-right embedding
        0x202B,  # right-to-left embedding
        0x202C,  # pop directional formatting
        0x202D,  # left-to-right override
        0x202E,  # right-to-left override
        0x2060,  # word joiner
        0x2061,  # function application
        0x2062,  # invisible times
        0x2063,  # invisible separator
        0x2064,  # invisible plus
        0x2066,  # left-to-right isolate
        0x2067,  # right-to-left isolate
        0x2068,  # first strong isolate
        0x2069,  # pop directional isolate
        0xFEFF,  # zero width no-break space (BOM)
        0xFFFC,  # object replacement character
        0xFFFD,  # replacement character
    }
)

# Unicode spaces → ASCII space
SPACE_VARIANTS = frozenset(
    {
        0x00A0,
        0x1680,
        0x2000,
        0x2001,
        0x2002,
        0x2003,
        0x2004,
        0x2005,
        0x2006,
        0x2007,
        0x2008,
        0x2009,
        0x200A,
        0x202F,
        0x205F,
        0x3000,
    }
)

# dashes → hyphen; soft hyphen is removed outright
DASH_MAP = MappingProxyType(
    {
        0x00AD: "",
        0x2013: "-",
        0x2014: "-",
        0x2015: "-",
        0x2212: "-",
        0xFE58: "-",
        0xFE63: "-",
    }
)

# typographic quotes → ASCII
QUOTE_MAP = MappingProxyType(
    {
        0x2018: "'",
        0x2019: "'",
        0x201A: "'",
        0x201B: "'",
        0x2039: "'",
        0x203A: "'",
        0x201C: '"',
        0x201D: '"',
        0x201E: '"',
        0x201F: '"',
        0x00AB: '"',
        0x00BB: '"',
    }
)

ELLIPSIS = 0x2026

# Display names that differ from (or are missing in) the Unicode database.
NAME_OVERRIDES = MappingProxyType(
    {
        0xFEFF: "ZERO WIDTH NO-BREAK SPACE (BOM)",
    }
)
