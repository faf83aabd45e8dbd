"""Map free-form equation text onto the small ASCII alphabet the parser reads.

The output contains only lowercase letters, digits, ``.``, ``/``, ``+``,
``-`` and ``=``, plus whatever stray characters the user typed that the
parser will reject later.  Normalizing twice gives the same string.
"""

import re

# Unicode minus sign, hyphen / dash block, small and fullwidth hyphen-minus.
_MINUS_CHARS = "−‐‑‒–—―﹣－"

# Middle dot, dot operator, multiplication sign and the ASCII asterisk.
_TIMES_CHARS = "·⋅×*"

# Vulgar fraction glyphs: ¼ ½ ¾ and the U+2150..U+215E block.
VULGAR_FRACTIONS = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅐": "1/7",
    "⅑": "1/9",
    "⅒": "1/10",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

_TRANSLATION = str.maketrans(
    {
        **{ch: "-" for ch in _MINUS_CHARS},
        **{ch: None for ch in _TIMES_CHARS},
        "(": None,
        ")": None,
        **VULGAR_FRACTIONS,
    }
)

_WHITESPACE = re.compile(r"\s+")


def normalize(text) -> str:
    """Return the canonical ASCII form of *text*.

    ``None`` and blank strings become ``""``.  Never raises.
    """
    if not text:
        return ""
    s = _WHITESPACE.sub("", str(text))
    return s.translate(_TRANSLATION).lower()
