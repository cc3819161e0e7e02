"""Lexer operating modes and element-name constants."""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - MARKUP: Normal scanning with the ordered rule list
    - RAW_TEXT: Inside a raw-text element, scanning only for its end tag

    """

    MARKUP = auto()
    RAW_TEXT = auto()


# Elements whose body is never tokenized (copied through until the end tag)
RAW_TEXT_ELEMENTS = frozenset({"script", "style", "textarea"})

# Elements whose body is tokenized but never whitespace-normalized or wrapped
PREFORMATTED_ELEMENTS = frozenset({"pre"})

# Elements that never have children or an end tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "command",
        "embed",
        "frame",
        "hr",
        "image",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)
