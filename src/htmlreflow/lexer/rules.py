"""Ordered matcher rules for the markup-mode lexer.

Each rule pairs a token type with a compiled pattern. The lexer tries the
rules in MARKUP_RULES order at the cursor and takes the first match, so
priority is the tuple order. Patterns are always applied with an explicit
position (``pattern.match(source, pos)``).

Attribute units are possessive (``*+``): once a unit matched it is never
re-split, which keeps start-tag matching linear on unterminated tags.
Requires Python 3.11+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from htmlreflow.lexer.modes import RAW_TEXT_ELEMENTS
from htmlreflow.tokens import TokenType

TAG_NAME = r"[A-Za-z][^/\s>]*"

# Quoted strings in text and templates. Word characters on either side mean
# an apostrophe (Collector's), not a string.
_DOUBLE_QUOTED = r'"(?:\\[^<>\n]|[^\\"<>\n])*"'
_SINGLE_QUOTED = r"'(?:\\[^<>\n]|[^\\'<>\n])*'"
QUOTED_STRING = (
    rf"(?<![A-Za-z0-9_])(?:{_DOUBLE_QUOTED}|{_SINGLE_QUOTED})(?![A-Za-z0-9_])"
)

ATTR_NAME = r"""[^=\s>/"']+(?=[=>\s]|\Z)"""

# Unquoted values stop at whitespace, quotes, backtick, "=", "<" or ">"
_ATTR_VALUE = (
    r'"(?P<double>[^"]*)"'
    r"|'(?P<single>[^']*)'"
    r"|(?P<unquoted>[^\s\"'`=<>]+)"
)

# Opaque text must not swallow the self-closing slash
_ATTR_TEXT = rf"{QUOTED_STRING}|[^\s>]*[^\s>/]|[^\s>]*/(?!\s*>)"

ATTR_UNIT = (
    r"(?P<space>\s*)"
    rf"(?:(?P<name>{ATTR_NAME})(?:\s*=\s*(?:{_ATTR_VALUE}))?"
    rf"|(?P<text>{_ATTR_TEXT}))"
)

# Same shape without capture groups, for embedding in the start-tag rule
_ATTR_UNIT_BARE = (
    r"\s*"
    rf"(?:{ATTR_NAME}(?:\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s\"'`=<>]+))?"
    rf"|{_ATTR_TEXT})"
)


@dataclass(frozen=True, slots=True)
class Rule:
    """A token type and the pattern that recognizes it."""

    type: TokenType
    pattern: re.Pattern[str]


MARKUP_RULES: tuple[Rule, ...] = (
    Rule(TokenType.COMMENT, re.compile(r"<!--.*?-->", re.DOTALL)),
    Rule(TokenType.DOCTYPE, re.compile(r"<![^>]+>")),
    Rule(
        TokenType.START_TAG,
        re.compile(
            rf"<(?P<tag_name>{TAG_NAME})"
            rf"(?P<attrs>(?:{_ATTR_UNIT_BARE})*+)"
            r"\s*(?P<slash>/?)\s*>"
        ),
    ),
    Rule(TokenType.END_TAG, re.compile(rf"</(?P<tag_name>{TAG_NAME})\s*>")),
    Rule(TokenType.WHITESPACE, re.compile(r"\s+")),
    Rule(TokenType.QUOTED_STRING, re.compile(QUOTED_STRING)),
    Rule(TokenType.TEXT, re.compile(r"""[^<\s"']+|["']""")),
    Rule(TokenType.FALLBACK, re.compile(r".", re.DOTALL)),
)

ATTR_UNIT_PATTERN = re.compile(ATTR_UNIT)

# Literal, case-insensitive end tag for each raw-text element
RAW_TEXT_END_PATTERNS: dict[str, re.Pattern[str]] = {
    name: re.compile(rf"</{name}\s*>", re.IGNORECASE) for name in RAW_TEXT_ELEMENTS
}
