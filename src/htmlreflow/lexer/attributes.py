"""Attribute sub-lexer.

Re-tokenizes the raw attribute-list substring captured by a START_TAG token
into AttributeToken units. The self-closing slash is captured by the
start-tag rule, so it never appears here.
"""

from __future__ import annotations

import re

from htmlreflow.errors import AttributeLexIncompleteError, StrictModeError
from htmlreflow.lexer.rules import ATTR_UNIT_PATTERN
from htmlreflow.tokens import AttributeToken, AttrQuote
from htmlreflow.utils.logger import get_logger

logger = get_logger(__name__)


def tokenize_attrs(span: str, *, strict: bool = False) -> list[AttributeToken]:
    """Split an attribute-list substring into attribute units.

    Args:
        span: Raw attribute list, e.g. ``' id="a"  class=b'``
        strict: Raise StrictModeError on opaque attribute text

    Returns:
        Attribute units in source order

    Raises:
        AttributeLexIncompleteError: The units did not cover the whole span
        StrictModeError: Opaque text was found while strict is set

    Example:
        >>> [a.render() for a in tokenize_attrs(' id="a"class=b')]
        ['id="a"', 'class=b']

    """
    tokens: list[AttributeToken] = []
    pos = 0
    span_len = len(span)

    while pos < span_len:
        match = ATTR_UNIT_PATTERN.match(span, pos)
        if match is None or match.end() == pos:
            break
        tokens.append(_to_attr_token(match, span, strict))
        pos = match.end()

    if pos != span_len:
        raise AttributeLexIncompleteError("Failed to parse attributes", span, pos)

    return tokens


def _to_attr_token(match: re.Match[str], span: str, strict: bool) -> AttributeToken:
    space = match.group("space")
    text = match.group("text")

    if text is not None:
        if strict:
            raise StrictModeError(
                f"Unexpected attribute text {text!r} in {span!r}",
                offset=match.start("text"),
            )
        logger.debug("Opaque attribute text %r", text)
        return AttributeToken(space=space, text=text)

    name = match.group("name")
    if match.group("double") is not None:
        return AttributeToken(space, name, match.group("double"), AttrQuote.DOUBLE)
    if match.group("single") is not None:
        return AttributeToken(space, name, match.group("single"), AttrQuote.SINGLE)
    if match.group("unquoted") is not None:
        return AttributeToken(space, name, match.group("unquoted"), AttrQuote.UNQUOTED)
    return AttributeToken(space, name)
