"""Markup mode scanner mixin."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from htmlreflow.errors import LexIncompleteError, StrictModeError
from htmlreflow.lexer.modes import PREFORMATTED_ELEMENTS, RAW_TEXT_ELEMENTS, LexerMode
from htmlreflow.lexer.rules import MARKUP_RULES
from htmlreflow.tokens import Token, TokenType
from htmlreflow.utils.logger import get_logger

if TYPE_CHECKING:
    from htmlreflow.location import SourceLocation

logger = get_logger(__name__)

# Rules that can only match at "<" with a ">" somewhere ahead
_BRACKETED = frozenset(
    {TokenType.COMMENT, TokenType.DOCTYPE, TokenType.START_TAG, TokenType.END_TAG}
)


class MarkupScannerMixin:
    """Mixin providing markup mode scanning logic.

    Tries each rule in MARKUP_RULES at the cursor; the first match becomes
    the token and the cursor moves past it. The FALLBACK rule matches any
    character, so a token is always produced while input remains.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _mode: LexerMode
    _raw_tag: str
    _in_pre: bool
    _strict: bool
    _next_closer: dict[str, int]

    def _emit(self, token_type: TokenType, start: int, end: int, **fields: object) -> Token:
        """Create a token and advance the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _location(self, offset: int) -> SourceLocation:
        """Line/column of an offset. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_markup(self) -> Token:
        """Scan one token in markup mode.

        Returns:
            The highest-priority token matching at the cursor.

        Raises:
            LexIncompleteError: No rule matched (lexer defect).
            StrictModeError: The fallback rule matched in strict mode.
        """
        pos = self._pos
        closable = self._source.startswith("<", pos) and self._ahead(">", pos)
        for rule in MARKUP_RULES:
            if rule.type in _BRACKETED and not closable:
                continue
            if rule.type is TokenType.COMMENT and not self._ahead("-->", pos):
                continue
            match = rule.pattern.match(self._source, pos)
            if match is not None and match.end() > pos:
                if rule.type is TokenType.START_TAG:
                    return self._emit_start_tag(match)
                if rule.type is TokenType.END_TAG:
                    return self._emit_end_tag(match)
                if rule.type is TokenType.FALLBACK:
                    self._check_fallback(match.group())
                return self._emit(rule.type, pos, match.end())

        raise LexIncompleteError(
            "Failed to parse document", offset=pos, location=self._location(pos)
        )

    def _emit_start_tag(self, match: re.Match[str]) -> Token:
        tag_name = match.group("tag_name").lower()
        self_closing = bool(match.group("slash"))
        token = self._emit(
            TokenType.START_TAG,
            match.start(),
            match.end(),
            tag_name=tag_name,
            attrs=match.group("attrs"),
            self_closing=self_closing,
        )
        if self_closing:
            return token
        if tag_name in PREFORMATTED_ELEMENTS:
            self._in_pre = True
        elif tag_name in RAW_TEXT_ELEMENTS and not self._in_pre:
            # Inside pre, script/style/textarea are ordinary tags
            self._mode = LexerMode.RAW_TEXT
            self._raw_tag = tag_name
        return token

    def _emit_end_tag(self, match: re.Match[str]) -> Token:
        tag_name = match.group("tag_name").lower()
        if tag_name in PREFORMATTED_ELEMENTS:
            # The first </pre> ends the region, nested <pre> tags included
            self._in_pre = False
        return self._emit(TokenType.END_TAG, match.start(), match.end(), tag_name=tag_name)

    def _check_fallback(self, char: str) -> None:
        if self._strict:
            raise StrictModeError(
                f"Unexpected character {char!r}",
                offset=self._pos,
                location=self._location(self._pos),
            )
        logger.debug("Fallback character %r at offset %d", char, self._pos)

    def _ahead(self, closer: str, pos: int) -> bool:
        """True if closer occurs at or after pos.

        The offset of the next occurrence is cached per closer, so repeated
        calls across the document scan the source once for each closer.
        """
        cached = self._next_closer.get(closer, -1)
        if cached < pos:
            found = self._source.find(closer, pos)
            cached = self._source_len if found == -1 else found
            self._next_closer[closer] = cached
        return cached < self._source_len
