"""Raw-text mode scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from htmlreflow.lexer.modes import LexerMode
from htmlreflow.lexer.rules import RAW_TEXT_END_PATTERNS
from htmlreflow.tokens import Token, TokenType
from htmlreflow.utils.logger import get_logger

if TYPE_CHECKING:
    from htmlreflow.location import SourceLocation

logger = get_logger(__name__)


class RawTextScannerMixin:
    """Mixin providing raw-text mode scanning logic.

    Inside script, style and textarea nothing is tokenized: the scanner
    searches for the literal end tag (case-insensitive) and emits everything
    before it as one RAW_TEXT token.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _mode: LexerMode
    _raw_tag: str

    def _emit(self, token_type: TokenType, start: int, end: int, **fields: object) -> Token:
        """Create a token and advance the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _location(self, offset: int) -> SourceLocation:
        """Line/column of an offset. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_raw_text(self) -> Iterator[Token]:
        """Scan a raw-text element body and its end tag.

        Yields:
            RAW_TEXT token for a non-empty body, then the END_TAG token.
            An unterminated body runs to the end of input.
        """
        tag = self._raw_tag
        start = self._pos
        self._mode = LexerMode.MARKUP
        self._raw_tag = ""

        end_match = RAW_TEXT_END_PATTERNS[tag].search(self._source, start)
        if end_match is None:
            logger.debug("Unterminated <%s> at %s", tag, self._location(start))
            yield self._emit(TokenType.RAW_TEXT, start, self._source_len)
            return

        if end_match.start() > start:
            yield self._emit(TokenType.RAW_TEXT, start, end_match.start())
        yield self._emit(
            TokenType.END_TAG, end_match.start(), end_match.end(), tag_name=tag
        )
