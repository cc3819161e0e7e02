"""Scannerless lexer with O(n) forward progress.

Partitions any input into tokens: each step either matches a rule at the
cursor or falls back to a single character, so the cursor always advances
and the tokens cover the source exactly once, left to right.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from htmlreflow.lexer.modes import LexerMode
from htmlreflow.lexer.scanners import MarkupScannerMixin, RawTextScannerMixin
from htmlreflow.location import SourceLocation
from htmlreflow.tokens import Token, TokenType


class Lexer(
    MarkupScannerMixin,
    RawTextScannerMixin,
):
    """Mode-switching lexer for arbitrary markup.

    Usage:
            >>> lexer = Lexer("<p class=x>Hi</p>")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(START_TAG, '<p class=x>', 0:11)
        Token(TEXT, 'Hi', 11:13)
        Token(END_TAG, '</p>', 13:17)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_mode",
        "_raw_tag",  # Element whose end tag RAW_TEXT mode is looking for
        "_in_pre",  # Inside a pre body, where raw-text elements are not entered
        "_strict",
        "_next_closer",  # Next offset of ">" and "-->", or len(source) if none
    )

    def __init__(self, source: str, *, strict: bool = False) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            strict: Raise StrictModeError when the fallback rule is used
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._mode = LexerMode.MARKUP
        self._raw_tag = ""
        self._in_pre = False
        self._strict = strict
        self._next_closer: dict[str, int] = {}

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len
        while self._pos < source_len:
            yield from self._dispatch_mode()

    def _dispatch_mode(self) -> Iterator[Token]:
        """Dispatch to the scanner for the current mode."""
        if self._mode == LexerMode.MARKUP:
            yield self._scan_markup()
        elif self._mode == LexerMode.RAW_TEXT:
            yield from self._scan_raw_text()

    def _emit(self, token_type: TokenType, start: int, end: int, **fields: object) -> Token:
        """Create a token for source[start:end] and move the cursor to end.

        Args:
            token_type: The token type.
            start: Start offset in source.
            end: End offset in source.
            **fields: Kind-specific Token fields (tag_name, attrs, self_closing).

        Returns:
            The new Token.
        """
        self._pos = end
        return Token(token_type, self._source[start:end], start, end, **fields)  # type: ignore[arg-type]

    def _location(self, offset: int) -> SourceLocation:
        """Line/column of an offset, for error and debug messages."""
        return SourceLocation.from_offset(self._source, offset)
