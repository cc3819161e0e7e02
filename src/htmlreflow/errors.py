"""Exception classes for htmlreflow.

The formatter is lenient: for any input the lexer's fallback rule always
advances, so these errors signal a lexer defect (or a strict-mode test
assertion), never bad markup.
"""

from __future__ import annotations

from htmlreflow.location import SourceLocation


class HtmlReflowError(Exception):
    """Base exception for all htmlreflow errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(HtmlReflowError):
    """Error during tokenization.

    Raised when a lexer did not account for all of its input.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize lex error with optional position.

        Args:
            message: Error description
            offset: Absolute offset where lexing stopped
            location: Line/column of the offset, if the source was available
        """
        self.message = message
        self.offset = offset
        self.location = location

        if location is not None:
            super().__init__(f"{location} {message}")
        elif offset is not None:
            super().__init__(f"offset {offset}: {message}")
        else:
            super().__init__(message)


class LexIncompleteError(LexError):
    """Top-level tokenization did not consume the whole document."""


class AttributeLexIncompleteError(LexError):
    """Attribute sub-lexing did not consume the whole attribute span.

    The offset is relative to the start of the attribute span.
    """

    def __init__(self, message: str, span: str, offset: int) -> None:
        """Initialize with the attribute span that failed.

        Args:
            message: Error description
            span: The raw attribute-list substring
            offset: Offset within span where consumption stopped
        """
        self.span = span
        super().__init__(f"{message}: {span!r}", offset=offset)


class StrictModeError(LexError):
    """A lenient recovery path was taken while strict mode was enabled.

    Strict mode exists for regression tests: it flags inputs that reach the
    single-character fallback or opaque attribute text.
    """
