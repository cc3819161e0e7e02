"""Source location tracking for error messages and debugging.

Tokens only carry absolute offsets; a SourceLocation is computed on demand
when an error needs a human-readable position.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position in source text.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute offset in the source string (0-indexed)

    Examples:
            >>> loc = SourceLocation.from_offset("<p>\\n<b", 5)
            >>> str(loc)
            '2:2'

    """

    lineno: int
    col_offset: int
    offset: int = 0

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "10:5"
        """
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(cls, source: str, offset: int) -> SourceLocation:
        """Compute the line and column of an absolute offset.

        Args:
            source: The complete source string
            offset: Absolute offset (clamped to the source bounds)

        Returns:
            SourceLocation for the offset
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(lineno=lineno, col_offset=offset - line_start + 1, offset=offset)
