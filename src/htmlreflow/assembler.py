"""Output assembler with deferred whitespace decisions.

Builds on the StringBuilder pattern (append fragments, join once), adding
the one piece of lookahead the wrap algorithm needs: whitespace is held back
until the next span is complete, so the decision between a space, a forced
line break and a kept line break can see how long that span is.

Thread Safety:
OutputAssembler instances are local to each format() call.
No shared mutable state.

"""

from __future__ import annotations

from htmlreflow.utils.logger import get_logger

logger = get_logger(__name__)


class OutputAssembler:
    """Buffers output fragments and applies the wrap/indent algorithm.

    Whitespace and non-whitespace arrive separately:

    - push_whitespace() flushes the current span and records the whitespace
      as pending.
    - push_span() appends text to the current span. The span remembers the
      nesting level it started at; that level decides its indentation.

    When a span is flushed, the pending whitespace becomes:

    - a newline plus ``indent * span_level`` if it is exactly "\\n";
    - a forced newline (same indent) if it would push the span's first line
      past ``width``;
    - otherwise itself, unchanged.

    Usage:
            >>> out = OutputAssembler(indent="  ", width=80)
            >>> out.push_span("<p>", 0)
            >>> out.push_whitespace("\\n")
            >>> out.push_span("Hi", 1)
            >>> out.build()
            '<p>\\n  Hi'

    """

    __slots__ = (
        "_parts",
        "_indent",
        "_width",
        "line_length",
        "pending",
        "span",
        "span_level",
    )

    def __init__(self, indent: str = "  ", width: int = 80) -> None:
        """Initialize an empty assembler.

        Args:
            indent: String inserted once per nesting level
            width: Soft column budget
        """
        self._parts: list[str] = []
        self._indent = indent
        self._width = width
        self.line_length = 0
        self.pending = ""
        self.span = ""
        self.span_level = 0

    def push_whitespace(self, space: str) -> None:
        """Flush the current span and make ``space`` the pending whitespace."""
        self.flush()
        self.pending = space

    def push_span(self, text: str, level: int) -> None:
        """Append text to the current span.

        Args:
            text: Non-whitespace (or verbatim) text
            level: Current nesting level; recorded if the span is new
        """
        if not self.span:
            self.span_level = level
        self.span += text

    def flush(self) -> None:
        """Emit pending whitespace and the current span as one fragment."""
        space = self.pending
        span = self.span

        if space and space != "\n":
            newline = span.find("\n")
            first_line = len(span) if newline == -1 else newline
            if self.line_length + len(space) + first_line > self._width:
                space = "\n"
                if first_line > self._width:
                    logger.debug("Span wider than %d columns: %r", self._width, span[:40])

        indent = self._indent * self.span_level if space == "\n" and span else ""
        out = f"{space}{indent}{span}"

        if out:
            pos = out.rfind("\n")
            if pos == -1:
                self.line_length += len(out)
            else:
                self.line_length = len(out) - pos - 1
            self._parts.append(out)

        self.span = self.pending = ""

    def build(self) -> str:
        """Flush and join all fragments.

        A trailing run of whitespace-only fragments is dropped; if that run
        contained a line break, exactly one newline ends the output.

        Returns:
            The assembled output
        """
        self.flush()

        newline = False
        while self._parts and self._parts[-1].isspace():
            if "\n" in self._parts.pop():
                newline = True

        if newline:
            self._parts.append("\n")

        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)
