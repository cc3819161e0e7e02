"""Reusable rewrite hooks.

A rewrite hook sees every non-whitespace token the printer emits (see
RewriteHook in htmlreflow.protocols). Hooks that need more than one token of
context keep their own state between calls. ElementBodyRewriter is the
common case: it watches for a start tag and replaces the body that follows.

Example:
    >>> import re
    >>> from htmlreflow import format
    >>> strip = ElementBodyRewriter(
    ...     "script", lambda body: re.sub(r"^\\s*//.*$", "", body, flags=re.M)
    ... )
    >>> format("<script>\\n// note\\nrun();\\n</script>", transform=strip)
    '<script>\\nrun();\\n</script>'
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from htmlreflow.lexer.modes import RAW_TEXT_ELEMENTS


class ElementBodyRewriter:
    """Replaces the body of each ``tag`` element with ``rewrite(body)``.

    Only raw-text elements (script, style, textarea) are accepted. Their body
    reaches the hook as a single verbatim token straight after the start
    tag's ``>``, so it is swapped in place and the whitespace around the
    element is left alone. Empty and whitespace-only bodies are never passed
    to ``rewrite``. A body with no end tag is still rewritten.

    Attributes:
        tag: Lower-cased element name to rewrite
        rewrite: Callback turning a body into its replacement

    Raises:
        ValueError: tag is not a raw-text element

    """

    __slots__ = ("tag", "rewrite", "_in_start_tag", "_awaiting_body")

    def __init__(self, tag: str, rewrite: Callable[[str], str]) -> None:
        tag = tag.lower()
        if tag not in RAW_TEXT_ELEMENTS:
            raise ValueError(
                f"Cannot rewrite the body of <{tag}>; "
                f"expected one of {', '.join(sorted(RAW_TEXT_ELEMENTS))}"
            )
        self.tag = tag
        self.rewrite = rewrite
        self._in_start_tag = False
        self._awaiting_body = False

    @property
    def awaiting_body(self) -> bool:
        """True between a target start tag's ``>`` and the token after it."""
        return self._awaiting_body

    def __call__(self, token: str, space: str) -> Sequence[str] | None:
        if self._awaiting_body:
            self._awaiting_body = False
            if token == f"</{self.tag}>":
                return None
            return [self.rewrite(token)]

        if self._in_start_tag:
            if token == ">":
                self._in_start_tag = False
                self._awaiting_body = True
            elif token == " />":
                self._in_start_tag = False
        elif token == f"<{self.tag}":
            self._in_start_tag = True
        return None
