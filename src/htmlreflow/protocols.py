"""Protocols for htmlreflow.

Defines the contract for rewrite hooks, the per-span callback the printer
invokes while emitting output.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class RewriteHook(Protocol):
    """Protocol for per-span rewrite hooks.

    The printer calls the hook once for every non-whitespace token it is
    about to emit, in document order. A raw-text element body (script,
    style, textarea, pre) arrives as a single token.

    Return values:
        None: pass the token through unchanged.
        []: suppress the token. The hook keeps whatever it needs in its own
            state and can re-emit it later.
        [str, ...]: replacement tokens. Each is fed back through emission:
            whitespace strings become pending whitespace, anything else joins
            the current span. Replacements are not passed to the hook again.

    Thread Safety:
        Hooks are invoked synchronously, once per token, with no re-entrancy.
        Any accumulated state is owned by the hook.

    """

    def __call__(self, token: str, space: str) -> Sequence[str] | None:
        """Rewrite one token.

        Args:
            token: The token text about to be emitted.
            space: Whitespace pending before the token ("" if none).

        Returns:
            None, an empty sequence, or replacement tokens.

        """
        ...
