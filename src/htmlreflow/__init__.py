"""
htmlreflow: Lenient HTML re-serializer

Normalizes whitespace, indents by nesting depth and soft-wraps to a column
budget, while leaving pre/script/style/textarea bodies and quoted strings
untouched. Never builds a tree and never rejects input: malformed markup
degrades gracefully into some formatted output.

Quick Start:
    >>> from htmlreflow import format
    >>> format("<body>\\n<main   class='x'></main></body>")
    "<body>\\n  <main class='x'></main></body>"

    >>> # Narrower output, four-space indent
    >>> out = format(html, indent="    ", width=60)

Rewrite Hooks:
    >>> def shout(token, space):
    ...     return [space, token.upper()] if not token.startswith("<") else None
    >>> format("<p>hello world</p>", transform=shout)
    '<p>HELLO WORLD</p>'

Installation:
    pip install htmlreflow              # zero runtime dependencies
    pip install htmlreflow[test]        # + pytest, hypothesis
"""

from htmlreflow.assembler import OutputAssembler
from htmlreflow.config import (
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from htmlreflow.errors import (
    AttributeLexIncompleteError,
    HtmlReflowError,
    LexError,
    LexIncompleteError,
    StrictModeError,
)
from htmlreflow.hooks import ElementBodyRewriter
from htmlreflow.lexer import Lexer, tokenize_attrs
from htmlreflow.location import SourceLocation
from htmlreflow.printer import Printer
from htmlreflow.protocols import RewriteHook
from htmlreflow.tokens import AttributeToken, AttrQuote, Token, TokenType

__version__ = "0.3.0"


def format(
    text: str,
    indent: str | None = None,
    width: int | None = None,
    transform: RewriteHook | None = None,
    *,
    strict: bool | None = None,
) -> str:
    """Format HTML text.

    Arguments left as None fall back to the active FormatConfig (see
    htmlreflow.config), whose defaults are a two-space indent, width 80,
    no transform and lenient lexing.

    Args:
        text: Arbitrary, possibly malformed markup
        indent: String inserted once per nesting level
        width: Soft column budget; only a single unbreakable span may exceed it
        transform: Optional per-span rewrite hook (see RewriteHook)
        strict: Raise StrictModeError when lenient recovery paths are used

    Returns:
        The formatted text

    Raises:
        LexIncompleteError: The lexer could not account for the whole input
        AttributeLexIncompleteError: An attribute list was not fully consumed
        StrictModeError: Only when strict is enabled

    Example:
        >>> format("<body>  </body>")
        '<body> </body>'
        >>> format('<div id="container"class="grid"></div>')
        '<div id="container" class="grid"></div>'
        >>> format("<body></body>\\n\\n\\n")
        '<body></body>\\n'
    """
    base = get_format_config()
    config = FormatConfig(
        indent=base.indent if indent is None else indent,
        width=base.width if width is None else width,
        transform=base.transform if transform is None else transform,
        strict=base.strict if strict is None else strict,
    )
    return Printer(config).render(text)


__all__ = [
    # Main API
    "format",
    "Printer",
    # Configuration
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
    # Hooks
    "RewriteHook",
    "ElementBodyRewriter",
    # Lexer
    "Lexer",
    "tokenize_attrs",
    "Token",
    "TokenType",
    "AttributeToken",
    "AttrQuote",
    "SourceLocation",
    # Output
    "OutputAssembler",
    # Errors
    "HtmlReflowError",
    "LexError",
    "LexIncompleteError",
    "AttributeLexIncompleteError",
    "StrictModeError",
]
