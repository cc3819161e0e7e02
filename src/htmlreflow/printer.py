"""Single-pass printer that re-serializes a token stream.

Consumes Lexer tokens, tracks nesting depth and verbatim regions, and feeds
normalized output units to an OutputAssembler, which makes the width-aware
whitespace decisions.

Thread Safety:
All per-call state is encapsulated in PrintContext, created fresh for each
render() call. A Printer holds only its immutable FormatConfig, so one
instance can be shared across threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from htmlreflow.assembler import OutputAssembler
from htmlreflow.config import FormatConfig
from htmlreflow.lexer import Lexer, tokenize_attrs
from htmlreflow.lexer.modes import PREFORMATTED_ELEMENTS, RAW_TEXT_ELEMENTS, VOID_ELEMENTS
from htmlreflow.protocols import RewriteHook
from htmlreflow.tokens import Token, TokenType
from htmlreflow.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class PrintContext:
    """Per-call mutable state.

    Attributes:
        out: Output assembler for this call
        level: Current nesting depth (never negative)
        special: Raw-text element being copied through, or None
        in_pre: Inside a pre body; every token is verbatim until </pre>
        verbatim: Verbatim text waiting to be flushed as a single token
    """

    out: OutputAssembler
    level: int = 0
    special: str | None = None
    in_pre: bool = False
    verbatim: list[str] = field(default_factory=list)


class Printer:
    """Re-serializes markup according to a FormatConfig.

    Usage:
            >>> Printer(FormatConfig()).render("<body>\\n<main></main></body>")
            '<body>\\n  <main></main></body>'

    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatConfig) -> None:
        self._config = config

    @property
    def config(self) -> FormatConfig:
        return self._config

    def render(self, source: str) -> str:
        """Format source markup.

        Args:
            source: Arbitrary, possibly malformed markup

        Returns:
            The formatted text

        Raises:
            LexIncompleteError: The lexer could not account for the input
            AttributeLexIncompleteError: An attribute list was not consumed
            StrictModeError: A lenient path was taken with strict enabled
        """
        config = self._config
        ctx = PrintContext(out=OutputAssembler(config.indent, config.width))

        for token in Lexer(source, strict=config.strict).tokenize():
            if ctx.in_pre:
                self._handle_pre(token, ctx)
            elif ctx.special is not None:
                self._handle_special(token, ctx)
            else:
                self._handle(token, ctx)

        self._flush_verbatim(ctx)
        return ctx.out.build()

    # =========================================================================
    # Token handlers
    # =========================================================================

    def _handle(self, token: Token, ctx: PrintContext) -> None:
        match token.type:
            case TokenType.START_TAG:
                self._open(token, ctx)
            case TokenType.END_TAG:
                self._close(token.tag_name, ctx)
            case TokenType.WHITESPACE:
                newlines = token.value.count("\n")
                if newlines:
                    # At most one blank line survives
                    self._emit(ctx, *["\n"] * min(newlines, 2))
                else:
                    self._emit(ctx, " ")
            case TokenType.RAW_TEXT:
                ctx.verbatim.append(token.value)
            case _:
                self._emit(ctx, token.value)

    def _handle_special(self, token: Token, ctx: PrintContext) -> None:
        if token.type is TokenType.END_TAG and token.tag_name == ctx.special:
            ctx.special = None
            self._close(token.tag_name, ctx)
        else:
            ctx.verbatim.append(token.value)

    def _handle_pre(self, token: Token, ctx: PrintContext) -> None:
        if token.type is TokenType.END_TAG and token.tag_name in PREFORMATTED_ELEMENTS:
            ctx.in_pre = False
            self._close(token.tag_name, ctx)
        else:
            ctx.verbatim.append(token.value)

    def _open(self, token: Token, ctx: PrintContext) -> None:
        name = token.tag_name
        self._emit(ctx, f"<{name}")
        ctx.level += 1

        if token.attrs:
            previous = None
            for attr in tokenize_attrs(token.attrs, strict=self._config.strict):
                space = "\n" if attr.has_newline else " "
                if attr.is_text:
                    if attr.space:
                        self._emit(ctx, space)
                elif attr.space or previous is None or not previous.is_text:
                    # Also separates attributes butted together: id="a"class="b"
                    self._emit(ctx, space)
                self._emit(ctx, attr.render())
                previous = attr

        self._emit(ctx, " />" if token.self_closing else ">")

        if token.self_closing or name in VOID_ELEMENTS:
            ctx.level -= 1
        elif name in RAW_TEXT_ELEMENTS:
            ctx.special = name
        elif name in PREFORMATTED_ELEMENTS:
            ctx.in_pre = True

    def _close(self, name: str, ctx: PrintContext) -> None:
        if ctx.level > 0:
            ctx.level -= 1
        else:
            logger.debug("End tag </%s> at depth 0", name)
        self._emit(ctx, f"</{name}>")

    # =========================================================================
    # Emission
    # =========================================================================

    def _emit(self, ctx: PrintContext, *tokens: str) -> None:
        self._flush_verbatim(ctx)
        for token in tokens:
            self._add_token(ctx, token, False, self._config.transform)

    def _flush_verbatim(self, ctx: PrintContext) -> None:
        if ctx.verbatim:
            body = "".join(ctx.verbatim)
            ctx.verbatim.clear()
            self._add_token(ctx, body, True, self._config.transform)

    def _add_token(
        self,
        ctx: PrintContext,
        token: str,
        verbatim: bool,
        transform: RewriteHook | None,
    ) -> None:
        """Route one output unit to the assembler, through the hook if set.

        Args:
            ctx: Per-call state
            token: Output text
            verbatim: Never treat token as collapsible whitespace
            transform: Rewrite hook, or None for replacement tokens
        """
        out = ctx.out
        is_space = token.isspace()

        if transform is not None and not is_space:
            replacement = transform(token, out.pending)
            if replacement is not None:
                # The hook decides the leading whitespace of a new span
                if not out.span:
                    out.pending = ""
                for new_token in replacement:
                    self._add_token(ctx, new_token, verbatim, None)
                return

        if is_space and not verbatim:
            out.push_whitespace(token)
        else:
            out.push_span(token, ctx.level)
