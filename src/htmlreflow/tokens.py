"""Token and TokenType definitions for the htmlreflow lexer.

The lexer produces a stream of Token objects that the printer consumes.
Each Token is a classified, contiguous slice of the source.

Thread Safety:
Token and AttributeToken are frozen (immutable) and safe to share across
threads. TokenType and AttrQuote are enums (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Markup-mode tokens are listed in the priority order the lexer tries them.
    RAW_TEXT is only produced in raw-text mode (script/style/textarea bodies).

    """

    COMMENT = auto()  # <!-- ... -->
    DOCTYPE = auto()  # <!doctype html>, <![CDATA[ ... >
    START_TAG = auto()  # <name attrs... /?>
    END_TAG = auto()  # </name>
    WHITESPACE = auto()
    QUOTED_STRING = auto()  # "..." or '...'
    TEXT = auto()
    FALLBACK = auto()  # Any single character nothing else matched

    RAW_TEXT = auto()  # Verbatim body of a raw-text element


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source
        start: Absolute start offset in source
        end: Absolute end offset in source
        tag_name: Lower-cased tag name (START_TAG and END_TAG only)
        attrs: Raw attribute-list substring (START_TAG only)
        self_closing: Trailing "/" before ">" was present (START_TAG only)

    """

    type: TokenType
    value: str
    start: int
    end: int
    tag_name: str = ""
    attrs: str = ""
    self_closing: bool = False

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.start}:{self.end})"


class AttrQuote(Enum):
    """Quoting style of an attribute value."""

    DOUBLE = auto()
    SINGLE = auto()
    UNQUOTED = auto()


@dataclass(frozen=True, slots=True)
class AttributeToken:
    """One unit of a start tag's attribute list.

    Either a ``name`` (with an optional value) or an opaque ``text`` fragment
    for content that does not look like ``name[=value]``, such as templating
    directives (``{{#if x}}``, ``{% if %}``) or stray characters.

    Attributes:
        space: Whitespace preceding the unit in the source (may be empty)
        name: Attribute name, or None for opaque text
        value: Attribute value without quotes, or None if absent
        quote: Quoting style of the value, or None if absent
        text: Opaque attribute text, or None for a name unit

    """

    space: str
    name: str | None = None
    value: str | None = None
    quote: AttrQuote | None = None
    text: str | None = None

    @property
    def is_text(self) -> bool:
        """True if this unit is opaque attribute text."""
        return self.text is not None

    @property
    def has_newline(self) -> bool:
        """True if the leading whitespace spans a line break."""
        return "\n" in self.space

    def render(self) -> str:
        """Render the unit without its leading whitespace.

        Whitespace around ``=`` is dropped; the value keeps its original
        quoting style.
        """
        if self.text is not None:
            return self.text
        if self.value is None:
            return self.name or ""
        if self.quote is AttrQuote.DOUBLE:
            return f'{self.name}="{self.value}"'
        if self.quote is AttrQuote.SINGLE:
            return f"{self.name}='{self.value}'"
        return f"{self.name}={self.value}"
