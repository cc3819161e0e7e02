"""Mode-switching lexer for the htmlreflow formatter.

This package turns arbitrary markup into an ordered token stream. It never
fails on malformed input: a single-character fallback rule always advances.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, tokenize_attrs
├── core.py              # Lexer class (mixin composition + cursor)
├── modes.py             # LexerMode enum, element-name constants
├── rules.py             # Ordered matcher rules (compiled patterns)
├── attributes.py        # Attribute sub-lexer
└── scanners/            # Mode-specific scanners
    ├── markup.py        # Markup mode (ordered rule dispatch)
    └── raw_text.py      # Raw-text mode (script/style/textarea bodies)

Usage:
    >>> from htmlreflow.lexer import Lexer
    >>> [t.type.name for t in Lexer("<br>\\n<br>").tokenize()]
    ['START_TAG', 'WHITESPACE', 'START_TAG']

"""

from htmlreflow.lexer.attributes import tokenize_attrs
from htmlreflow.lexer.core import Lexer
from htmlreflow.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode", "tokenize_attrs"]
