"""Mode-specific scanners for the htmlreflow lexer.

Each scanner is a mixin that provides scanning logic for a specific
lexer mode (MARKUP, RAW_TEXT).
"""

from __future__ import annotations

from htmlreflow.lexer.scanners.markup import MarkupScannerMixin
from htmlreflow.lexer.scanners.raw_text import RawTextScannerMixin

__all__ = [
    "MarkupScannerMixin",
    "RawTextScannerMixin",
]
