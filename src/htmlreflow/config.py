"""ContextVar-based format configuration for htmlreflow.

Provides context-local configuration using Python's ContextVars (PEP 567).
``format()`` reads the active config for any argument the caller leaves out.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Defaults for everything
    from htmlreflow import format
    out = format(html)

    # Scoped defaults
    from htmlreflow.config import FormatConfig, format_config_context

    with format_config_context(FormatConfig(indent="    ", width=100)):
        out = format(html)

    # Strict mode for regression tests
    with format_config_context(FormatConfig(strict=True)):
        format("<p>ok</p>")   # fine
        format("a < b")       # raises StrictModeError

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from htmlreflow.protocols import RewriteHook


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable format configuration.

    Attributes:
        indent: String inserted once per nesting level
        width: Soft column budget; only an unbreakable span may exceed it
        transform: Optional per-span rewrite hook
        strict: Raise StrictModeError when the lexer falls back to a single
            character or opaque attribute text (regression testing only)

    """

    indent: str = "  "
    width: int = 80
    transform: RewriteHook | None = None
    strict: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Useful for wrappers that load options from files (pyproject.toml,
        JSON, editor settings). Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                FormatConfig attribute names.

        Returns:
            New FormatConfig instance with values from dict.

        Example:
            >>> config = FormatConfig.from_dict({"width": 100, "tabs": True})
            >>> config.width
            100

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get the active format configuration for this context."""
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for the current context.

    Args:
        config: FormatConfig instance to use for this context.

    """
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to the default configuration."""
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: FormatConfig to use within the context.

    Example:
        >>> with format_config_context(FormatConfig(width=40)):
        ...     get_format_config().width
        40

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
]
