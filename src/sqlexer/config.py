"""ContextVar-based lex configuration for sqlexer.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The lexer reads the active config when it is constructed, unless one is
passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from sqlexer import lex
    from sqlexer.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(comments_enabled=False)):
        tokens = lex("SELECT * FROM t")

    # Or pass it directly
    tokens = lex('SELECT "a"', config=LexConfig(quote_char='"'))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from sqlexer.charsets import BLOCK_COMMENT_OPEN, DIGITS, SIGNS, WHITESPACE
from sqlexer.tokens import SYMBOLS


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lex configuration.

    Attributes:
        comments_enabled: Skip ``-- line`` and ``/* block */`` comments
        signed_numbers: Allow a leading + or - on integer literals
        quote_char: Character that opens and closes string literals

    """

    comments_enabled: bool = True
    signed_numbers: bool = True
    quote_char: str = "'"

    def __post_init__(self) -> None:
        quote = self.quote_char
        if (
            len(quote) != 1
            or quote in SYMBOLS
            or quote in WHITESPACE
            or quote in DIGITS
            or quote in SIGNS
            or quote == "_"
            or quote.isalnum()
        ):
            msg = f"Invalid quote_char: {quote!r}"
            raise ValueError(msg)
        # "/*" opens a block comment, and comments outrank strings
        if self.comments_enabled and quote == BLOCK_COMMENT_OPEN[0]:
            msg = f"Invalid quote_char: {quote!r} collides with block comments"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "comments_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.comments_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lex configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lex configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(signed_numbers=False)):
        ...     tokens = lex("-1")  # raises LexError
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
