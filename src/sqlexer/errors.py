"""Exception classes for sqlexer.

Provides standardized exceptions for error handling throughout sqlexer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlexer.tokens import format_value

if TYPE_CHECKING:
    from sqlexer.location import Position
    from sqlexer.tokens import Token


class SqlexerError(Exception):
    """Base exception for all sqlexer errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(SqlexerError):
    """Error during lexing.

    Raised when no matcher accepts the input at the current position, or
    when a matcher fails partway through a lexeme (unterminated string,
    integer overflow). Lexing never resumes after this error.
    """

    def __init__(
        self,
        position: Position,
        last_token: Token | None = None,
        reason: str | None = None,
    ) -> None:
        """Initialize lex error.

        Args:
            position: Where scanning got stuck (0-indexed)
            last_token: Most recently accepted token, for context (optional)
            reason: Short description of the failure (optional, not rendered)
        """
        self.position = position
        self.last_token = last_token
        self.reason = reason
        super().__init__(
            f"Unable to lex token{self.hint}, at {position.line}:{position.column}"
        )

    @property
    def hint(self) -> str:
        """Context clause naming the previous token, or empty string."""
        if self.last_token is None:
            return ""
        return f" after {format_value(self.last_token.value)}"


class ScanError(SqlexerError):
    """A matcher recognized the start of a lexeme but could not finish it.

    Raised by matchers and converted into LexError by the lexer, which
    knows the current position and the previous token.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
