"""Dispatching lexer with O(n) guaranteed performance.

Tries an ordered tuple of matchers at the current offset, accepts the
first match, and commits position. Every matcher consumes at least one
character, so the loop always makes forward progress.

No regex in the hot path. Zero ReDoS vulnerability by construction.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import logging

from sqlexer.config import LexConfig, get_lex_config
from sqlexer.errors import LexError, ScanError
from sqlexer.lexer.matchers import MATCHERS, Matcher, MatchResult
from sqlexer.location import Position
from sqlexer.tokens import Token

logger = logging.getLogger(__name__)


class Lexer:
    """First-match-wins lexer over an in-memory source string.

    Usage:
        >>> lexer = Lexer("SELECT a\\nFROM t;")
        >>> for token in lexer.tokenize():
        ...     print(token)
        Token(Keyword(SELECT), 0:0)
        Token(Identifier('a'), 0:7)
        Token(Keyword(FROM), 1:0)
        Token(Identifier('t'), 1:5)
        Token(Symbol(SEMICOLON), 1:6)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_position",
        "_tokens",
        "_config",
        "_matchers",
    )

    def __init__(
        self,
        source: str,
        *,
        config: LexConfig | None = None,
        matchers: tuple[Matcher, ...] = MATCHERS,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Query source text
            config: Lex configuration (defaults to the active context config)
            matchers: Ordered matchers to try at each offset
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._position = Position(0, 0)
        self._tokens: list[Token] = []
        self._config = config if config is not None else get_lex_config()
        self._matchers = matchers

    def tokenize(self) -> list[Token]:
        """Lex the whole source into a token list.

        Returns:
            Tokens in source order.

        Raises:
            LexError: At the first position no matcher accepts, or where a
                matcher fails partway through a lexeme.

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len
        while self._pos < source_len:
            result = self._match()
            self._commit(result)

        logger.debug(
            "Lexed %d tokens from %d characters", len(self._tokens), source_len
        )
        return self._tokens

    def _match(self) -> MatchResult:
        """Return the first matcher's result at the current offset.

        Raises:
            LexError: If no matcher accepts or a matcher fails.
        """
        source, pos, config = self._source, self._pos, self._config
        for matcher in self._matchers:
            try:
                result = matcher(source, pos, config)
            except ScanError as exc:
                raise self._error(exc.reason) from exc
            if result is not None:
                return result
        raise self._error(f"unexpected character {source[pos]!r}")

    def _commit(self, result: MatchResult) -> None:
        """Record the token (if any) and advance cursor and position."""
        if result.chars < 1:
            msg = f"Matcher consumed no input at offset {self._pos}"
            raise RuntimeError(msg)

        start = self._pos
        self._pos += result.chars
        if not result.is_skip:
            self._tokens.append(
                Token(
                    value=result.value,
                    position=self._position,
                    start=start,
                    end=self._pos,
                )
            )
        self._position = self._position.advanced(result.lines, result.columns)

    def _error(self, reason: str) -> LexError:
        last = self._tokens[-1] if self._tokens else None
        logger.debug("Lex failed at %s: %s", self._position, reason)
        return LexError(self._position, last, reason)


def lex(source: str, *, config: LexConfig | None = None) -> list[Token]:
    """Lex query source into a list of tokens.

    Args:
        source: Query source text
        config: Lex configuration (defaults to the active context config)

    Returns:
        Tokens in source order; empty for empty input.

    Raises:
        LexError: At the first unrecognized or malformed input.

    Example:
        >>> lex("select * from users")
        [Token(Keyword(SELECT), 0:0), Token(Symbol(ASTERISK), 0:7), Token(Keyword(FROM), 0:9), Token(Identifier('users'), 0:14)]
    """
    return Lexer(source, config=config).tokenize()
