"""Identifier and keyword matcher."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlexer.charsets import is_identifier_char, is_identifier_start
from sqlexer.lexer.matchers.base import MatchResult
from sqlexer.tokens import KEYWORDS, Identifier, TokenValue

if TYPE_CHECKING:
    from sqlexer.config import LexConfig


def match_word(source: str, pos: int, config: LexConfig) -> MatchResult | None:
    """Match an identifier, classifying reserved words as keywords.

    Keyword lookup is restricted to ASCII words: non-ASCII letters such as
    the dotless ``ı`` upper-case into ASCII and would otherwise collide
    with keyword names.
    """
    if not is_identifier_start(source[pos]):
        return None

    source_len = len(source)
    end = pos + 1
    while end < source_len and is_identifier_char(source[end]):
        end += 1

    word = source[pos:end]
    value: TokenValue | None = KEYWORDS.get(word.upper()) if word.isascii() else None
    if value is None:
        value = Identifier(word)
    return MatchResult(value=value, chars=len(word), lines=0, columns=len(word))
