"""Single-character symbol matcher."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlexer.lexer.matchers.base import MatchResult
from sqlexer.tokens import SYMBOLS

if TYPE_CHECKING:
    from sqlexer.config import LexConfig


def match_symbol(source: str, pos: int, config: LexConfig) -> MatchResult | None:
    """Match one of ``; * , ( )``."""
    symbol = SYMBOLS.get(source[pos])
    if symbol is None:
        return None
    return MatchResult(value=symbol, chars=1, lines=0, columns=1)
