"""Quoted string literal matcher.

Strings open and close with ``config.quote_char``. Inside the body a
doubled quote (``''``) stands for one literal quote character, as in SQL.
Newlines are allowed and counted toward the line delta.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlexer.errors import ScanError
from sqlexer.lexer.matchers.base import MatchResult, measure
from sqlexer.tokens import String

if TYPE_CHECKING:
    from sqlexer.config import LexConfig


def match_string(source: str, pos: int, config: LexConfig) -> MatchResult | None:
    """Match a quoted string literal starting at pos.

    Raises:
        ScanError: If the closing quote is missing before end of input.
    """
    quote = config.quote_char
    if source[pos] != quote:
        return None

    parts: list[str] = []
    start = pos + 1
    while True:
        close = source.find(quote, start)
        if close == -1:
            raise ScanError("unterminated string literal")
        parts.append(source[start:close])
        # Doubled quote: keep one, continue scanning
        if source.startswith(quote, close + 1):
            parts.append(quote)
            start = close + 2
            continue
        return measure(String("".join(parts)), source[pos : close + 1])
