"""Integer literal matcher."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlexer.charsets import DIGITS, SIGNS
from sqlexer.errors import ScanError
from sqlexer.lexer.matchers.base import MatchResult
from sqlexer.tokens import INT64_MAX, INT64_MIN, Number

if TYPE_CHECKING:
    from sqlexer.config import LexConfig

_INT64_DIGITS = len(str(INT64_MAX))


def match_number(source: str, pos: int, config: LexConfig) -> MatchResult | None:
    """Match a maximal run of decimal digits with an optional sign.

    A sign is only consumed when a digit follows it, so a lone ``-``
    is left unmatched.

    Raises:
        ScanError: If the value does not fit in a signed 64-bit integer.
    """
    source_len = len(source)
    end = pos
    if config.signed_numbers and source[end] in SIGNS:
        end += 1
    digits_start = end
    while end < source_len and source[end] in DIGITS:
        end += 1
    if end == digits_start:
        return None

    # int() refuses very long digit strings, so bound the length first
    if len(source[digits_start:end].lstrip("0")) > _INT64_DIGITS:
        raise ScanError("integer literal out of 64-bit range")

    lexeme = source[pos:end]
    value = int(lexeme)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ScanError("integer literal out of 64-bit range")
    return MatchResult(value=Number(value), chars=len(lexeme), lines=0, columns=len(lexeme))
