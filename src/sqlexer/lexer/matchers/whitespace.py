"""Whitespace matcher."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlexer.charsets import WHITESPACE
from sqlexer.lexer.matchers.base import MatchResult, measure

if TYPE_CHECKING:
    from sqlexer.config import LexConfig


def match_whitespace(source: str, pos: int, config: LexConfig) -> MatchResult | None:
    """Skip a maximal run of spaces, tabs, carriage returns and newlines."""
    end = pos
    source_len = len(source)
    while end < source_len and source[end] in WHITESPACE:
        end += 1
    if end == pos:
        return None
    return measure(None, source[pos:end])
