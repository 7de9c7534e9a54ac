"""Comment matcher.

Two forms are skipped:
- ``-- text`` runs to the end of the line. The newline itself is left for
  the whitespace matcher.
- ``/* text */`` may span lines. Block comments do not nest.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlexer.charsets import BLOCK_COMMENT_CLOSE, BLOCK_COMMENT_OPEN, LINE_COMMENT
from sqlexer.errors import ScanError
from sqlexer.lexer.matchers.base import MatchResult, measure

if TYPE_CHECKING:
    from sqlexer.config import LexConfig


def match_comment(source: str, pos: int, config: LexConfig) -> MatchResult | None:
    """Skip a line or block comment starting at pos.

    Raises:
        ScanError: If a block comment is never closed.
    """
    if not config.comments_enabled:
        return None

    if source.startswith(LINE_COMMENT, pos):
        end = source.find("\n", pos)
        if end == -1:
            end = len(source)
        return measure(None, source[pos:end])

    if source.startswith(BLOCK_COMMENT_OPEN, pos):
        close = source.find(BLOCK_COMMENT_CLOSE, pos + len(BLOCK_COMMENT_OPEN))
        if close == -1:
            raise ScanError("unterminated block comment")
        return measure(None, source[pos : close + len(BLOCK_COMMENT_CLOSE)])

    return None
