"""Match results shared by every matcher.

A matcher is a pure function ``(source, pos, config) -> MatchResult | None``.
It either declines (None) or reports what it consumed starting at ``pos``.
Matchers never mutate shared state, so the ordered matcher tuple is safe
to use from any thread.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlexer.config import LexConfig
    from sqlexer.tokens import TokenValue


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of a successful match.

    Attributes:
        value: Token value to emit, or None for a skip result (whitespace, comments)
        chars: Number of characters consumed (always >= 1)
        lines: Number of newlines consumed
        columns: Absolute column after the last newline when lines > 0,
            otherwise the number of columns consumed

    """

    value: TokenValue | None
    chars: int
    lines: int
    columns: int

    @property
    def is_skip(self) -> bool:
        """True if this match produces no token."""
        return self.value is None


Matcher = Callable[[str, int, "LexConfig"], MatchResult | None]


def measure(value: TokenValue | None, lexeme: str) -> MatchResult:
    """Build a MatchResult for a consumed lexeme.

    Counts newlines with str.count and locates the last one with str.rfind,
    so multi-line lexemes cost no per-character Python loop.
    """
    lines = lexeme.count("\n")
    if lines:
        columns = len(lexeme) - lexeme.rfind("\n") - 1
    else:
        columns = len(lexeme)
    return MatchResult(value=value, chars=len(lexeme), lines=lines, columns=columns)
