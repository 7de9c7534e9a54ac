"""Source position tracking for tokens and error messages.

Provides the Position dataclass used by every token and by LexError.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Line/column position in source text.

    Both coordinates are 0-indexed. Ordering is lexicographic on
    (line, column), so token positions can be compared directly.

    Attributes:
        line: Line number (0-indexed)
        column: Column offset within the line (0-indexed, in characters)

    Examples:
        >>> pos = Position(line=2, column=7)
        >>> str(pos)
        '2:7'
        >>> Position(0, 0).advanced(0, 6)
        Position(line=0, column=6)
        >>> Position(0, 6).advanced(2, 3)
        Position(line=2, column=3)

    """

    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        """Format position as "line:column"."""
        return f"{self.line}:{self.column}"

    def advanced(self, lines: int, columns: int) -> Position:
        """Return the position after consuming a lexeme.

        When the lexeme crossed one or more newlines, ``columns`` is the
        absolute column following the last newline. Otherwise it is the
        number of columns consumed on the current line.

        Args:
            lines: Number of newlines consumed
            columns: Absolute column (lines > 0) or column delta (lines == 0)

        Returns:
            New Position; self is never modified.
        """
        if lines > 0:
            return Position(self.line + lines, columns)
        return Position(self.line, self.column + columns)
