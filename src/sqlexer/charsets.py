"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from sqlexer.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

# Whitespace skipped between tokens
WHITESPACE: frozenset[str] = frozenset(" \t\r\n")

# ASCII decimal digits only; str.isdigit() also accepts superscripts
DIGITS: frozenset[str] = frozenset("0123456789")

# Optional sign on integer literals
SIGNS: frozenset[str] = frozenset("+-")

# Comment delimiters
LINE_COMMENT = "--"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"


def is_identifier_start(char: str) -> bool:
    """Check if character can begin an identifier (letter or underscore)."""
    return char == "_" or char.isalpha()


def is_identifier_char(char: str) -> bool:
    """Check if character can continue an identifier."""
    return char == "_" or char.isalnum()
