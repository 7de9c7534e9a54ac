"""Per-category matchers for the sqlexer lexer.

Each matcher is a pure function that recognizes one lexical category at
a given offset. MATCHERS fixes their priority: the first matcher that
accepts wins, regardless of match length.

Priority:
1. whitespace  (skip)
2. comments    (skip)
3. symbols     ; * , ( )
4. strings     'quoted'
5. numbers     [+-]digits
6. words       keywords and identifiers
"""

from sqlexer.lexer.matchers.base import Matcher, MatchResult, measure
from sqlexer.lexer.matchers.comments import match_comment
from sqlexer.lexer.matchers.numbers import INT64_MAX, INT64_MIN, match_number
from sqlexer.lexer.matchers.strings import match_string
from sqlexer.lexer.matchers.symbols import match_symbol
from sqlexer.lexer.matchers.whitespace import match_whitespace
from sqlexer.lexer.matchers.words import match_word

MATCHERS: tuple[Matcher, ...] = (
    match_whitespace,
    match_comment,
    match_symbol,
    match_string,
    match_number,
    match_word,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "MATCHERS",
    "MatchResult",
    "Matcher",
    "match_comment",
    "match_number",
    "match_string",
    "match_symbol",
    "match_whitespace",
    "match_word",
    "measure",
]
