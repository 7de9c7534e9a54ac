"""Matcher-dispatch lexer for sqlexer.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, lex
├── core.py              # Lexer class (dispatch loop + position bookkeeping)
└── matchers/            # One pure function per lexical category
    ├── base.py          # MatchResult, Matcher, measure()
    ├── whitespace.py
    ├── comments.py
    ├── symbols.py
    ├── strings.py
    ├── numbers.py
    └── words.py         # Identifiers and keywords

Usage:
    >>> from sqlexer.lexer import lex
    >>> lex("INSERT INTO t VALUES (1, 'x');")[:3]
    [Token(Keyword(INSERT), 0:0), Token(Keyword(INTO), 0:7), Token(Identifier('t'), 0:12)]

"""

from sqlexer.lexer.core import Lexer, lex
from sqlexer.lexer.matchers import MATCHERS, MatchResult

__all__ = ["MATCHERS", "Lexer", "MatchResult", "lex"]
