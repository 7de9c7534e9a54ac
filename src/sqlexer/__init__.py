"""
sqlexer — Position-tracking lexer for a small SQL-like query language

Turns query text into a flat list of classified tokens (keywords, symbols,
identifiers, string literals, integer literals), each tagged with its
0-based line/column. Lexing stops at the first unrecognized input and
raises LexError naming the position and the previous token.

Quick Start:
    >>> from sqlexer import lex
    >>> tokens = lex("SELECT name FROM users;")
    >>> tokens[0]
    Token(Keyword(SELECT), 0:0)

    >>> lex("SELECT @")
    Traceback (most recent call last):
    ...
    sqlexer.errors.LexError: Unable to lex token after Keyword(SELECT), at 0:7

Configuration:
    >>> from sqlexer import LexConfig, lex_config_context
    >>> with lex_config_context(LexConfig(quote_char='"')):
    ...     lex('"hello"')
    [Token(String('hello'), 0:0)]
"""

from sqlexer.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from sqlexer.errors import LexError, ScanError, SqlexerError
from sqlexer.lexer import Lexer, lex
from sqlexer.location import Position
from sqlexer.serialization import from_dict, to_dict, tokens_from_json, tokens_to_json
from sqlexer.tokens import (
    Identifier,
    Keyword,
    Number,
    String,
    Symbol,
    Token,
    TokenKind,
    TokenValue,
    format_value,
)

__version__ = "0.1.0"

__all__ = [
    "Identifier",
    "Keyword",
    "LexConfig",
    "LexError",
    "Lexer",
    "Number",
    "Position",
    "ScanError",
    "SqlexerError",
    "String",
    "Symbol",
    "Token",
    "TokenKind",
    "TokenValue",
    "__version__",
    "format_value",
    "from_dict",
    "get_lex_config",
    "lex",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    "to_dict",
    "tokens_from_json",
    "tokens_to_json",
]
