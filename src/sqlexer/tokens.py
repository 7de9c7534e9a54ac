"""Token model for the sqlexer lexer.

The lexer produces a list of Token objects that a parser consumes.
Each Token pairs a classified value with the position where it starts.

Token values form a closed union:
- Keyword: reserved words (SELECT, FROM, ...)
- Symbol: single-character punctuation (; * , ( ))
- Identifier: names, original case preserved
- String: quoted literal body
- Number: signed 64-bit integer literal

Thread Safety:
Every type here is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from sqlexer.location import Position


class Keyword(Enum):
    """Reserved words, matched case-insensitively."""

    SELECT = auto()
    FROM = auto()
    AS = auto()
    TABLE = auto()
    CREATE = auto()
    INSERT = auto()
    INTO = auto()
    VALUES = auto()
    INT = auto()
    TEXT = auto()


class Symbol(Enum):
    """Single-character punctuation. The value is the source character."""

    SEMICOLON = ";"
    ASTERISK = "*"
    COMMA = ","
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


@dataclass(frozen=True, slots=True)
class Identifier:
    """A name that is not a keyword (original case preserved)."""

    text: str


@dataclass(frozen=True, slots=True)
class String:
    """A quoted string literal with the quotes removed."""

    text: str


# Range of Number.value
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Number:
    """An integer literal decoded into the signed 64-bit range."""

    value: int


TokenValue = Keyword | Symbol | Identifier | String | Number

# Upper-case keyword name -> Keyword
KEYWORDS: dict[str, Keyword] = {kw.name: kw for kw in Keyword}

# Source character -> Symbol
SYMBOLS: dict[str, Symbol] = {sym.value: sym for sym in Symbol}


class TokenKind(Enum):
    """Lexical category of a token value."""

    KEYWORD = auto()
    SYMBOL = auto()
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()


_KINDS: dict[type, TokenKind] = {
    Keyword: TokenKind.KEYWORD,
    Symbol: TokenKind.SYMBOL,
    Identifier: TokenKind.IDENTIFIER,
    String: TokenKind.STRING,
    Number: TokenKind.NUMBER,
}


def kind_of(value: TokenValue) -> TokenKind:
    """Return the lexical category of a token value.

    Raises:
        TypeError: If value is not one of the TokenValue types.
    """
    kind = _KINDS.get(type(value))
    if kind is None:
        msg = f"Not a token value: {value!r}"
        raise TypeError(msg)
    return kind


def format_value(value: TokenValue) -> str:
    """Render a token value for diagnostics.

    Examples:
        >>> format_value(Keyword.SELECT)
        'Keyword(SELECT)'
        >>> format_value(Identifier("users"))
        "Identifier('users')"
        >>> format_value(Number(-7))
        'Number(-7)'
    """
    if isinstance(value, Keyword):
        return f"Keyword({value.name})"
    if isinstance(value, Symbol):
        return f"Symbol({value.name})"
    if isinstance(value, (Identifier, String)):
        return f"{type(value).__name__}({value.text!r})"
    if isinstance(value, Number):
        return f"Number({value.value})"
    msg = f"Not a token value: {value!r}"
    raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme and the position where it starts.

    Attributes:
        value: Classified token value
        position: Line/column of the first character (0-indexed)
        start: Absolute start offset in source (characters)
        end: Absolute end offset in source (exclusive)

    Equality compares value and position only; offsets are informational
    and let a consumer recover the raw lexeme with ``source[start:end]``.

    Tokens hold copies of their text, so they remain valid after the
    source string is discarded.

    """

    value: TokenValue
    position: Position
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)

    @property
    def kind(self) -> TokenKind:
        """Lexical category of this token."""
        return kind_of(self.value)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({format_value(self.value)}, {self.position})"
