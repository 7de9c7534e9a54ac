"""Token serialization: JSON round-trip for token streams.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Handing a token stream to a parser in another process
- Snapshot tests and debugging

All output is deterministic (sorted keys).

Example:
    from sqlexer import lex
    from sqlexer.serialization import tokens_to_json, tokens_from_json

    tokens = lex("SELECT * FROM t;")
    restored = tokens_from_json(tokens_to_json(tokens))
    assert tokens == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Sequence
from typing import Any

from sqlexer.location import Position
from sqlexer.tokens import (
    INT64_MAX,
    INT64_MIN,
    Identifier,
    Keyword,
    Number,
    String,
    Symbol,
    Token,
    TokenKind,
    TokenValue,
    kind_of,
)


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator and the value's ``kind`` so the
    payload can be decoded without guessing.

    Example:
        >>> to_dict(Token(Keyword.SELECT, Position(0, 0), 0, 6))
        {'_type': 'Token', 'kind': 'KEYWORD', 'value': 'SELECT', 'line': 0, ...}

    """
    return {
        "_type": "Token",
        "kind": kind_of(token.value).name,
        "value": _serialize_value(token.value),
        "line": token.position.line,
        "column": token.position.column,
        "start": token.start,
        "end": token.end,
    }


def _serialize_value(value: TokenValue) -> str | int:
    if isinstance(value, (Keyword, Symbol)):
        return value.name
    if isinstance(value, (Identifier, String)):
        return value.text
    return value.value


_REQUIRED_FIELDS = ("kind", "value", "line", "column")


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Raises:
        ValueError: If ``_type`` or ``kind`` is missing or unknown, a required
            field is missing, or a field has the wrong type or range.

    """
    if not isinstance(data, dict):
        msg = f"Expected a serialized token dict, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)
    if type_name != "Token":
        msg = f"Unknown type: {type_name!r}"
        raise ValueError(msg)

    missing = [key for key in _REQUIRED_FIELDS if key not in data]
    if missing:
        msg = f"Missing field(s) in serialized token: {', '.join(missing)}"
        raise ValueError(msg)

    kind_name = data["kind"]
    try:
        kind = TokenKind[kind_name]
    except (KeyError, TypeError):
        msg = f"Unknown token kind: {kind_name!r}"
        raise ValueError(msg) from None

    return Token(
        value=_deserialize_value(kind, data["value"]),
        position=Position(_int_field(data, "line"), _int_field(data, "column")),
        start=_int_field(data, "start", 0),
        end=_int_field(data, "end", 0),
    )


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid coordinate or literal
    return isinstance(value, int) and not isinstance(value, bool)


def _int_field(data: dict[str, Any], key: str, default: int | None = None) -> int:
    value = data.get(key, default)
    if not _is_int(value) or value < 0:
        msg = f"Field {key!r} must be a non-negative integer, got {value!r}"
        raise ValueError(msg)
    return value


def _deserialize_value(kind: TokenKind, raw: Any) -> TokenValue:
    if kind is TokenKind.KEYWORD or kind is TokenKind.SYMBOL:
        enum_cls = Keyword if kind is TokenKind.KEYWORD else Symbol
        try:
            return enum_cls[raw]
        except (KeyError, TypeError):
            msg = f"Unknown {kind.name.lower()}: {raw!r}"
            raise ValueError(msg) from None
    if kind is TokenKind.IDENTIFIER or kind is TokenKind.STRING:
        if not isinstance(raw, str):
            msg = f"{kind.name.capitalize()} value must be a string, got {raw!r}"
            raise ValueError(msg)
        return Identifier(raw) if kind is TokenKind.IDENTIFIER else String(raw)
    if not _is_int(raw) or not INT64_MIN <= raw <= INT64_MAX:
        msg = f"Number value must be a 64-bit integer, got {raw!r}"
        raise ValueError(msg)
    return Number(raw)


def tokens_to_json(tokens: Sequence[Token], *, indent: int | None = None) -> str:
    """Serialize a token list to a JSON array string.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def tokens_from_json(data: str) -> list[Token]:
    """Deserialize a token list from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of serialized tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]


__all__ = ["from_dict", "to_dict", "tokens_from_json", "tokens_to_json"]
