"""Lex a query and print each token with its position."""

from sqlexer import LexError, lex

source = "SELECT id, name\nFROM users; -- all rows"
for token in lex(source):
    print(f"{token.position}  {token!r}")

try:
    lex("SELECT @")
except LexError as exc:
    print(exc)  # Unable to lex token after Keyword(SELECT), at 0:7
