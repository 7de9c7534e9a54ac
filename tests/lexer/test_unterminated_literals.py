"""Tests for literals and comments that run off the end of the input.

None of these may produce a partial token; the whole lex call fails at
the position where the construct opened.
"""

import pytest

from sqlexer import Identifier, Keyword, LexError, Position, lex


class TestUnterminatedString:
    def test_fails_at_opening_quote(self) -> None:
        with pytest.raises(LexError) as exc_info:
            lex("'abc")
        assert exc_info.value.position == Position(0, 0)
        assert exc_info.value.last_token is None
        assert exc_info.value.reason == "unterminated string literal"

    def test_reports_previous_token(self) -> None:
        with pytest.raises(LexError) as exc_info:
            lex("SELECT 'abc")
        err = exc_info.value
        assert err.position == Position(0, 7)
        assert err.last_token is not None
        assert err.last_token.value is Keyword.SELECT

    def test_on_later_line(self) -> None:
        with pytest.raises(LexError) as exc_info:
            lex("a\n  'x\ny")
        assert exc_info.value.position == Position(1, 2)
        assert exc_info.value.last_token.value == Identifier("a")

    def test_lone_quote(self) -> None:
        with pytest.raises(LexError):
            lex("'")


class TestUnterminatedBlockComment:
    def test_fails_at_comment_start(self) -> None:
        with pytest.raises(LexError) as exc_info:
            lex("x /* never closed")
        assert exc_info.value.position == Position(0, 2)
        assert exc_info.value.reason == "unterminated block comment"

    def test_not_a_comment_when_disabled(self) -> None:
        """With comments off, '/' is simply unrecognized."""
        from sqlexer import LexConfig

        with pytest.raises(LexError) as exc_info:
            lex("/* x */", config=LexConfig(comments_enabled=False))
        assert exc_info.value.position == Position(0, 0)
