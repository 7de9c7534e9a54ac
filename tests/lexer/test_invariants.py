"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from sqlexer import Identifier, LexError, Number, String, lex
from sqlexer.tokens import KEYWORDS

# Characters the grammar knows about, plus a few it does not
QUERY_ALPHABET = "abcXYZ_019 \t\n;*,()'-+/@#"

words = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,10}", fullmatch=True)


def lex_or_none(source: str):
    try:
        return lex(source)
    except LexError:
        return None


class TestBasicInvariants:
    """Invariants that hold for every input."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_only_lex_error_escapes(self, source: str) -> None:
        """Arbitrary text either lexes or raises LexError, nothing else."""
        lex_or_none(source)

    @given(st.text(alphabet=QUERY_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_positions_strictly_increase(self, source: str) -> None:
        tokens = lex_or_none(source)
        if tokens is None:
            return
        for prev, cur in zip(tokens, tokens[1:]):
            assert prev.position < cur.position

    @given(st.text(alphabet=QUERY_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_offsets_ordered_without_overlap(self, source: str) -> None:
        tokens = lex_or_none(source)
        if tokens is None:
            return
        for token in tokens:
            assert 0 <= token.start < token.end <= len(source)
        for prev, cur in zip(tokens, tokens[1:]):
            assert prev.end <= cur.start

    @given(st.text(alphabet=QUERY_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_position_matches_offset(self, source: str) -> None:
        """Line/column agree with counting newlines up to the start offset."""
        tokens = lex_or_none(source)
        if tokens is None:
            return
        for token in tokens:
            prefix = source[: token.start]
            assert token.position.line == prefix.count("\n")
            assert token.position.column == len(prefix) - (prefix.rfind("\n") + 1)

    @given(st.text(alphabet=QUERY_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_error_position_within_source(self, source: str) -> None:
        try:
            lex(source)
        except LexError as exc:
            assert exc.position.line <= source.count("\n")


class TestLexemeInvariants:
    """Generated lexemes are classified correctly."""

    @given(words)
    def test_words(self, word: str) -> None:
        (token,) = lex(word)
        if word.upper() in KEYWORDS:
            assert token.value is KEYWORDS[word.upper()]
        else:
            assert token.value == Identifier(word)

    @given(st.integers(min_value=-(2**63), max_value=2**63 - 1))
    def test_int64_range(self, value: int) -> None:
        assert [t.value for t in lex(str(value))] == [Number(value)]

    @given(st.integers(min_value=2**63))
    def test_overflow_fails_at_start(self, value: int) -> None:
        try:
            lex(f"x {value}")
        except LexError as exc:
            assert exc.position.column == 2
            assert exc.last_token is not None
        else:
            raise AssertionError("expected LexError")

    @given(st.text(alphabet=st.characters(exclude_characters="'"), max_size=50))
    def test_strings(self, body: str) -> None:
        assert [t.value for t in lex(f"'{body}'")] == [String(body)]
