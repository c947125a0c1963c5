"""Property-based tests for the pipeline using Hypothesis.

These tests verify that certain properties always hold regardless
of the input: the pipeline is total and deterministic.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from inkdown import parse, render, tokenize
from inkdown.serialization import from_json, to_json

# Characters that never start a block rule or an inline span
PLAIN_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCXYZ0123456789 ,;:?'\"éßü"

MARKDOWN_ALPHABET = "#*~-_>|[]()!.1 abc\n"


class TestTokenizerInvariants:
    """Token stream invariants."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_tokens_reconstruct_source(self, source: str) -> None:
        assert "".join(t.value for t in tokenize(source)) == source

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_offsets_are_contiguous(self, source: str) -> None:
        position = 0
        for token in tokenize(source):
            assert token.value
            assert token.span == (position, position + len(token.value))
            position += len(token.value)
        assert position == len(source)

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_locations_point_into_source(self, source: str) -> None:
        for token in tokenize(source):
            loc = token.location
            assert loc.lineno >= 1
            assert loc.col_offset >= 1
            assert source[loc.offset : loc.end_offset] == token.value


class TestRenderInvariants:
    """Rendering never fails and is a pure function."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_total(self, source: str) -> None:
        assert isinstance(render(source), str)

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_total_on_markdown_heavy_input(self, source: str) -> None:
        assert isinstance(render(source), str)

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        assert render(source) == render(source)

    @given(st.text(alphabet=PLAIN_ALPHABET, min_size=1, max_size=200))
    @settings(max_examples=200)
    def test_plain_line_is_paragraph(self, source: str) -> None:
        assert render(source) == f"<p>{source}</p>"

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_tokens_and_string_parse_identically(self, source: str) -> None:
        assert parse(tokenize(source)) == parse(source)

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_serialization_preserves_tree(self, source: str) -> None:
        doc = parse(source)
        assert from_json(to_json(doc)) == doc
