"""Property-based tests for the line rules."""

from hypothesis import given, settings
from hypothesis import strategies as st

from slicewise import BlockCommentRule, InlineCommentRule, PragmaRule

_NO_NEWLINES = st.characters(exclude_characters="\n\r", exclude_categories=("Cs",))


class TestSingleLineRulesLeaveIteratorAlone:
    @given(st.text(alphabet=st.characters(exclude_characters="*\n"), max_size=80))
    @settings(max_examples=200)
    def test_block_same_line(self, body: str) -> None:
        lines = iter(["untouched"])
        unit = BlockCommentRule().apply(f"/*{body}*/", lines)
        assert unit is not None
        assert unit.text == body.strip()
        assert next(lines) == "untouched"

    @given(st.text(alphabet=_NO_NEWLINES, max_size=80), st.text(alphabet=_NO_NEWLINES, max_size=80))
    @settings(max_examples=200)
    def test_inline_text_is_suffix(self, code: str, comment: str) -> None:
        line = f"{code}//{comment}"
        lines = iter(["untouched"])
        unit = InlineCommentRule().apply(line, lines)
        assert unit is not None
        assert line.endswith(unit.text)
        assert next(lines) == "untouched"


class TestPragmaContinuation:
    @given(st.lists(st.text(alphabet="abc ", max_size=10), min_size=1, max_size=6))
    @settings(max_examples=100)
    def test_consumes_exactly_the_continued_lines(self, pieces: list[str]) -> None:
        continued = [f"{p} \\" for p in pieces]
        lines = iter([*continued, "last", "after"])
        unit = PragmaRule().apply("#pragma first \\", lines)
        assert unit is not None
        assert unit.text.count("\n") == len(pieces) + 1
        assert list(lines) == ["after"]
