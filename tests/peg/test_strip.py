"""Tests for canonical rule bodies."""

import pytest

from pegcmp.errors import UnterminatedCommentError
from pegcmp.peg.strip import remove_spans, strip


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "'a' B",
        "  'a' # one\n  / 'b' # two\n",
        "A\t\tB\n\n",
        "# only a comment\n",
        "x # a # b\ny\n",
    ],
)
def test_strip_is_idempotent(text: str) -> None:
    once = strip(text)
    assert strip(once) == once


def test_strip_trims_outer_whitespace_only() -> None:
    assert strip("  'a'   B\t C \n") == "'a'   B\t C"


def test_strip_removes_comment_through_end_of_line() -> None:
    text = "Term   # first\n      / Factor # second\n"
    assert strip(text) == "Term" + " " * 9 + "/ Factor"


def test_strip_removes_consecutive_comments() -> None:
    assert strip("'a' # one\n# two\n# three\n/ 'b'\n") == "'a' / 'b'"


def test_strip_keeps_inner_newlines_outside_comments() -> None:
    assert strip("'a'\n  / 'b'\n") == "'a'\n  / 'b'"


def test_strip_rejects_unterminated_comment() -> None:
    with pytest.raises(UnterminatedCommentError) as excinfo:
        strip("'a' # trailing")
    assert excinfo.value.index == 4


def test_remove_spans_takes_preceding_spaces() -> None:
    text = "'a'  { return 1 }\n/ 'b'\n"
    start = text.index("{")
    end = text.index("}") + 1
    assert remove_spans(text, [(start, end)]) == "'a'\n/ 'b'\n"


def test_remove_spans_takes_whole_line_when_span_opens_it() -> None:
    text = "'a'\n  { x }\n  / 'b'\n"
    start = text.index("{")
    end = text.index("}") + 1
    assert remove_spans(text, [(start, end)]) == "'a'\n  / 'b'\n"


def test_remove_spans_handles_several_spans_out_of_order() -> None:
    text = "A {1} / B {2}\n"
    first = (text.index("{1}"), text.index("{1}") + 3)
    second = (text.index("{2}"), text.index("{2}") + 3)
    assert remove_spans(text, [second, first]) == "A / B\n"


def test_strip_ends_comment_at_any_line_break() -> None:
    assert strip("'a' # one\r'b' # two\r\n/ 'c' # three\n") == "'a' 'b' / 'c'"
