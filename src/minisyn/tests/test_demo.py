"""Tests for the tuple-arity demo."""

import pytest

from minisyn.demo import DemoError, demo, eval_demo


def start(diagnostic) -> tuple[int, int]:
    pos = diagnostic.range.start
    return pos.line, pos.character


class TestEvalDemo:
    def test_matching_arity(self):
        assert eval_demo("(a, b) = (1, 2)") == 'print("All good!")'

    def test_empty_tuples(self):
        assert eval_demo("() = ()") == 'print("All good!")'

    def test_too_many(self):
        with pytest.raises(DemoError) as excinfo:
            eval_demo("(a, b) = (1, 2, 3)")
        diag = excinfo.value.diagnostic
        assert diag.message == "expected 2 element(s), got 3"
        assert start(diag) == (0, 9)
        (note,) = diag.related_information
        assert note.message == "because of this"
        assert note.location.range.start.character == 0

    def test_too_few(self):
        with pytest.raises(DemoError, match="expected 3 element\\(s\\), got 2") as excinfo:
            eval_demo("(a, b, c) =\n  (1, 2)")
        assert start(excinfo.value.diagnostic) == (1, 2)

    def test_anchors_cover_the_whole_group(self):
        # Attributes belong to the group they are attached to.
        with pytest.raises(DemoError) as excinfo:
            eval_demo("(a, b) = #[x] (1, 2, 3)")
        diag = excinfo.value.diagnostic
        assert start(diag) == (0, 9)
        assert diag.range.end.character == 23
        (note,) = diag.related_information
        assert note.location.range.end.character == 6

    def test_not_an_assignment(self):
        with pytest.raises(DemoError) as excinfo:
            eval_demo("(a, b)")
        assert excinfo.value.diagnostic.message == "expected `(...) = (...)`"

    def test_not_a_tuple(self):
        with pytest.raises(DemoError, match="expected a tuple") as excinfo:
            eval_demo("a = (1, 2)")
        assert start(excinfo.value.diagnostic) == (0, 2)

    def test_parenthesized_side_is_not_a_tuple(self):
        with pytest.raises(DemoError, match="expected a tuple"):
            eval_demo("(a, b) = (1)")

    def test_parse_error(self):
        with pytest.raises(DemoError, match="expected an expression") as excinfo:
            eval_demo("(a, b) = ")
        assert start(excinfo.value.diagnostic) == (0, 9)


class TestDemo:
    def test_ok(self, capsys):
        assert demo("(x,) = (1,)") == 'print("All good!")'
        assert capsys.readouterr().err == ""

    def test_reports_on_stderr(self, capsys):
        assert demo("(a, b) = (1, 2, 3)") == ""
        assert capsys.readouterr().err.splitlines() == [
            "error: expected 2 element(s), got 3 at 1:9",
            "note: because of this at 1:0",
        ]
