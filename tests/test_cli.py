"""Tests for the cssbuilder command-line interface."""

import sys

import pytest

from cssbuilder import CombinatorExpression, CompoundSelector
from cssbuilder.__main__ import build_selector, main


def _run(monkeypatch, capsys, *args):
    monkeypatch.setattr(sys, "argv", ["cssbuilder", *args])
    code = 0
    try:
        main()
    except SystemExit as e:
        code = e.code
    out, err = capsys.readouterr()
    return code, out, err


# ---------------------------------------------------------------------------
# build_selector
# ---------------------------------------------------------------------------


class TestBuildSelector:
    def test_single_compound(self):
        selector = build_selector([("element", "a"), ("class_", "x")])
        assert isinstance(selector, CompoundSelector)
        assert selector.stringify() == "a.x"

    def test_folds_to_the_right(self):
        selector = build_selector(
            [("element", "a"), ("combinator", ">"), ("element", "b"), ("combinator", "+"), ("element", "c")]
        )
        assert isinstance(selector, CombinatorExpression)
        assert isinstance(selector.right, CombinatorExpression)
        assert selector.stringify() == "a > b + c"

    def test_leading_combinator(self):
        with pytest.raises(ValueError, match="must sit between two compound selectors"):
            build_selector([("combinator", ">"), ("element", "a")])

    def test_trailing_combinator(self):
        with pytest.raises(ValueError, match="must sit between two compound selectors"):
            build_selector([("element", "a"), ("combinator", ">")])


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:
    def test_prints_selector(self, monkeypatch, capsys):
        code, out, err = _run(monkeypatch, capsys, "-i", "main", "-c", "container", "-c", "editable")
        assert code == 0
        assert out == "#main.container.editable\n"
        assert err == ""

    def test_long_options(self, monkeypatch, capsys):
        code, out, _ = _run(
            monkeypatch, capsys, "--element", "a", "--attr", 'href$=".png"', "--pseudo-class", "focus"
        )
        assert code == 0
        assert out == 'a[href$=".png"]:focus\n'

    def test_combinators(self, monkeypatch, capsys):
        code, out, _ = _run(
            monkeypatch, capsys, "-e", "tr", "-k", " ", "-e", "td", "-k", ">", "-e", "p", "-P", "first-line"
        )
        assert code == 0
        assert out == "tr td > p::first-line\n"

    def test_no_options_prints_help(self, monkeypatch, capsys):
        code, out, err = _run(monkeypatch, capsys)
        assert code == 1
        assert out == ""
        assert "usage: cssbuilder" in err

    def test_order_violation_exits_2(self, monkeypatch, capsys):
        code, out, err = _run(monkeypatch, capsys, "-c", "x", "-e", "div")
        assert code == 2
        assert out == ""
        assert "should be arranged in the following order" in err

    def test_duplicate_exits_2(self, monkeypatch, capsys):
        code, _, err = _run(monkeypatch, capsys, "-i", "a", "-i", "b")
        assert code == 2
        assert "should not occur more then one time" in err

    def test_invalid_combinator_exits_2(self, monkeypatch, capsys):
        code, _, err = _run(monkeypatch, capsys, "-e", "a", "-k", "/", "-e", "b")
        assert code == 2
        assert "Invalid combinator" in err

    def test_dangling_combinator_exits_2(self, monkeypatch, capsys):
        code, _, err = _run(monkeypatch, capsys, "-e", "a", "-k", "+")
        assert code == 2
        assert "must sit between two compound selectors" in err

    def test_version(self, monkeypatch, capsys):
        code, out, _ = _run(monkeypatch, capsys, "--version")
        assert code == 0
        assert out.startswith("cssbuilder ")
