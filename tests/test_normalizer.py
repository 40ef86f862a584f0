"""Tests for punctuation-to-line-break normalization."""

import pytest

from textsub.normalizer import normalize


def test_mixed_width_punctuation_becomes_line_breaks() -> None:
    assert normalize("A：B,C。D") == "A\nB\nC\nD"


@pytest.mark.parametrize("mark", ["：", ":", "，", ",", ".", "。", "…"])
def test_each_single_character_mark_is_replaced(mark: str) -> None:
    assert normalize(f"left{mark}right") == "left\nright"


def test_three_dot_ellipsis_collapses_into_one_break() -> None:
    assert normalize("wait...what") == "wait\nwhat"


def test_longer_dot_runs_are_consumed_greedily() -> None:
    assert normalize("a....b") == "a\n\nb"


def test_text_without_punctuation_is_unchanged() -> None:
    text = "no marks here\nsecond line; semicolons and ! stay"
    assert normalize(text) == text


def test_empty_text() -> None:
    assert normalize("") == ""


def test_consecutive_marks_leave_blank_lines() -> None:
    assert normalize("Hi,。there") == "Hi\n\nthere"
