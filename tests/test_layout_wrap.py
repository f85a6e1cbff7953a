"""Unit tests for greedy word wrapping."""

import pytest
from reportlab.pdfbase.pdfmetrics import stringWidth

from lexform.layout.wrap import char_measure, font_measure, wrap_text


def test_wrap_fills_lines_greedily() -> None:
    """Words accumulate while the line still fits, including at exact width."""
    assert wrap_text("aa bb cc", 5, char_measure()) == ["aa bb", "cc"]


def test_wrap_keeps_oversized_token_whole() -> None:
    """A token wider than the column sits alone on its line, untruncated."""
    token = "x" * 300
    lines = wrap_text(f"short {token} tail", 170, char_measure())
    assert lines == ["short", token, "tail"]


def test_wrap_round_trip_reproduces_normalized_text() -> None:
    """Joining wrapped lines gives back the whitespace-normalized body."""
    body = "The  Recipient shall hold\tthe Confidential Information in strict   confidence " * 6
    lines = wrap_text(body, 40, char_measure())
    assert all(len(line) <= 40 for line in lines)
    assert " ".join(lines) == " ".join(body.split())


def test_wrap_paragraph_breaks_collapse_to_one_gap() -> None:
    """Blank lines between paragraphs become a single empty line; edges are trimmed."""
    lines = wrap_text("\n\none two\n\n\n\nthree\n\n", 100, char_measure())
    assert lines == ["one two", "", "three"]


def test_wrap_single_newline_starts_new_line() -> None:
    """A lone newline ends the line without adding a gap."""
    assert wrap_text("DATE: June 01\nNAME: Jane", 100, char_measure()) == ["DATE: June 01", "NAME: Jane"]


@pytest.mark.parametrize("body", [None, "", "   ", "\n \n\t"])
def test_wrap_empty_body_yields_no_lines(body) -> None:
    """Missing or whitespace-only bodies produce nothing."""
    assert wrap_text(body, 170, char_measure()) == []


def test_wrap_is_stable() -> None:
    """The same text and width always wrap the same way."""
    body = "Upon default, the entire unpaid balance of the loan shall become immediately due and payable. " * 4
    measure = font_measure()
    assert wrap_text(body, 170, measure) == wrap_text(body, 170, measure)


def test_font_measure_converts_points_to_millimetres() -> None:
    """Widths come from reportlab font metrics expressed in millimetres."""
    measure = font_measure("Helvetica", 10)
    expected = stringWidth("Loan Agreement", "Helvetica", 10) * 25.4 / 72
    assert measure("Loan Agreement") == pytest.approx(expected)
    assert measure("") == 0


def test_font_measure_wraps_within_column() -> None:
    """Every wrapped line measures no wider than the column."""
    measure = font_measure()
    body = "This Agreement shall be governed by and construed in accordance with the laws of Texas. " * 5
    lines = wrap_text(body, 170, measure)
    assert len(lines) > 1
    assert all(measure(line) <= 170 for line in lines)
