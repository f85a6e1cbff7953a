"""Unit tests for drawing laid-out pages onto a canvas."""

from datetime import datetime

from reportlab.lib.units import mm

from lexform.documents.base import timestamped_filename
from lexform.documents.pdf_export import draw_pages
from lexform.layout import Fragment, LayoutConfig, Page, Style


class RecordingCanvas:
    def __init__(self) -> None:
        self.calls = []

    def setFont(self, name, size):
        self.calls.append(("font", name, size))

    def drawString(self, x, y, text):
        self.calls.append(("left", x, y, text))

    def drawCentredString(self, x, y, text):
        self.calls.append(("center", x, y, text))

    def showPage(self):
        self.calls.append(("page",))


def test_draw_pages_flips_y_and_selects_fonts() -> None:
    """Top-down millimetre positions become bottom-up points."""
    config = LayoutConfig()
    pages = (
        Page(1, (
            Fragment("TITLE", 105, 20, Style.BOLD, 16, "center"),
            Fragment("body", 20, 35),
        )),
        Page(2, (Fragment("more", 20, 20),)),
    )
    pdf_canvas = RecordingCanvas()
    draw_pages(pdf_canvas, pages, config)

    assert pdf_canvas.calls == [
        ("font", "Helvetica-Bold", 16),
        ("center", 105 * mm, 277 * mm, "TITLE"),
        ("font", "Helvetica", 11),
        ("left", 20 * mm, 262 * mm, "body"),
        ("page",),
        ("font", "Helvetica", 11),
        ("left", 20 * mm, 277 * mm, "more"),
        ("page",),
    ]


def test_timestamped_filename() -> None:
    """File names follow <type>_<YYYYMMDD_HHmmss>.<ext>."""
    assert timestamped_filename("loan_agreement", datetime(2024, 1, 2, 3, 4, 5)) == "loan_agreement_20240102_030405.pdf"
