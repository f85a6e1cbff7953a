"""Layout constants for a render pass."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from lexform.layout.models import BODY_FONT_SIZE


class LayoutConfigError(ValueError):
    """Raised when layout constants leave no room to place text."""


@dataclass(frozen=True)
class LayoutConfig:
    """Page geometry in millimetres (A4 defaults), y measured from the top.

    ``line_height`` is the advance after a body line, ``title_advance`` the
    advance after a section title and ``section_spacing`` the extra gap after
    each section. A line fits only while ``cursor_y + line_height`` stays below
    ``page_height - bottom_threshold``.
    """

    page_width: float = 210
    page_height: float = 297
    left_margin: float = 20
    right_margin: float = 20
    bottom_threshold: float = 20
    line_height: float = 6
    title_advance: float = 8
    section_spacing: float = 6
    top_margin_after_break: float = 20
    first_page_start_y: float = 35
    title_y: float = 20
    font_name: str = "Helvetica"
    bold_font_name: str = "Helvetica-Bold"
    font_size: float = BODY_FONT_SIZE
    title_font_size: float = 16

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, (int, float)) and not math.isfinite(value):
                raise LayoutConfigError(f"{item.name} must be a finite number, got {value}")
        if self.page_width <= 0 or self.page_height <= 0:
            raise LayoutConfigError("page_width and page_height must be positive")
        if self.left_margin < 0 or self.right_margin < 0:
            raise LayoutConfigError("margins must not be negative")
        if self.column_width <= 0:
            raise LayoutConfigError(
                f"margins {self.left_margin} + {self.right_margin} leave no column on a "
                f"{self.page_width} wide page"
            )
        if self.line_height <= 0:
            raise LayoutConfigError("line_height must be positive")
        if self.title_advance <= 0:
            raise LayoutConfigError("title_advance must be positive")
        if self.section_spacing < 0:
            raise LayoutConfigError("section_spacing must not be negative")
        if self.bottom_threshold < 0 or self.bottom_threshold >= self.page_height:
            raise LayoutConfigError(
                f"bottom_threshold {self.bottom_threshold} must lie within the page height {self.page_height}"
            )
        if self.top_margin_after_break < 0:
            raise LayoutConfigError("top_margin_after_break must not be negative")
        for name in ("top_margin_after_break", "first_page_start_y"):
            start = getattr(self, name)
            if start + self.line_height >= self.bottom_limit:
                raise LayoutConfigError(
                    f"{name}={start} leaves no room for a line above {self.bottom_limit}"
                )
        if self.first_page_start_y < self.top_margin_after_break:
            raise LayoutConfigError("first_page_start_y must not sit above top_margin_after_break")
        if not self.top_margin_after_break <= self.title_y < self.bottom_limit:
            raise LayoutConfigError(f"title_y={self.title_y} is outside the printable band")
        if self.font_size <= 0 or self.title_font_size <= 0:
            raise LayoutConfigError("font sizes must be positive")

    @property
    def column_width(self) -> float:
        return self.page_width - self.left_margin - self.right_margin

    @property
    def bottom_limit(self) -> float:
        return self.page_height - self.bottom_threshold
