"""Paginated text writer.

Every document is laid out by one ``PaginatedTextWriter``: a title at a fixed
top position, then sections (bold heading plus wrapped body) and raw lines
written top to bottom. The writer owns the vertical cursor; before any line
that would reach the bottom limit it starts a new page and resets the cursor,
so a wrapped line is never split across pages.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple, Union

from lexform.layout.config import LayoutConfig
from lexform.layout.models import Fragment, Page, Section, Style, WriterState
from lexform.layout.wrap import Measure, font_measure, wrap_text

_LOGGER = logging.getLogger(__name__)

SectionLike = Union[Section, Tuple[Optional[str], Optional[str]]]


class PaginatedTextWriter:
    def __init__(self, config: Optional[LayoutConfig] = None, measure: Optional[Measure] = None) -> None:
        self.config = config or LayoutConfig()
        self._measure = measure or font_measure(self.config.font_name, self.config.font_size)
        self._state = WriterState(cursor_y=self.config.first_page_start_y)

    @property
    def cursor_y(self) -> float:
        return self._state.cursor_y

    @property
    def page_count(self) -> int:
        return len(self._state.pages)

    def _current_page(self) -> List[Fragment]:
        if not self._state.pages:
            self._state.pages.append([])
        return self._state.pages[-1]

    def _overflows(self, height: float) -> bool:
        # Reaching the limit exactly counts as overflow.
        return self._state.cursor_y + height >= self.config.bottom_limit

    def _break_page(self) -> None:
        self._state.pages.append([])
        _LOGGER.debug(
            "Page break before y=%.2f",
            self._state.cursor_y,
            extra={"page": len(self._state.pages)},
        )
        self._state.cursor_y = self.config.top_margin_after_break

    def _place(self, text: str, style: Style, advance: float) -> None:
        if self._overflows(self.config.line_height):
            self._break_page()
            if not text:
                return
        page = self._current_page()
        if text:
            page.append(
                Fragment(
                    text=text,
                    x=self.config.left_margin,
                    y=self._state.cursor_y,
                    style=style,
                    font_size=self.config.font_size,
                )
            )
        self._state.cursor_y += advance

    def write_title(
        self,
        text: Optional[str],
        font_size: Optional[float] = None,
        bold: bool = True,
        centered: bool = True,
    ) -> None:
        """Place the document title at ``config.title_y`` without moving the cursor."""
        if not text:
            return
        x = self.config.page_width / 2 if centered else self.config.left_margin
        self._current_page().append(
            Fragment(
                text=text,
                x=x,
                y=self.config.title_y,
                style=Style.BOLD if bold else Style.NORMAL,
                font_size=font_size or self.config.title_font_size,
                align="center" if centered else "left",
            )
        )

    def write_section(
        self,
        title: Optional[str],
        body: Optional[str],
        max_width: Optional[float] = None,
    ) -> None:
        wrote = False
        if title:
            self._place(title, Style.BOLD, self.config.title_advance)
            wrote = True

        width = self.config.column_width if max_width is None else max_width
        for line in wrap_text(body, width, self._measure):
            self._place(line, Style.NORMAL, self.config.line_height)
            wrote = True

        if wrote:
            self._state.cursor_y += self.config.section_spacing

    def write_line(self, text: Optional[str], bold: bool = False, advance: Optional[float] = None) -> None:
        """Write unwrapped text, one line per newline; an empty line only advances the cursor.

        ``advance`` must be a positive finite number; it applies to every line.
        """
        if advance is None:
            step = self.config.line_height
        elif not math.isfinite(advance) or advance <= 0:
            raise ValueError(f"advance must be a positive finite number, got {advance}")
        else:
            step = advance
        style = Style.BOLD if bold else Style.NORMAL
        for line in (text or "").splitlines() or [""]:
            self._place(line, style, step)

    def ensure_space(self, height: float) -> None:
        """Start a new page unless ``height`` units remain below the cursor."""
        page = self._state.pages[-1] if self._state.pages else []
        if page and self._overflows(height):
            self._break_page()

    def finish(self) -> Tuple[Page, ...]:
        """Return the pages written so far; an untouched writer yields one empty page."""
        if not self._state.pages:
            return (Page(number=1),)
        return tuple(
            Page(number=index, fragments=tuple(fragments))
            for index, fragments in enumerate(self._state.pages, start=1)
        )


def render_sections(
    sections: Iterable[SectionLike],
    config: Optional[LayoutConfig] = None,
    title: Optional[str] = None,
    measure: Optional[Measure] = None,
) -> Tuple[Page, ...]:
    """Lay out ``sections`` in order, after an optional document title."""
    writer = PaginatedTextWriter(config, measure=measure)
    writer.write_title(title)
    for item in sections:
        section = item if isinstance(item, Section) else Section.from_pair(item)
        writer.write_section(section.title, section.body)
    return writer.finish()
