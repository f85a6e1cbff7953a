"""Greedy word wrapping against a width measure."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from reportlab.pdfbase.pdfmetrics import stringWidth

Measure = Callable[[str], float]

POINTS_PER_MM = 72 / 25.4


def font_measure(font_name: str = "Helvetica", font_size: float = 11) -> Measure:
    """Return a measure giving the rendered width of a string in millimetres."""

    def measure(text: str) -> float:
        return stringWidth(text, font_name, font_size) / POINTS_PER_MM

    return measure


def char_measure(unit: float = 1.0) -> Measure:
    """Fixed-width measure: every character is ``unit`` wide."""

    def measure(text: str) -> float:
        return len(text) * unit

    return measure


def _wrap_words(words: Sequence[str], max_width: float, measure: Measure) -> List[str]:
    lines: List[str] = []
    current = words[0]
    for word in words[1:]:
        candidate = f"{current} {word}"
        if measure(candidate) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines


def wrap_text(text: Optional[str], max_width: float, measure: Measure) -> List[str]:
    """Wrap ``text`` into lines no wider than ``max_width``.

    Each newline-separated paragraph is wrapped on its own. Runs of blank lines
    between paragraphs collapse into a single empty line; leading and trailing
    blank lines are dropped. A word wider than ``max_width`` is kept whole on a
    line of its own.
    """
    if not text:
        return []

    lines: List[str] = []
    gap_pending = False
    for paragraph in text.splitlines():
        words = paragraph.split()
        if not words:
            gap_pending = bool(lines)
            continue
        if gap_pending:
            lines.append("")
            gap_pending = False
        lines.extend(_wrap_words(words, max_width, measure))
    return lines
