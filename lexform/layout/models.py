"""Layout data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


BODY_FONT_SIZE = 11


class Style(str, Enum):
    NORMAL = "normal"
    BOLD = "bold"


@dataclass(frozen=True)
class Fragment:
    """One positioned piece of text; ``y`` grows downward from the page top."""

    text: str
    x: float
    y: float
    style: Style = Style.NORMAL
    font_size: float = BODY_FONT_SIZE
    align: str = "left"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "style": self.style.value,
            "font_size": self.font_size,
            "align": self.align,
        }


@dataclass(frozen=True)
class Page:
    number: int
    fragments: Tuple[Fragment, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "fragments": [fragment.to_dict() for fragment in self.fragments],
        }


@dataclass(frozen=True)
class Section:
    title: Optional[str] = ""
    body: Optional[str] = ""

    @classmethod
    def from_pair(cls, pair: Tuple[Optional[str], Optional[str]]) -> "Section":
        title, body = pair
        return cls(title=title, body=body)


@dataclass
class WriterState:
    """Mutable cursor for a single render pass."""

    cursor_y: float
    pages: List[List[Fragment]] = field(default_factory=list)
