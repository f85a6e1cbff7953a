"""Unit tests for layout configuration validation."""

import pytest

from lexform.layout.config import LayoutConfig, LayoutConfigError
from lexform.layout.models import Fragment


def test_default_config_describes_a4_column() -> None:
    """Defaults give a 170 mm column and a 277 mm bottom limit."""
    config = LayoutConfig()
    assert config.column_width == 170
    assert config.bottom_limit == 277


@pytest.mark.parametrize(
    "overrides",
    [
        {"bottom_threshold": 297},
        {"bottom_threshold": 400},
        {"line_height": 0},
        {"line_height": -2},
        {"title_advance": 0},
        {"section_spacing": -1},
        {"left_margin": 100, "right_margin": 110},
        {"left_margin": -5},
        {"page_height": 0},
        {"top_margin_after_break": 275},
        {"first_page_start_y": 10},
        {"title_y": 290},
        {"title_y": 10},
        {"font_size": 0},
        {"line_height": float("nan")},
        {"top_margin_after_break": float("nan")},
        {"title_y": float("nan")},
        {"page_height": float("inf")},
        {"title_font_size": float("-inf")},
    ],
)
def test_malformed_config_fails_fast(overrides) -> None:
    """Constants that leave no room to place text are rejected at construction."""
    with pytest.raises(LayoutConfigError):
        LayoutConfig(**overrides)


def test_config_error_is_value_error() -> None:
    """Callers can treat configuration errors as ValueError."""
    with pytest.raises(ValueError):
        LayoutConfig(line_height=0)


def test_fragment_default_size_matches_body_font() -> None:
    """A fragment built without a size uses the configured body font size."""
    assert Fragment("body", 20, 35).font_size == LayoutConfig().font_size


def test_title_may_sit_on_the_top_margin() -> None:
    """The title band starts at the top margin used after a page break."""
    config = LayoutConfig(title_y=20, top_margin_after_break=20)
    assert config.title_y == config.top_margin_after_break
