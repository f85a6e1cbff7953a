"""Normalize collected answers before they are substituted into a template."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, Mapping, Optional

PLACEHOLDER = "_______________"
DATE_FORMAT = "%B %d, %Y"

_LOGGER = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _parse_money(value: Any, default: Optional[float] = None) -> Optional[float]:
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        cleaned = value.strip().replace("$", "").replace(",", "")
        if cleaned:
            try:
                return float(cleaned)
            except ValueError:
                return default
    return default


def format_money(value: Any) -> str:
    """Render ``1500``, ``"1500"`` or ``"$1,500"`` as ``"$1,500.00"``."""
    amount = _parse_money(value)
    if amount is None:
        return PLACEHOLDER if is_blank(value) else str(value).strip()
    return f"${amount:,.2f}"


def format_date(value: Any) -> str:
    """Render a date, datetime or ISO string as ``"June 01, 2024"``."""
    if is_blank(value):
        return PLACEHOLDER
    if isinstance(value, datetime):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text).strftime(DATE_FORMAT)
    except ValueError:
        # Free-text dates ("on or about June") are kept as typed.
        return text


def normalize_answers(
    answers: Mapping[str, Any],
    date_fields: Iterable[str] = (),
    money_fields: Iterable[str] = (),
) -> Dict[str, str]:
    """Return display strings for every answer; blanks become ``PLACEHOLDER``."""
    out: Dict[str, str] = {}
    dates = set(date_fields)
    money = set(money_fields)

    for key, value in answers.items():
        if is_blank(value):
            out[key] = PLACEHOLDER
        elif key in dates:
            out[key] = format_date(value)
        elif key in money:
            out[key] = format_money(value)
        else:
            out[key] = str(value).strip()

    blanks = sorted(key for key, value in out.items() if value == PLACEHOLDER)
    if blanks:
        _LOGGER.debug("Blank answers replaced with placeholder.", extra={"fields": blanks})
    return out
