"""Read-only country/state lookup used to resolve jurisdiction answers.

Form answers carry jurisdictions as ``"<id>:<name>"`` strings (``"233:United States"``)
or as bare codes/names. The lookup is injected into template filling so the
bundled dataset can be swapped for a complete one.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Protocol, Tuple

_LOGGER = logging.getLogger(__name__)


class JurisdictionLookup(Protocol):
    def country_name(self, country: str) -> Optional[str]:
        ...

    def state_name(self, country: str, state: str) -> Optional[str]:
        ...


def split_answer(value: str) -> Tuple[str, str]:
    """Split ``"233:United States"`` into ``("233", "United States")``."""
    key, sep, label = value.partition(":")
    if not sep:
        return value.strip(), ""
    return key.strip(), label.strip()


class StaticJurisdictionLookup:
    def __init__(
        self,
        countries: Mapping[str, str],
        states: Optional[Mapping[str, Mapping[str, str]]] = None,
    ) -> None:
        self._countries = dict(countries)
        self._states = {country: dict(entries) for country, entries in (states or {}).items()}

    def _country_key(self, country: str) -> Optional[str]:
        key, label = split_answer(country)
        if key in self._countries:
            return key
        wanted = (label or key).lower()
        for country_id, name in self._countries.items():
            if name.lower() == wanted:
                return country_id
        return None

    def country_name(self, country: str) -> Optional[str]:
        key = self._country_key(country)
        if key is not None:
            return self._countries[key]
        _, label = split_answer(country)
        if label:
            return label
        _LOGGER.warning("Unknown country in answers.", extra={"country": country})
        return None

    def state_name(self, country: str, state: str) -> Optional[str]:
        key, label = split_answer(state)
        country_key = self._country_key(country)
        entries = self._states.get(country_key or "", {})
        if key.upper() in entries:
            return entries[key.upper()]
        wanted = (label or key).lower()
        for name in entries.values():
            if name.lower() == wanted:
                return name
        if label:
            return label
        _LOGGER.warning("Unknown state in answers.", extra={"country": country, "state": state})
        return None


US_STATES: Dict[str, str] = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas", "CA": "California",
    "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware", "DC": "District of Columbia",
    "FL": "Florida", "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho", "IL": "Illinois",
    "IN": "Indiana", "IA": "Iowa", "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana",
    "ME": "Maine", "MD": "Maryland", "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota",
    "MS": "Mississippi", "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada",
    "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York",
    "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma", "OR": "Oregon",
    "PA": "Pennsylvania", "RI": "Rhode Island", "SC": "South Carolina", "SD": "South Dakota",
    "TN": "Tennessee", "TX": "Texas", "UT": "Utah", "VT": "Vermont", "VA": "Virginia",
    "WA": "Washington", "WV": "West Virginia", "WI": "Wisconsin", "WY": "Wyoming",
}

CA_PROVINCES: Dict[str, str] = {
    "AB": "Alberta", "BC": "British Columbia", "MB": "Manitoba", "NB": "New Brunswick",
    "NL": "Newfoundland and Labrador", "NS": "Nova Scotia", "NT": "Northwest Territories",
    "NU": "Nunavut", "ON": "Ontario", "PE": "Prince Edward Island", "QC": "Quebec",
    "SK": "Saskatchewan", "YT": "Yukon",
}

DEFAULT_LOOKUP = StaticJurisdictionLookup(
    countries={"233": "United States", "39": "Canada", "232": "United Kingdom"},
    states={"233": US_STATES, "39": CA_PROVINCES},
)
