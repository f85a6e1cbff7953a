"""Reference data lookups for the form layer."""

from lexform.reference.jurisdictions import (
    DEFAULT_LOOKUP,
    JurisdictionLookup,
    StaticJurisdictionLookup,
    split_answer,
)

__all__ = [
    "DEFAULT_LOOKUP",
    "JurisdictionLookup",
    "StaticJurisdictionLookup",
    "split_answer",
]
