"""
Domain models for plant identification and care enrichment.
"""

from .care_profile import CareProfile, EncyclopediaSummary, SunlightRequirement, WateringFrequency
from .fetch_result import FetchResult, FetchStatus
from .geo import Geo
from .scan_state import BUSY_STATES, ScanState
from .suggestion import Suggestion

__all__ = [
    "CareProfile",
    "EncyclopediaSummary",
    "SunlightRequirement",
    "WateringFrequency",
    "FetchResult",
    "FetchStatus",
    "Geo",
    "BUSY_STATES",
    "ScanState",
    "Suggestion",
]
