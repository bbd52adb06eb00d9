# 📄 File: plantscan/modules/plant_identification/domain/models/care_profile.py
# 🧭 Purpose (Layman Explanation):
# Describes how to look after a plant (how often to water it, how much sun it wants,
# when to prune it) and the short encyclopedia description shown next to it.
# 🧪 Purpose (Technical Summary):
# Domain models for the Perenual species-detail payload (CareProfile) and the
# Wikipedia page summary (EncyclopediaSummary). Unknown fields pass through.
# 🔗 Dependencies:
# pydantic, enum, typing
# 🔄 Connected Modules / Calls From:
# perenual_client.py, wikipedia_client.py, enrichment_service.py, scan_controller.py

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WateringFrequency(str, Enum):
    """Perenual watering categories"""
    FREQUENT = "Frequent"
    AVERAGE = "Average"
    MINIMUM = "Minimum"
    NONE = "None"


class SunlightRequirement(str, Enum):
    """Perenual sunlight categories"""
    FULL_SUN = "Full sun"
    PART_SHADE = "Part shade"
    FULL_SHADE = "Full shade"


def _match_enum(enum_cls, value):
    # The service is inconsistent about capitalization ("full sun" / "Full sun")
    if isinstance(value, str):
        folded = value.strip().casefold()
        for member in enum_cls:
            if member.value.casefold() == folded:
                return member
    return value


class CareProfile(BaseModel):
    """
    Care attributes for one species.

    ``watering`` and ``sunlight`` are normalized to the known categories
    when they match one; other values are kept as plain strings so the
    care panel can still show them untranslated.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    common_name: Optional[str] = None
    watering: Optional[Union[WateringFrequency, str]] = None
    sunlight: List[Union[SunlightRequirement, str]] = Field(default_factory=list)
    pruning_month: List[str] = Field(default_factory=list)
    hardiness: Optional[Dict[str, Any]] = None
    pest_susceptibility: List[str] = Field(default_factory=list)
    indoor: Optional[bool] = None

    @field_validator("watering", mode="before")
    @classmethod
    def normalize_watering(cls, v):
        return _match_enum(WateringFrequency, v)

    @field_validator("sunlight", mode="before")
    @classmethod
    def normalize_sunlight(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [_match_enum(SunlightRequirement, item) for item in v]

    @field_validator("pruning_month", "pest_susceptibility", mode="before")
    @classmethod
    def normalize_string_list(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return [str(item) for item in v if item not in (None, "")]

    @field_validator("hardiness", mode="before")
    @classmethod
    def normalize_hardiness(cls, v):
        return v if isinstance(v, dict) else None


class EncyclopediaSummary(BaseModel):
    """Page summary from the encyclopedia REST endpoint."""

    model_config = ConfigDict(extra="allow")

    extract: str = ""
    title: Optional[str] = None
