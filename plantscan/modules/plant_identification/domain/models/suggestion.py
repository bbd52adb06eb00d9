# 📄 File: plantscan/modules/plant_identification/domain/models/suggestion.py
# 🧭 Purpose (Layman Explanation):
# Describes one "this might be your plant" answer from the identification service,
# with its scientific name and how confident the service is.
# 🧪 Purpose (Technical Summary):
# Domain model for a ranked classification suggestion with passthrough details.
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# plant_id_client.py (construction), scan_controller.py (selection, rendering)

from typing import Any, Dict

from pydantic import BaseModel, Field


class Suggestion(BaseModel):
    """
    One candidate species from the identification service.

    Suggestions keep the order the service returned them in; nothing
    in the scanner re-ranks them.
    """

    scientific_name: str
    probability: float = Field(default=0.0, ge=0.0, le=1.0)
    details: Dict[str, Any] = Field(default_factory=dict)  # common_names, url, description, ...

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "Suggestion":
        """Build from a ``result.classification.suggestions`` item."""
        probability = raw.get("probability") or 0.0
        return cls(
            scientific_name=raw.get("name") or "",
            probability=min(max(float(probability), 0.0), 1.0),
            details=raw.get("details") or {},
        )
