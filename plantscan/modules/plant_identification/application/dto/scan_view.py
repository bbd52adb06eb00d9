# 📄 File: plantscan/modules/plant_identification/application/dto/scan_view.py
# 🧭 Purpose (Layman Explanation):
# Describes exactly what the scan screen should show right now: the photo area,
# the list of matches, the care guide and any error, already translated.
#
# 🧪 Purpose (Technical Summary):
# View snapshot DTOs produced by the scan controller and returned by every scan
# endpoint; optional panels are None when they must not render.
#
# 🔗 Dependencies:
# - pydantic for DTO validation and serialization
#
# 🔄 Connected Modules / Calls From:
# - scan_controller.py (render)
# - presentation.api.v1.scan (response model)
# - presentation.web.page (HTML rendering)

"""
Scan View DTOs

DTO Classes:
- UploadPanel: Preview link and whether identification can start
- ResultsPanel: Ranked suggestions with whole-number percentages
- CarePanel: Translated care guide plus encyclopedia extract
- ErrorPanel: Single message text
- ScanView: The whole screen
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from plantscan.modules.plant_identification.domain.models import ScanState


class UploadPanel(BaseModel):
    has_image: bool = False
    preview_url: Optional[str] = None
    can_identify: bool = False


class SuggestionItem(BaseModel):
    index: int
    scientific_name: str
    probability_percent: int
    selected: bool = False
    common_names: List[str] = Field(default_factory=list)


class ResultsPanel(BaseModel):
    items: List[SuggestionItem]


class CareRow(BaseModel):
    """One optional labelled row of the care guide (pruning, hardiness, ...)."""
    key: str
    label: str
    value: str


class CarePanel(BaseModel):
    scientific_name: str
    watering: Optional[str] = None
    sunlight: List[str] = Field(default_factory=list)
    rows: List[CareRow] = Field(default_factory=list)
    extract: Optional[str] = None


class ErrorPanel(BaseModel):
    message: str


class ScanView(BaseModel):
    """Complete, localized snapshot of the scan screen."""

    lang: str
    dir: str
    state: ScanState
    loading: bool
    labels: Dict[str, str]
    upload: UploadPanel
    results: Optional[ResultsPanel] = None
    care: Optional[CarePanel] = None
    error: Optional[ErrorPanel] = None
    no_matches: bool = False
