# 📄 File: plantscan/modules/plant_identification/presentation/api/schemas/scan_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what the app accepts when someone changes the screen language.
# 🧪 Purpose (Technical Summary):
# Request schemas for the scan endpoints. Responses reuse the ScanView DTO.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.scan

from pydantic import BaseModel, Field


class LocaleRequest(BaseModel):
    """Body of ``PUT /scan/locale``."""

    lang: str = Field(..., min_length=2, max_length=8, description="Locale code (he or ar)")

    class Config:
        json_schema_extra = {
            "example": {"lang": "ar"}
        }
