# 📄 File: plantscan/modules/plant_identification/infrastructure/external/plant_id_client.py
# 🧭 Purpose (Layman Explanation):
# Sends the user's photo to the Plant.id service and brings back its list of
# "this is probably..." answers, best guess first.
# 🧪 Purpose (Technical Summary):
# Plant.id v3 identification client: base64 image encoding, request construction
# (detail fields, response language, optional geo hints) and suggestion parsing.
# 🔗 Dependencies:
# base64, plantscan.shared.infrastructure.external_apis.api_client, plantscan.shared.i18n
# 🔄 Connected Modules / Calls From:
# scan_controller.py (identify transition), plantscan.main (construction at startup)

"""
Plant.id Identification Client

Request:
    POST <PLANT_ID_API_URL>?details=<fields>&language=<en|ar>
    Api-Key: <PLANT_ID_API_KEY>
    {"images": ["<base64>"], "latitude": .., "longitude": .., "similar_images": true}

Response (relevant part):
    {"result": {"classification": {"suggestions": [{"name": .., "probability": .., "details": {..}}]}}}

A single attempt is made; failures propagate as ``ExternalAPIError`` and
are shown to the user as message text.
"""

import base64
from typing import Any, List, Optional

from plantscan.modules.plant_identification.domain.models import Geo, Suggestion
from plantscan.shared.core.exceptions import PlantIdentificationError
from plantscan.shared.i18n import identification_language
from plantscan.shared.infrastructure.external_apis.api_client import APIClient
from plantscan.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DETAILS = "common_names,url,description,watering"


def strip_data_uri(encoded: str) -> str:
    """Drop a ``data:<mime>;base64,`` prefix if present."""
    if encoded.startswith("data:") and "," in encoded:
        return encoded.split(",", 1)[1]
    return encoded


def encode_image(image: bytes) -> str:
    """Encode image bytes as plain base64 text (no data-URI prefix)."""
    return base64.b64encode(image).decode("ascii")


class PlantIdClient:
    """Client for the Plant.id identification endpoint."""

    def __init__(self, api_client: APIClient, details: str = DEFAULT_DETAILS):
        self.api_client = api_client
        self.details = details

    def build_payload(self, image: bytes, geo: Optional[Geo] = None) -> dict:
        payload = {
            "images": [strip_data_uri(encode_image(image))],
            "similar_images": True,
        }
        if geo is not None:
            payload["latitude"] = geo.latitude
            payload["longitude"] = geo.longitude
        return payload

    async def identify(self, image: bytes, locale: str, geo: Optional[Geo] = None) -> List[Suggestion]:
        """
        Identify the plant in ``image``.

        Args:
            image: Raw image bytes (already validated at capture)
            locale: Active UI locale; selects the response language
            geo: Optional coordinate hint

        Returns:
            Suggestions in the order the service ranked them

        Raises:
            ExternalAPIError: Transport failure or non-success status
            PlantIdentificationError: Response body has an unexpected shape
        """
        params = {
            "details": self.details,
            "language": identification_language(locale),
        }
        data = await self.api_client.post(data=self.build_payload(image, geo), params=params)
        suggestions = self.parse_suggestions(data)

        logger.info(
            "Identification returned suggestions",
            extra={"count": len(suggestions), "has_geo": geo is not None, "locale": locale}
        )
        return suggestions

    @staticmethod
    def parse_suggestions(data: Any) -> List[Suggestion]:
        if not isinstance(data, dict):
            raise PlantIdentificationError("Unexpected identification response")

        raw = ((data.get("result") or {}).get("classification") or {}).get("suggestions") or []
        if not isinstance(raw, list):
            raise PlantIdentificationError("Unexpected identification response")

        try:
            return [Suggestion.from_api(item) for item in raw]
        except (AttributeError, TypeError, ValueError) as e:
            raise PlantIdentificationError(f"Malformed suggestion in identification response: {e}")
