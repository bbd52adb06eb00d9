# 📄 File: plantscan/modules/plant_identification/infrastructure/external/geolocation.py
# 🧭 Purpose (Layman Explanation):
# Tries once, at startup, to find out roughly where we are, so the identifier can
# favour plants that grow nearby. If it can't tell within a few seconds, it gives up.
# 🧪 Purpose (Technical Summary):
# One-shot, time-bounded geolocation probe: configured coordinates first, then an
# IP-geolocation lookup. Any failure yields None; nothing is retried.
# 🔗 Dependencies:
# asyncio, plantscan.shared.infrastructure.external_apis.api_client
# 🔄 Connected Modules / Calls From:
# plantscan.main lifespan (once per process)

import asyncio
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from plantscan.modules.plant_identification.domain.models import Geo
from plantscan.shared.infrastructure.external_apis.api_client import APIClient
from plantscan.shared.utils.logging import get_logger

logger = get_logger(__name__)


class GeolocationProbe:
    """Best-effort coordinate lookup."""

    def __init__(
        self,
        api_client: Optional[APIClient] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        timeout: float = 5.0,
    ):
        self.api_client = api_client
        self.latitude = latitude
        self.longitude = longitude
        self.timeout = timeout

    async def probe(self) -> Optional[Geo]:
        if self.latitude is not None and self.longitude is not None:
            try:
                return Geo(latitude=self.latitude, longitude=self.longitude)
            except PydanticValidationError as e:
                logger.warning("Configured coordinates are invalid", extra={"error": str(e)})
                return None

        if self.api_client is None:
            return None

        try:
            data = await asyncio.wait_for(self.api_client.get(), timeout=self.timeout)
        except Exception as e:
            logger.info("Geolocation unavailable", extra={"error_type": type(e).__name__, "error": str(e)})
            return None

        geo = self.parse(data)
        if geo is None:
            logger.info("Geolocation response had no coordinates")
        return geo

    @staticmethod
    def parse(data: Any) -> Optional[Geo]:
        """Read ip-api style (``lat``/``lon``) or ``latitude``/``longitude`` payloads."""
        if not isinstance(data, dict) or data.get("status") == "fail":
            return None

        lat = data.get("lat", data.get("latitude"))
        lon = data.get("lon", data.get("longitude"))
        if lat is None or lon is None:
            return None

        try:
            return Geo(latitude=float(lat), longitude=float(lon))
        except (TypeError, ValueError, PydanticValidationError):
            return None
