# 📄 File: plantscan/modules/plant_identification/infrastructure/external/perenual_client.py
# 🧭 Purpose (Layman Explanation):
# Looks a plant up in the Perenual gardening database and fetches its care sheet.
# 🧪 Purpose (Technical Summary):
# Perenual v2 client: species search by name (first hit's id) and species details by id.
# 🔗 Dependencies:
# plantscan.shared.infrastructure.external_apis.api_client
# 🔄 Connected Modules / Calls From:
# enrichment_service.py

from typing import Optional

from plantscan.modules.plant_identification.domain.models import CareProfile
from plantscan.shared.infrastructure.external_apis.api_client import APIClient


class PerenualClient:
    """Client for the Perenual species endpoints. The key travels as a query parameter."""

    def __init__(self, api_client: APIClient, api_key: Optional[str]):
        self.api_client = api_client
        self.api_key = api_key

    async def search_species(self, name: str) -> Optional[int]:
        """Return the id of the first species matching ``name``, or ``None``."""
        data = await self.api_client.get(
            "v2/species-list",
            params={"key": self.api_key, "q": name},
        )
        records = data.get("data") if isinstance(data, dict) else None
        if not records:
            return None

        first = records[0]
        species_id = first.get("id") if isinstance(first, dict) else None
        return species_id or None

    async def get_species_details(self, species_id: int) -> CareProfile:
        data = await self.api_client.get(
            f"v2/species/details/{species_id}",
            params={"key": self.api_key},
        )
        return CareProfile.model_validate(data)
