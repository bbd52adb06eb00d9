# 📄 File: plantscan/modules/plant_identification/application/enrichment_service.py
# 🧭 Purpose (Layman Explanation):
# Once we know which plant it is, this fetches its care sheet and its encyclopedia
# description. If either lookup fails, the other still goes ahead and nobody is bothered.
# 🧪 Purpose (Technical Summary):
# Best-effort species enrichment: Perenual search -> details chain and the Wikipedia
# summary run concurrently; every failure is caught, logged and reported as a FetchResult.
# 🔗 Dependencies:
# asyncio, perenual_client, wikipedia_client, plantscan.shared.i18n
# 🔄 Connected Modules / Calls From:
# scan_controller.py

import asyncio
from dataclasses import dataclass

from plantscan.modules.plant_identification.domain.models import (
    CareProfile,
    EncyclopediaSummary,
    FetchResult,
)
from plantscan.modules.plant_identification.infrastructure.external.perenual_client import PerenualClient
from plantscan.modules.plant_identification.infrastructure.external.wikipedia_client import WikipediaClient
from plantscan.shared.i18n import encyclopedia_language
from plantscan.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EnrichmentOutcome:
    care: FetchResult[CareProfile]
    summary: FetchResult[EncyclopediaSummary]


class EnrichmentService:
    """Fetches care data and the encyclopedia summary for one scientific name."""

    def __init__(self, perenual: PerenualClient, wikipedia: WikipediaClient):
        self.perenual = perenual
        self.wikipedia = wikipedia

    async def enrich(self, scientific_name: str, locale: str) -> EnrichmentOutcome:
        care, summary = await asyncio.gather(
            self.fetch_care(scientific_name),
            self.fetch_summary(scientific_name, locale),
        )
        logger.info(
            "Enrichment finished",
            extra={
                "scientific_name": scientific_name,
                "care_status": care.status.value,
                "summary_status": summary.status.value,
            }
        )
        return EnrichmentOutcome(care=care, summary=summary)

    async def fetch_care(self, scientific_name: str) -> FetchResult[CareProfile]:
        """Species search, then details for the first hit."""
        try:
            species_id = await self.perenual.search_species(scientific_name)
            if species_id is None:
                return FetchResult.empty("no species match")
            return FetchResult.ok(await self.perenual.get_species_details(species_id))
        except Exception as e:
            logger.warning(
                "Care lookup failed",
                extra={"scientific_name": scientific_name, "error_type": type(e).__name__, "error": str(e)}
            )
            return FetchResult.failed(e)

    async def fetch_summary(self, scientific_name: str, locale: str) -> FetchResult[EncyclopediaSummary]:
        lang = encyclopedia_language(locale)
        try:
            summary = await self.wikipedia.get_summary(scientific_name, lang)
        except Exception as e:
            logger.warning(
                "Encyclopedia lookup failed",
                extra={"scientific_name": scientific_name, "lang": lang,
                       "error_type": type(e).__name__, "error": str(e)}
            )
            return FetchResult.failed(e)

        if summary is None:
            return FetchResult.empty("no summary page")
        return FetchResult.ok(summary)
