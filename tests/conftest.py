import asyncio
import io
from typing import Dict, List, Optional

import pytest
from PIL import Image

from plantscan.modules.plant_identification.application import EnrichmentService, ScanController
from plantscan.modules.plant_identification.domain.models import CareProfile, EncyclopediaSummary, Suggestion
from plantscan.modules.plant_identification.infrastructure.preview_store import PreviewStore
from plantscan.shared.config.settings import Settings


def make_image(fmt: str = "PNG", size=(4, 4)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(34, 139, 34)).save(buffer, format=fmt)
    return buffer.getvalue()


def make_settings(**overrides) -> Settings:
    values = {
        "ENVIRONMENT": "test",
        "LOG_FORMAT": "text",
        "PLANT_ID_API_KEY": "plant-id-test-key",
        "PERENUAL_API_KEY": "perenual-test-key",
        "GEO_PROBE_ENABLED": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakePlantIdClient:
    """Records calls; optionally waits on ``gate`` before answering."""

    def __init__(self, suggestions: Optional[List[Suggestion]] = None, error: Optional[Exception] = None):
        self.suggestions = suggestions or []
        self.error = error
        self.calls = []
        self.gate: Optional[asyncio.Event] = None
        self.started = asyncio.Event()

    async def identify(self, image, locale, geo=None):
        self.calls.append({"image": image, "locale": locale, "geo": geo})
        self.started.set()
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.suggestions)


class FakePerenualClient:
    def __init__(self, species: Optional[Dict[str, int]] = None, details: Optional[Dict[int, dict]] = None,
                 error: Optional[Exception] = None):
        self.species = species or {}
        self.details = details or {}
        self.error = error
        self.search_calls: List[str] = []
        self.detail_calls: List[int] = []
        self.gates: Dict[str, asyncio.Event] = {}

    async def search_species(self, name):
        self.search_calls.append(name)
        if name in self.gates:
            await self.gates[name].wait()
        if self.error is not None:
            raise self.error
        return self.species.get(name)

    async def get_species_details(self, species_id):
        self.detail_calls.append(species_id)
        return CareProfile.model_validate(self.details[species_id])


class FakeWikipediaClient:
    def __init__(self, summaries: Optional[Dict[str, str]] = None, error: Optional[Exception] = None):
        self.summaries = summaries or {}
        self.error = error
        self.calls = []

    async def get_summary(self, title, lang):
        self.calls.append((title, lang))
        if self.error is not None:
            raise self.error
        if title not in self.summaries:
            return None
        return EncyclopediaSummary(extract=self.summaries[title], title=title)


FICUS = Suggestion(scientific_name="Ficus elastica", probability=0.92)


@pytest.fixture
def png_bytes() -> bytes:
    return make_image("PNG")


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def plant_id() -> FakePlantIdClient:
    return FakePlantIdClient(suggestions=[FICUS])


@pytest.fixture
def perenual() -> FakePerenualClient:
    return FakePerenualClient(
        species={"Ficus elastica": 42},
        details={42: {"id": 42, "watering": "Average", "sunlight": ["Part shade"]}},
    )


@pytest.fixture
def wikipedia() -> FakeWikipediaClient:
    return FakeWikipediaClient(summaries={"Ficus elastica": "Ficus elastica is a species of flowering plant."})


@pytest.fixture
def preview_store() -> PreviewStore:
    return PreviewStore()


@pytest.fixture
def controller(plant_id, perenual, wikipedia, preview_store, settings) -> ScanController:
    return ScanController(
        plant_id=plant_id,
        enrichment=EnrichmentService(perenual=perenual, wikipedia=wikipedia),
        preview_store=preview_store,
        settings=settings,
    )
