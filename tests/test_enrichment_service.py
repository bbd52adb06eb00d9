import asyncio

from plantscan.modules.plant_identification.application import EnrichmentService
from plantscan.modules.plant_identification.domain.models import FetchStatus, WateringFrequency
from plantscan.shared.core.exceptions import APITimeoutError, ExternalAPIError
from tests.conftest import FakePerenualClient, FakeWikipediaClient


async def test_both_lookups_succeed(perenual, wikipedia):
    outcome = await EnrichmentService(perenual, wikipedia).enrich("Ficus elastica", "he")

    assert outcome.care.status is FetchStatus.OK
    assert outcome.care.value.watering is WateringFrequency.AVERAGE
    assert outcome.summary.status is FetchStatus.OK
    assert outcome.summary.value.extract.startswith("Ficus elastica")


async def test_name_is_passed_verbatim(perenual, wikipedia):
    await EnrichmentService(perenual, wikipedia).enrich("Ficus elastica 'Robusta'", "ar")

    assert perenual.search_calls == ["Ficus elastica 'Robusta'"]
    assert wikipedia.calls == [("Ficus elastica 'Robusta'", "ar")]


async def test_no_species_match_is_empty_and_skips_details(wikipedia):
    perenual = FakePerenualClient()
    outcome = await EnrichmentService(perenual, wikipedia).enrich("Ficus elastica", "he")

    assert outcome.care.status is FetchStatus.EMPTY
    assert perenual.detail_calls == []
    assert outcome.summary.is_ok


async def test_failures_are_independent(perenual):
    timeout = APITimeoutError("wikipedia_he", 30)
    wikipedia = FakeWikipediaClient(error=timeout)
    outcome = await EnrichmentService(perenual, wikipedia).enrich("Ficus elastica", "he")

    assert outcome.care.is_ok
    assert outcome.summary.status is FetchStatus.FAILED
    assert outcome.summary.error is timeout


async def test_care_failure_keeps_summary(wikipedia):
    perenual = FakePerenualClient(error=ExternalAPIError("Server error", api_name="perenual", api_status_code=500))
    outcome = await EnrichmentService(perenual, wikipedia).enrich("Ficus elastica", "he")

    assert outcome.care.status is FetchStatus.FAILED
    assert outcome.care.reason == "Server error"
    assert outcome.summary.is_ok


async def test_missing_summary_is_empty(perenual):
    outcome = await EnrichmentService(perenual, FakeWikipediaClient()).enrich("Ficus elastica", "he")
    assert outcome.summary.status is FetchStatus.EMPTY


async def test_lookups_run_concurrently(wikipedia):
    perenual = FakePerenualClient(species={"Ficus elastica": 42}, details={42: {"watering": "Average"}})
    perenual.gates["Ficus elastica"] = asyncio.Event()
    service = EnrichmentService(perenual, wikipedia)

    task = asyncio.create_task(service.enrich("Ficus elastica", "he"))
    for _ in range(100):
        if wikipedia.calls:
            break
        await asyncio.sleep(0)

    # the summary lookup started while the species search is still blocked
    assert wikipedia.calls == [("Ficus elastica", "he")]
    assert not task.done()

    perenual.gates["Ficus elastica"].set()
    outcome = await task
    assert outcome.care.is_ok
