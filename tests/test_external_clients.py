import asyncio
import base64

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from plantscan.modules.plant_identification.domain.models import Geo, SunlightRequirement, WateringFrequency
from plantscan.modules.plant_identification.infrastructure.external import (
    GeolocationProbe,
    PerenualClient,
    PlantIdClient,
    WikipediaClient,
    strip_data_uri,
)
from plantscan.shared.core.exceptions import ExternalAPIError, PlantIdentificationError


class RecordingAPIClient:
    """Stands in for APIClient; returns canned responses in order."""

    def __init__(self, *responses, error=None, delay=None):
        self.responses = list(responses)
        self.error = error
        self.delay = delay
        self.calls = []

    async def _respond(self):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    async def get(self, endpoint="", params=None, headers=None, timeout=None):
        self.calls.append(("GET", endpoint, params, None))
        return await self._respond()

    async def post(self, endpoint="", data=None, params=None, headers=None, timeout=None):
        self.calls.append(("POST", endpoint, params, data))
        return await self._respond()


IDENTIFICATION_RESPONSE = {
    "result": {
        "classification": {
            "suggestions": [
                {"name": "Ficus elastica", "probability": 0.92, "details": {"common_names": ["Rubber plant"]}},
                {"name": "Ficus lyrata", "probability": 0.03},
            ]
        }
    }
}


# ---------------------------------------------------------------------------
# Plant.id
# ---------------------------------------------------------------------------

async def test_identify_builds_request_and_parses_suggestions(png_bytes):
    api = RecordingAPIClient(IDENTIFICATION_RESPONSE)
    client = PlantIdClient(api)

    suggestions = await client.identify(png_bytes, "he", Geo(latitude=31.77, longitude=35.21))

    method, endpoint, params, payload = api.calls[0]
    assert method == "POST"
    assert endpoint == ""
    assert params == {"details": "common_names,url,description,watering", "language": "en"}
    assert payload["images"] == [base64.b64encode(png_bytes).decode("ascii")]
    assert payload["similar_images"] is True
    assert payload["latitude"] == 31.77
    assert payload["longitude"] == 35.21

    assert [s.scientific_name for s in suggestions] == ["Ficus elastica", "Ficus lyrata"]
    assert suggestions[0].probability == 0.92
    assert suggestions[0].details["common_names"] == ["Rubber plant"]


async def test_identify_in_arabic_without_geo(png_bytes):
    api = RecordingAPIClient(IDENTIFICATION_RESPONSE)
    await PlantIdClient(api).identify(png_bytes, "ar")

    _, _, params, payload = api.calls[0]
    assert params["language"] == "ar"
    assert "latitude" not in payload
    assert "longitude" not in payload


def test_strip_data_uri():
    assert strip_data_uri("data:image/png;base64,QUJD") == "QUJD"
    assert strip_data_uri("QUJD") == "QUJD"


@pytest.mark.parametrize("response", [
    {},
    {"result": {}},
    {"result": {"classification": {}}},
    {"result": {"classification": {"suggestions": None}}},
])
def test_missing_suggestion_path_means_no_suggestions(response):
    assert PlantIdClient.parse_suggestions(response) == []


def test_unexpected_response_shape_raises():
    with pytest.raises(PlantIdentificationError):
        PlantIdClient.parse_suggestions(["not", "a", "dict"])
    with pytest.raises(PlantIdentificationError):
        PlantIdClient.parse_suggestions({"result": {"classification": {"suggestions": "oops"}}})


def test_probability_is_clamped_and_defaulted():
    suggestions = PlantIdClient.parse_suggestions({
        "result": {"classification": {"suggestions": [
            {"name": "A", "probability": 1.2},
            {"name": "B"},
        ]}}
    })
    assert [s.probability for s in suggestions] == [1.0, 0.0]


# ---------------------------------------------------------------------------
# Perenual
# ---------------------------------------------------------------------------

async def test_search_species_returns_first_id():
    api = RecordingAPIClient({"data": [{"id": 42}, {"id": 43}]})
    client = PerenualClient(api, api_key="k")

    assert await client.search_species("Ficus elastica") == 42
    assert api.calls[0] == ("GET", "v2/species-list", {"key": "k", "q": "Ficus elastica"}, None)


@pytest.mark.parametrize("response", [{"data": []}, {}, {"data": [{}]}, []])
async def test_search_species_without_match(response):
    client = PerenualClient(RecordingAPIClient(response), api_key="k")
    assert await client.search_species("Nothing") is None


async def test_species_details_normalizes_care_values():
    api = RecordingAPIClient({
        "id": 42,
        "common_name": "rubber plant",
        "watering": "average",
        "sunlight": ["part shade", "filtered shade"],
        "pruning_month": None,
        "hardiness": {"min": "10", "max": "12"},
        "indoor": True,
        "dimension": "Height: 50 feet",
    })
    care = await PerenualClient(api, api_key="k").get_species_details(42)

    assert api.calls[0][1] == "v2/species/details/42"
    assert care.watering is WateringFrequency.AVERAGE
    assert care.sunlight == [SunlightRequirement.PART_SHADE, "filtered shade"]
    assert care.pruning_month == []
    assert care.indoor is True
    assert care.model_extra["dimension"] == "Height: 50 feet"


# ---------------------------------------------------------------------------
# Wikipedia
# ---------------------------------------------------------------------------

@pytest.fixture
async def wiki_server():
    requests = []

    async def summary(request):
        requests.append((request.match_info["lang"], request.match_info["title"]))
        if request.match_info["title"] == "Ficus elastica":
            return web.json_response({"title": "Ficus elastica", "extract": "תקציר"})
        return web.json_response({"title": "Not found."}, status=404)

    app = web.Application()
    app.router.add_get("/{lang}/api/rest_v1/page/summary/{title}", summary)
    server = TestServer(app)
    await server.start_server()
    server.requests = requests
    yield server
    await server.close()


@pytest.fixture
async def wiki_client(wiki_server):
    template = str(wiki_server.make_url("/")) + "{lang}/api/rest_v1"
    client = WikipediaClient(template, timeout=5)
    yield client
    await client.close()


async def test_summary_uses_language_host_and_encodes_title(wiki_client, wiki_server):
    summary = await wiki_client.get_summary("Ficus elastica", "he")

    assert summary.extract == "תקציר"
    assert wiki_server.requests == [("he", "Ficus elastica")]


async def test_missing_summary_is_none(wiki_client):
    assert await wiki_client.get_summary("Nonexistent plant", "ar") is None


async def test_summary_transport_failure_raises():
    client = WikipediaClient("http://127.0.0.1:9/{lang}", timeout=2)
    try:
        with pytest.raises(ExternalAPIError):
            await client.get_summary("Ficus elastica", "he")
    finally:
        await client.close()


# ---------------------------------------------------------------------------
# Geolocation
# ---------------------------------------------------------------------------

async def test_configured_coordinates_win():
    api = RecordingAPIClient({"lat": 1, "lon": 2})
    geo = await GeolocationProbe(api_client=api, latitude=32.1, longitude=34.8).probe()

    assert geo == Geo(latitude=32.1, longitude=34.8)
    assert api.calls == []


async def test_ip_lookup_is_parsed():
    api = RecordingAPIClient({"status": "success", "lat": 31.25, "lon": 34.79})
    assert await GeolocationProbe(api_client=api).probe() == Geo(latitude=31.25, longitude=34.79)


@pytest.mark.parametrize("api", [
    RecordingAPIClient(error=ExternalAPIError("refused", api_name="geolocation")),
    RecordingAPIClient({"status": "fail", "message": "private range"}),
    RecordingAPIClient({"lat": "north", "lon": 3}),
    RecordingAPIClient({"lat": 95, "lon": 3}),
])
async def test_probe_failures_yield_none(api):
    assert await GeolocationProbe(api_client=api).probe() is None


async def test_probe_is_time_bounded():
    api = RecordingAPIClient({"lat": 1, "lon": 2}, delay=1)
    assert await GeolocationProbe(api_client=api, timeout=0.05).probe() is None


async def test_no_source_means_no_geo():
    assert await GeolocationProbe().probe() is None
