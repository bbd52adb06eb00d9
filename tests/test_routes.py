import pytest
from fastapi.testclient import TestClient

from plantscan.main import create_application
from plantscan.modules.plant_identification.application import EnrichmentService, ScanController
from plantscan.modules.plant_identification.domain.models import Suggestion
from plantscan.shared.i18n import TRANSLATIONS
from tests.conftest import make_settings


def make_client(controller, preview_store):
    app = create_application(make_settings())
    client = TestClient(app)
    client.__enter__()
    app.state.scan_controller = controller
    app.state.preview_store = preview_store
    return client


@pytest.fixture
def client(controller, preview_store):
    test_client = make_client(controller, preview_store)
    yield test_client
    test_client.__exit__(None, None, None)


def upload(client, data, filename="leaf.png", content_type="image/png"):
    return client.post("/api/v1/scan/image", files={"file": (filename, data, content_type)})


def test_initial_view(client):
    response = client.get("/api/v1/scan")

    assert response.status_code == 200
    view = response.json()
    assert view["lang"] == "he"
    assert view["dir"] == "rtl"
    assert view["state"] == "idle"
    assert view["labels"] == TRANSLATIONS["he"]
    assert view["upload"] == {"has_image": False, "preview_url": None, "can_identify": False}
    assert view["results"] is None
    assert view["care"] is None
    assert view["error"] is None


def test_capture_identify_and_preview(client, png_bytes):
    view = upload(client, png_bytes).json()
    assert view["state"] == "capturing"
    assert view["upload"]["can_identify"] is True

    preview = client.get(view["upload"]["preview_url"])
    assert preview.status_code == 200
    assert preview.headers["content-type"] == "image/png"
    assert preview.content == png_bytes

    response = client.post("/api/v1/scan/identify")
    assert response.status_code == 200
    view = response.json()
    assert view["state"] == "displaying"
    assert view["results"]["items"][0]["probability_percent"] == 92
    assert view["care"]["watering"] == "השקיה בינונית"
    assert view["care"]["sunlight"] == ["חצי צל"]


def test_reset_revokes_preview(client, png_bytes):
    preview_url = upload(client, png_bytes).json()["upload"]["preview_url"]

    view = client.post("/api/v1/scan/reset").json()
    assert view["upload"]["preview_url"] is None

    response = client.get(preview_url)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_invalid_upload_is_rejected(client):
    response = upload(client, b"plain text", filename="notes.txt", content_type="text/plain")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_FILE_TYPE"
    assert client.get("/api/v1/scan").json()["state"] == "idle"


def test_select_unknown_suggestion(client, png_bytes):
    upload(client, png_bytes)
    client.post("/api/v1/scan/identify")

    response = client.post("/api/v1/scan/suggestions/5/select")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"

    response = client.post("/api/v1/scan/suggestions/0/select")
    assert response.status_code == 200
    assert response.json()["results"]["items"][0]["selected"] is True


def test_locale_switch(client):
    view = client.put("/api/v1/scan/locale", json={"lang": "ar"}).json()
    assert view["lang"] == "ar"
    assert view["dir"] == "rtl"
    assert view["labels"]["identify"] == TRANSLATIONS["ar"]["identify"]

    response = client.put("/api/v1/scan/locale", json={"lang": "en"})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert client.get("/api/v1/scan").json()["lang"] == "ar"


def test_identification_errors_are_view_state(plant_id, perenual, wikipedia, preview_store, png_bytes):
    controller = ScanController(
        plant_id=plant_id,
        enrichment=EnrichmentService(perenual=perenual, wikipedia=wikipedia),
        preview_store=preview_store,
        settings=make_settings(PLANT_ID_API_KEY=None),
    )
    client = make_client(controller, preview_store)
    try:
        upload(client, png_bytes)
        response = client.post("/api/v1/scan/identify")
    finally:
        client.__exit__(None, None, None)

    assert response.status_code == 200
    assert response.json()["state"] == "errored"
    assert response.json()["error"]["message"] == TRANSLATIONS["he"]["errorApiKey"]
    assert plant_id.calls == []


def test_html_page_is_rtl_and_escaped(client, plant_id, png_bytes):
    plant_id.suggestions = [Suggestion(scientific_name="<script>alert(1)</script>", probability=0.5)]
    upload(client, png_bytes)
    client.post("/api/v1/scan/identify")

    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert '<html lang="he" dir="rtl">' in html
    assert TRANSLATIONS["he"]["appTitle"] in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "<script>alert(1)</script>" not in html
    assert "50%" in html


def test_html_page_shows_no_matches(client, plant_id, png_bytes):
    plant_id.suggestions = []
    upload(client, png_bytes)
    client.post("/api/v1/scan/identify")

    assert TRANSLATIONS["he"]["noMatches"] in client.get("/").text


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

    detailed = client.get("/api/v1/health/detailed").json()
    assert detailed["components"]["credentials"] == {"plant_id": True, "perenual": True}
    assert detailed["components"]["geolocation"]["available"] is False
    assert set(detailed["components"]["external_apis"]) == {"plant_id", "perenual", "wikipedia"}


def test_request_id_is_echoed(client):
    response = client.get("/api/v1/scan", headers={"X-Request-ID": "scan-123"})
    assert response.headers["X-Request-ID"] == "scan-123"

    generated = client.get("/api/v1/scan").headers["X-Request-ID"]
    assert len(generated) == 36
