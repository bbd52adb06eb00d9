import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from plantscan.shared.core.exceptions import APIAuthenticationError, APITimeoutError, ExternalAPIError
from plantscan.shared.infrastructure.external_apis.api_client import APIClient, create_api_client


async def echo(request: web.Request) -> web.Response:
    body = await request.json() if request.can_read_body else None
    return web.json_response({
        "method": request.method,
        "path": request.path,
        "query": dict(request.query),
        "api_key": request.headers.get("Api-Key"),
        "body": body,
    })


def status_handler(status: int):
    async def handler(request):
        return web.Response(status=status, text=f"status {status}")
    return handler


async def slow(request):
    await asyncio.sleep(1)
    return web.json_response({})


async def not_json(request):
    return web.Response(text="<html>nope</html>", content_type="text/html")


@pytest.fixture
async def server():
    app = web.Application()
    app.router.add_route("*", "/api/echo", echo)
    app.router.add_route("*", "/api", echo)
    app.router.add_get("/api/unauthorized", status_handler(401))
    app.router.add_get("/api/missing", status_handler(404))
    app.router.add_get("/api/broken", status_handler(503))
    app.router.add_get("/api/slow", slow)
    app.router.add_get("/api/html", not_json)

    test_server = TestServer(app)
    await test_server.start_server()
    yield test_server
    await test_server.close()


@pytest.fixture
async def client(server):
    api = create_api_client(
        api_name="test",
        base_url=str(server.make_url("/api")),
        api_key="secret",
        api_key_header="Api-Key",
        timeout=5,
    )
    yield api
    await api.close()


async def test_get_keeps_base_path_and_drops_none_params(client):
    data = await client.get("echo", params={"q": "Ficus elastica", "key": None})

    assert data["method"] == "GET"
    assert data["path"] == "/api/echo"
    assert data["query"] == {"q": "Ficus elastica"}
    assert data["api_key"] == "secret"


async def test_post_sends_json_to_base_url(client):
    data = await client.post(data={"images": ["abc"]}, params={"language": "en"})

    assert data["path"] == "/api"
    assert data["body"] == {"images": ["abc"]}
    assert data["query"] == {"language": "en"}
    assert client.get_stats()["successful_requests"] == 1


async def test_auth_failure_maps_to_authentication_error(client):
    with pytest.raises(APIAuthenticationError) as exc_info:
        await client.get("unauthorized")
    assert exc_info.value.api_status_code == 401


@pytest.mark.parametrize("endpoint, status", [("missing", 404), ("broken", 503)])
async def test_error_status_maps_to_external_api_error(client, endpoint, status):
    with pytest.raises(ExternalAPIError) as exc_info:
        await client.get(endpoint)

    assert exc_info.value.api_status_code == status
    assert f"status {status}" in exc_info.value.message
    stats = client.get_stats()
    assert stats["failed_requests"] == 1
    assert stats["total_requests"] == 1


async def test_timeout_maps_to_api_timeout_error(client):
    with pytest.raises(APITimeoutError):
        await client.get("slow", timeout=0.05)


async def test_non_json_body_is_an_error(client):
    with pytest.raises(ExternalAPIError) as exc_info:
        await client.get("html")
    assert exc_info.value.api_status_code == 200


async def test_connection_failure_has_no_status():
    api = APIClient(base_url="http://127.0.0.1:9", api_name="nowhere", timeout=2)
    try:
        with pytest.raises(ExternalAPIError) as exc_info:
            await api.get()
        assert exc_info.value.api_status_code is None
        assert api.get_stats()["total_requests"] == 1
    finally:
        await api.close()
