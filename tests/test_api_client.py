"""
APIClient against a throwaway aiohttp server.
"""
import pytest
from aiohttp import web
from aiohttp import test_utils

from authuser.shared.core.exceptions import ExternalServiceError
from authuser.shared.infrastructure.external_apis.api_client import APIClient, is_retryable_error


async def courses(request: web.Request) -> web.Response:
    return web.json_response({"userId": request.query.get("userId"), "page": request.query.get("page")})


async def broken(request: web.Request) -> web.Response:
    return web.Response(status=503, text="maintenance")


async def missing(request: web.Request) -> web.Response:
    return web.Response(status=404, text="no such thing")


async def garbage(request: web.Request) -> web.Response:
    return web.Response(status=200, text="<html>not json</html>")


@pytest.fixture
async def server():
    app = web.Application()
    app.router.add_get("/ead-course/courses", courses)
    app.router.add_get("/ead-course/broken", broken)
    app.router.add_get("/ead-course/missing", missing)
    app.router.add_get("/ead-course/garbage", garbage)

    server = test_utils.TestServer(app)
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
async def api_client(server):
    client = APIClient(base_url=str(server.make_url("/ead-course")), service_name="course-service")
    await client.initialize()
    yield client
    await client.close()


async def test_get_json_sends_query_params(api_client):
    body = await api_client.get_json("courses", params={"userId": "abc", "page": 2})

    assert body == {"userId": "abc", "page": "2"}


async def test_server_error_is_retryable(api_client):
    with pytest.raises(ExternalServiceError) as exc_info:
        await api_client.get_json("broken")

    assert exc_info.value.remote_status == 503
    assert is_retryable_error(exc_info.value)


async def test_client_error_is_not_retryable(api_client):
    with pytest.raises(ExternalServiceError) as exc_info:
        await api_client.get_json("missing")

    assert exc_info.value.remote_status == 404
    assert not is_retryable_error(exc_info.value)


async def test_undecodable_body_is_not_retryable(api_client):
    with pytest.raises(ExternalServiceError) as exc_info:
        await api_client.get_json("garbage")

    assert not exc_info.value.retryable


async def test_unreachable_host_is_retryable():
    client = APIClient(base_url="http://127.0.0.1:9", service_name="course-service", timeout=1.0)
    try:
        with pytest.raises(ExternalServiceError) as exc_info:
            await client.get_json("courses")
    finally:
        await client.close()

    assert exc_info.value.retryable


def test_build_url_keeps_base_path():
    client = APIClient(base_url="http://courses.test/ead-course/", service_name="course-service")

    assert client.build_url("courses") == "http://courses.test/ead-course/courses"
    assert client.build_url("/courses") == "http://courses.test/ead-course/courses"
