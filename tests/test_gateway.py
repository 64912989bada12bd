import asyncio
import json

import httpx

from core.gateway import RequestGateway, coerce_param
from tests.helpers import mock_gateway


def test_coerce_param():
    assert coerce_param(True) == "true"
    assert coerce_param(False) == "false"
    assert coerce_param(5) == "5"
    assert coerce_param(0.25) == "0.25"
    assert coerce_param("US") == "US"


def test_send_builds_url_query_and_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json={"ok": True})

    gateway = mock_gateway(handler)
    raw = asyncio.run(gateway.send(
        "/api/proxy/request",
        {"target_url": "https://example.com/a?b=1", "country": "DE", "sticky": True, "limit": 3},
    ))

    request = seen["request"]
    assert request.method == "GET"
    assert request.url.host == "api.test"
    assert request.url.path == "/api/proxy/request"
    assert request.url.params["target_url"] == "https://example.com/a?b=1"
    assert request.url.params["country"] == "DE"
    assert request.url.params["sticky"] == "true"
    assert request.url.params["limit"] == "3"
    assert request.headers["user-agent"] == "apollo-mcp-proxy/test"
    assert request.headers["accept"] == "application/json"

    assert raw.received
    assert raw.status_code == 200
    assert json.loads(raw.content) == {"ok": True}


def test_send_omits_none_params():
    seen = {}

    def handler(request):
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={})

    asyncio.run(mock_gateway(handler).send("/api/proxy/status", {"a": None, "b": "x"}))
    assert seen["params"] == {"b": "x"}


def test_endpoint_path_replaces_base_path():
    gateway = RequestGateway("https://api.test/v2/", "ua")
    assert gateway.build_url("/api/proxy/status") == "https://api.test/api/proxy/status"
    assert gateway.build_url("api/proxy/status") == "https://api.test/v2/api/proxy/status"


def test_transport_failure_is_reported_as_data():
    def handler(request):
        raise httpx.ConnectError("ECONNREFUSED", request=request)

    raw = asyncio.run(mock_gateway(handler).send("/api/proxy/status"))

    assert not raw.received
    assert raw.status_code is None
    assert raw.transport_error == "ECONNREFUSED"


def test_each_send_is_a_single_attempt():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503, text="busy")

    raw = asyncio.run(mock_gateway(handler).send("/api/proxy/status"))

    assert len(calls) == 1
    assert raw.status_code == 503
    assert raw.content == b"busy"


def test_unencodable_query_is_reported_as_data():
    def handler(request):
        return httpx.Response(200, json={})

    raw = asyncio.run(mock_gateway(handler).send("/api/proxy/request", {"target_url": "https://a.test/\ud800"}))

    assert not raw.received
    assert raw.transport_error


def test_redirects_are_followed():
    paths = []

    def handler(request):
        paths.append(request.url.path)
        if request.url.path == "/api/proxy/status":
            return httpx.Response(301, headers={"Location": "https://api.test/api/v2/proxy/status"})
        return httpx.Response(200, json={"status": "online"})

    raw = asyncio.run(mock_gateway(handler).send("/api/proxy/status"))

    assert paths == ["/api/proxy/status", "/api/v2/proxy/status"]
    assert raw.status_code == 200
    assert json.loads(raw.content) == {"status": "online"}
