"""Dispatcher behavior: table lookup, 404s, preflight, and fault conversion."""

import json
from types import MappingProxyType

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from pulsekeys_mock.errors import ClientInputError
from pulsekeys_mock.responses import json_response, ok
from pulsekeys_mock.routes import ROUTES, route_key
from pulsekeys_mock.server import create_app, raw_request_path


@pytest.mark.parametrize(
    "method,path",
    [
        ("DELETE", "/api/key"),
        ("PUT", "/api/health"),
        ("POST", "/api/health"),
        ("GET", "/api/session/start"),
        ("GET", "/api/unknown"),
        ("GET", "/"),
        ("GET", "/api/health/"),
        ("GET", "/docs"),
    ],
)
def test_unknown_method_path_is_404(client, method, path):
    res = client.request(method, path)
    assert res.status_code == 404
    assert res.json() == {"ok": False, "error": "Not found"}


def test_query_string_is_ignored_for_lookup(client):
    res = client.get("/api/health?verbose=1")
    assert res.status_code == 200
    assert res.json()["ok"] is True


@pytest.mark.parametrize("path", ["/api/key", "/api/checkpoint/verify", "/nowhere"])
def test_options_is_preflight_for_any_path(client, path):
    res = client.options(path)
    assert res.status_code == 204
    assert res.content == b""
    assert res.headers["access-control-allow-origin"] == "*"
    assert res.headers["access-control-allow-methods"] == "GET,POST,OPTIONS"
    assert res.headers["access-control-allow-headers"] == "Content-Type"


def test_json_headers_on_success_and_error(client):
    for res in (client.get("/api/config"), client.get("/api/missing")):
        assert res.headers["content-type"].startswith("application/json")
        assert res.headers["access-control-allow-origin"] == "*"
        assert int(res.headers["content-length"]) == len(res.content)


def test_body_is_pretty_printed_with_ok_first(client):
    res = client.get("/api/config")
    assert res.text.startswith('{\n  "ok": true')
    assert list(res.json())[0] == "ok"


def test_every_table_route_succeeds_with_minimal_input(client):
    inputs = {
        "/api/session/status": {"params": {"sessionId": "sess_00000000"}},
        "/api/checkpoint/complete": {"json": {}},
        "/api/checkpoint/verify": {"json": {"proofToken": "proof_000000000000"}},
        "/api/key/validate": {"json": {"key": "KEY-ABCDEF"}},
        "/api/key/revoke": {"json": {"key": "KEY-ABCDEF"}},
    }
    for key in ROUTES:
        method, path = key.split(" ", 1)
        res = client.request(method, path, **inputs.get(path, {}))
        assert res.status_code == 200, key
        assert res.json()["ok"] is True, key


def _custom_app(handler):
    routes = MappingProxyType({route_key("GET", "/api/boom"): handler})
    return TestClient(create_app(routes=routes))


def test_handler_exception_becomes_500_without_detail():
    async def boom(request):
        raise RuntimeError("database password is hunter2")

    with _custom_app(boom) as c:
        res = c.get("/api/boom")

    assert res.status_code == 500
    assert res.json() == {"ok": False, "error": "Server error"}
    assert "hunter2" not in res.text


def test_client_input_error_from_custom_handler_is_400():
    async def picky(request):
        raise ClientInputError("widget is required")

    with _custom_app(picky) as c:
        res = c.get("/api/boom")

    assert res.status_code == 400
    assert res.json() == {"ok": False, "error": "widget is required"}


def test_fault_does_not_affect_next_request():
    calls = []

    async def flaky(request):
        calls.append(1)
        if len(calls) == 1:
            raise ValueError("first call fails")
        return json_response(ok({"attempt": len(calls)}))

    with _custom_app(flaky) as c:
        first = c.get("/api/boom")
        second = c.get("/api/boom")

    assert first.status_code == 500
    assert second.status_code == 200
    assert json.loads(second.text) == {"ok": True, "attempt": 2}


def test_custom_table_replaces_default_routes():
    async def noop(request):
        return json_response(ok())

    with _custom_app(noop) as c:
        assert c.get("/api/health").status_code == 404


@pytest.mark.parametrize("path", ["/api/%68ealth", "/api%2Fhealth", "/api/key%2Fvalidate"])
def test_percent_encoded_path_is_not_decoded_for_lookup(client, path):
    res = client.get(path)
    assert res.status_code == 404
    assert res.json() == {"ok": False, "error": "Not found"}


def test_raw_request_path_strips_query_and_keeps_encoding():
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/api/health",
        "raw_path": b"/api/%68ealth?x=1",
        "query_string": b"x=1",
        "headers": [],
    }
    assert raw_request_path(Request(scope)) == "/api/%68ealth"


def test_raw_request_path_falls_back_to_decoded_path():
    scope = {"type": "http", "method": "GET", "path": "/api/key", "query_string": b"", "headers": []}
    assert raw_request_path(Request(scope)) == "/api/key"
