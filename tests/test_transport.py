import asyncio

import httpx
import pytest
import respx

from ochamiclient.transport import (
    ApiError,
    NetError,
    RequestError,
    build_client,
    check_response,
)


def test_check_response_returns_successful_response():
    response = httpx.Response(200, json={"ok": True})
    assert check_response(response) is response


def test_check_response_raises_api_error_with_payload():
    payload = {"detail": "boom", "status": 500}
    response = httpx.Response(500, json=payload)
    with pytest.raises(ApiError) as excinfo:
        check_response(response)
    assert excinfo.value.payload == payload


def test_check_response_text_status_raises_request_error():
    response = httpx.Response(401, text="not authorised")
    with pytest.raises(RequestError) as excinfo:
        check_response(response, text_statuses={401})
    assert excinfo.value.status_code == 401
    assert excinfo.value.payload == "not authorised"


def test_check_response_status_not_in_text_statuses_decodes_json():
    payload = {"title": "Not Found"}
    response = httpx.Response(404, json=payload)
    with pytest.raises(ApiError) as excinfo:
        check_response(response, text_statuses={401})
    assert excinfo.value.payload == payload


def test_check_response_undecodable_failure_body_raises_net_error():
    response = httpx.Response(502, text="<html>bad gateway</html>")
    with pytest.raises(NetError):
        check_response(response)


def test_build_client_rejects_invalid_certificate():
    with pytest.raises(NetError):
        build_client(b"this is not a certificate")


def test_build_client_sends_requests(monkeypatch):
    monkeypatch.delenv("SOCKS5", raising=False)
    url = "https://ochami.example.com/power-control/v1/power-cap"
    payload = {"tasks": []}

    async def fetch():
        async with build_client(b"") as client:
            return await client.get(url, headers={"Authorization": "Bearer token"})

    with respx.mock:
        route = respx.get(url).mock(return_value=httpx.Response(200, json=payload))
        response = asyncio.run(fetch())

    assert route.called
    assert route.calls.last.request.headers["Authorization"] == "Bearer token"
    assert response.json() == payload