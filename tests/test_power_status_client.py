import asyncio
import json

import httpx
import pytest
import respx

from ochamiclient import power_status_client
from ochamiclient.power_status_types import ManagementState, PowerState
from ochamiclient.transitions_types import Operation
from ochamiclient.transport import ApiError, NetError

BASE = "https://api.example.com"
TOKEN = "token"
PATH = "/power-control/v1/power-status"

STATUS = {
    "status": [
        {
            "xname": "x1000c0s0b0n0",
            "powerState": "on",
            "managementState": "available",
            "supportedPowerTransitions": ["On", "Force-Off"],
            "lastUpdated": "2024-01-01T00:00:00Z",
        }
    ]
}


@pytest.fixture(autouse=True)
def _no_proxy(monkeypatch):
    monkeypatch.delenv("SOCKS5", raising=False)


def test_post_decodes_status():
    with respx.mock(base_url=BASE) as router:
        router.post(PATH).mock(return_value=httpx.Response(200, json=STATUS))
        result = asyncio.run(
            power_status_client.post(BASE, TOKEN, b"", ["x1000c0s0b0n0"])
        )
    status = result.status[0]
    assert status.power_state is PowerState.ON
    assert status.management_state is ManagementState.AVAILABLE
    assert status.supported_power_transitions == [Operation.ON, Operation.FORCE_OFF]
    assert result.to_dict() == STATUS


def test_post_default_body_uses_empty_values():
    with respx.mock(base_url=BASE) as router:
        route = router.post(PATH).mock(
            return_value=httpx.Response(200, json={"status": []})
        )
        result = asyncio.run(power_status_client.post(BASE, TOKEN, b""))
    assert result.status == []
    body = json.loads(route.calls.last.request.content)
    assert body == {"xname": [], "powerStateFilter": "", "managementStateFilter": ""}


def test_post_sends_filters_and_auth():
    with respx.mock(base_url=BASE) as router:
        route = router.post(PATH).mock(
            return_value=httpx.Response(200, json={"status": []})
        )
        asyncio.run(
            power_status_client.post(
                BASE, TOKEN, b"", ("x1000c0s0b0n0",), "off", "unavailable"
            )
        )
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer token"
    assert json.loads(request.content) == {
        "xname": ["x1000c0s0b0n0"],
        "powerStateFilter": "off",
        "managementStateFilter": "unavailable",
    }


def test_post_failure_raises_api_error():
    with respx.mock(base_url=BASE) as router:
        router.post(PATH).mock(return_value=httpx.Response(404, json={"title": "nope"}))
        with pytest.raises(ApiError) as excinfo:
            asyncio.run(power_status_client.post(BASE, TOKEN, b""))
    assert excinfo.value.payload == {"title": "nope"}


def test_post_connection_error_raises_net_error():
    with respx.mock(base_url=BASE) as router:
        router.post(PATH).mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(NetError):
            asyncio.run(power_status_client.post(BASE, TOKEN, b""))


def test_post_malformed_success_raises_net_error():
    with respx.mock(base_url=BASE) as router:
        router.post(PATH).mock(return_value=httpx.Response(200, json={"other": 1}))
        with pytest.raises(NetError):
            asyncio.run(power_status_client.post(BASE, TOKEN, b""))