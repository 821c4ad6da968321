"""Client for the power-cap endpoints of the power control service."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import httpx

from .power_cap_types import PowerCapComponent, PowerCapTaskInfo
from .transport import NetError, build_client, check_response

logger = logging.getLogger(__name__)

POWER_CAP_PATH = "/power-control/v1/power-cap"


async def _send(
    method: str,
    url: str,
    token: str,
    root_cert: bytes | str | None,
    payload: Any = None,
) -> httpx.Response:
    async with build_client(root_cert) as client:
        try:
            return await client.request(
                method,
                url,
                json=payload,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as error:
            raise NetError(str(error)) from error


def _task_info(response: httpx.Response) -> PowerCapTaskInfo:
    check_response(response)
    try:
        return PowerCapTaskInfo.from_dict(response.json())
    except (ValueError, TypeError, AttributeError) as error:
        raise NetError(f"could not decode power-cap task: {error}") from error


async def get(
    base_url: str, token: str, root_cert: bytes | str | None
) -> PowerCapTaskInfo:
    """Fetch the power-cap tasks."""
    response = await _send("GET", f"{base_url}{POWER_CAP_PATH}", token, root_cert)
    return _task_info(response)


async def get_task_id(
    base_url: str, token: str, root_cert: bytes | str | None, task_id: str
) -> PowerCapTaskInfo:
    """Fetch a single power-cap task by its id."""
    response = await _send(
        "GET", f"{base_url}{POWER_CAP_PATH}/{task_id}", token, root_cert
    )
    return _task_info(response)


async def post_snapshot(
    base_url: str,
    token: str,
    root_cert: bytes | str | None,
    xnames: Iterable[str],
) -> PowerCapTaskInfo:
    """Ask for a power-cap snapshot of the given components."""
    xname_list = list(xnames)
    logger.info("Create PCS power snapshot for nodes:\n%s", xname_list)
    response = await _send(
        "PUT",
        f"{base_url}{POWER_CAP_PATH}/snapshot",
        token,
        root_cert,
        {"xnames": xname_list},
    )
    return _task_info(response)


async def patch(
    base_url: str,
    token: str,
    root_cert: bytes | str | None,
    power_cap: Iterable[PowerCapComponent],
) -> PowerCapTaskInfo:
    """Submit power-cap settings for a set of components."""
    components = list(power_cap)
    logger.info("Create PCS power cap:\n%s", components)
    response = await _send(
        "PUT",
        f"{base_url}{POWER_CAP_PATH}/snapshot",
        token,
        root_cert,
        [component.to_dict() for component in components],
    )
    return _task_info(response)