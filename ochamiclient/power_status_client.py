"""Client for the power-status endpoint of the power control service."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import httpx

from .power_status_types import PowerStatusAll
from .transport import NetError, build_client, check_response

logger = logging.getLogger(__name__)

POWER_STATUS_PATH = "/power-control/v1/power-status"


async def post(
    base_url: str,
    token: str,
    root_cert: bytes | str | None,
    xnames: Iterable[str] | None = None,
    power_state_filter: str | None = None,
    management_state_filter: str | None = None,
) -> PowerStatusAll:
    """Query the power status of components, optionally filtered."""
    body = {
        "xname": list(xnames) if xnames is not None else [],
        "powerStateFilter": power_state_filter or "",
        "managementStateFilter": management_state_filter or "",
    }
    async with build_client(root_cert) as client:
        try:
            response = await client.post(
                f"{base_url}{POWER_STATUS_PATH}",
                json=body,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as error:
            logger.error("Failed POST query: %s", error)
            raise NetError(str(error)) from error

    if not response.is_success:
        logger.error("power status request failed with HTTP %s", response.status_code)
    check_response(response)
    try:
        return PowerStatusAll.from_dict(response.json())
    except (ValueError, TypeError, AttributeError) as error:
        raise NetError(f"could not decode power status: {error}") from error