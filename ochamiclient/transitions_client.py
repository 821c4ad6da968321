"""Client for the power transitions endpoints of the power control service."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Iterable
from typing import Any

import httpx

from .transitions_types import Location, Operation, Transition
from .transport import ApiError, MessageError, NetError, build_client

logger = logging.getLogger(__name__)

TRANSITIONS_PATH = "/power-control/v1/transitions"
MAX_ATTEMPTS = 300
POLL_INTERVAL_SECONDS = 3.0


async def _send(
    method: str,
    url: str,
    token: str,
    root_cert: bytes | str | None,
    payload: Any = None,
) -> Any:
    """Send a request and return its decoded JSON body.

    A failure status raises :class:`MessageError` holding the body text.
    """
    async with build_client(root_cert) as client:
        try:
            response = await client.request(
                method,
                url,
                json=payload,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as error:
            raise NetError(str(error)) from error
    if not response.is_success:
        raise MessageError(response.text)
    try:
        return response.json()
    except ValueError as error:
        raise NetError(f"could not decode response: {error}") from error


async def get(
    base_url: str, token: str, root_cert: bytes | str | None
) -> list[Any]:
    """List all power transitions."""
    url = f"{base_url}{TRANSITIONS_PATH}"
    logger.debug("PCS transition URL: %s", url)
    payload = await _send("GET", url, token, root_cert)
    transitions = payload.get("transitions") if isinstance(payload, dict) else None
    if not isinstance(transitions, list):
        raise MessageError("response field 'transitions' is not a list")
    return transitions


async def get_by_id(
    base_url: str, token: str, root_cert: bytes | str | None, transition_id: str
) -> Any:
    """Fetch one power transition by its id."""
    payload = await _send(
        "GET", f"{base_url}{TRANSITIONS_PATH}/{transition_id}", token, root_cert
    )
    logger.debug("PCS transition details\n%s", payload)
    return payload


async def post(
    base_url: str,
    token: str,
    root_cert: bytes | str | None,
    operation: str,
    xnames: Iterable[str],
) -> Any:
    """Create a power transition applying ``operation`` to ``xnames``."""
    xname_list = list(xnames)
    logger.info("Create PCS transition '%s' on %s", operation, xname_list)
    transition = Transition(
        operation=Operation.from_str(operation),
        location=[Location(xname=xname) for xname in xname_list],
    )
    return await _send(
        "POST",
        f"{base_url}{TRANSITIONS_PATH}",
        token,
        root_cert,
        transition.to_dict(),
    )


async def post_block(
    base_url: str,
    token: str,
    root_cert: bytes | str | None,
    operation: str,
    xnames: Iterable[str],
) -> Any:
    """Create a power transition and wait until it has completed."""
    created = await post(base_url, token, root_cert, operation, xnames)
    transition_id = created.get("transitionID") if isinstance(created, dict) else None
    if not isinstance(transition_id, str):
        raise MessageError("response has no 'transitionID'")
    logger.info("PCS transition ID: %s", transition_id)
    return await wait_to_complete(base_url, token, root_cert, transition_id)


def _field(transition: Any, *path: str) -> Any:
    value = transition
    for key in path:
        if not isinstance(value, dict) or key not in value:
            raise MessageError(f"transition has no field '{'/'.join(path)}'")
        value = value[key]
    return value


async def wait_to_complete(
    base_url: str, token: str, root_cert: bytes | str | None, transition_id: str
) -> Any:
    """Poll a transition until it is completed or the attempts run out.

    Raises :class:`ApiError` holding the last transition seen if it never
    completes.
    """
    transition = await get_by_id(base_url, token, root_cert, transition_id)
    status = ""
    attempt = 1
    while attempt <= MAX_ATTEMPTS and status != "completed":
        transition = await get_by_id(base_url, token, root_cert, transition_id)
        status = _field(transition, "transitionStatus")
        operation = _field(transition, "operation")
        failed = _field(transition, "taskCounts", "failed")
        in_progress = _field(transition, "taskCounts", "in-progress")
        succeeded = _field(transition, "taskCounts", "succeeded")
        total = _field(transition, "taskCounts", "total")
        print(
            f"Power '{operation}' summary - status: {status}, failed: {failed}, "
            f"in-progress: {in_progress}, succeeded: {succeeded}, total: {total}. "
            f"Attempt {attempt} of {MAX_ATTEMPTS}",
            file=sys.stderr,
        )
        await asyncio.sleep(POLL_INTERVAL_SECONDS)
        attempt += 1

    if status == "completed":
        return transition
    raise ApiError(transition)