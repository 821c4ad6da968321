"""Client for the component state endpoints of the hardware state manager."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx

from .component_types import (
    Component,
    ComponentArray,
    ComponentPostByNidQuery,
    ComponentPostQuery,
)
from .transport import MessageError, NetError, build_client, check_response

logger = logging.getLogger(__name__)

COMPONENTS_PATH = "/smd/hsm/v2/State/Components"
_TEXT_STATUSES = frozenset({401})

T = TypeVar("T")


def _flag(value: bool | None) -> str | None:
    if value is None:
        return None
    return "true" if value else "false"


@dataclass
class ComponentFilter:
    """Query-string filters for listing components."""

    id: str | None = None
    type: str | None = None
    state: str | None = None
    flag: str | None = None
    role: str | None = None
    subrole: str | None = None
    enabled: str | None = None
    software_status: str | None = None
    subtype: str | None = None
    arch: str | None = None
    class_: str | None = None
    nid: str | None = None
    nid_start: str | None = None
    nid_end: str | None = None
    partition: str | None = None
    group: str | None = None
    state_only: bool | None = None
    flag_only: bool | None = None
    role_only: bool | None = None
    nid_only: str | None = None

    def to_params(self) -> dict[str, str]:
        """Return the filters that are set, as query parameters."""
        params = {
            "id": self.id,
            "type": self.type,
            "state": self.state,
            "flag": self.flag,
            "role": self.role,
            "subrole": self.subrole,
            "enabled": self.enabled,
            "softwarestatus": self.software_status,
            "subtype": self.subtype,
            "arch": self.arch,
            "class": self.class_,
            "nid": self.nid,
            "nid_start": self.nid_start,
            "nid_end": self.nid_end,
            "partition": self.partition,
            "group": self.group,
            "stateonly": _flag(self.state_only),
            "flagonly": _flag(self.flag_only),
            "roleonly": _flag(self.role_only),
            "nidonly": self.nid_only,
        }
        return {key: value for key, value in params.items() if value is not None}


async def _send(
    method: str,
    url: str,
    token: str,
    root_cert: bytes | str | None,
    *,
    params: dict[str, str] | None = None,
    payload: Any = None,
) -> httpx.Response:
    async with build_client(root_cert) as client:
        try:
            response = await client.request(
                method,
                url,
                params=params,
                json=payload,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as error:
            raise NetError(str(error)) from error
    return check_response(response, _TEXT_STATUSES)


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as error:
        raise NetError(f"could not decode response: {error}") from error


def _decode(response: httpx.Response, parse: Callable[[Any], T]) -> T:
    body = _json_body(response)
    try:
        return parse(body)
    except (ValueError, TypeError, AttributeError, KeyError) as error:
        raise NetError(f"could not decode response: {error}") from error


async def get(
    base_url: str,
    token: str,
    root_cert: bytes | str | None,
    component_filter: ComponentFilter | None = None,
) -> ComponentArray:
    """List components matching ``component_filter``."""
    params = (component_filter or ComponentFilter()).to_params()
    response = await _send(
        "GET", f"{base_url}{COMPONENTS_PATH}", token, root_cert, params=params
    )
    return _decode(response, ComponentArray.from_dict)


async def get_one(
    base_url: str, token: str, root_cert: bytes | str | None, component_id: str
) -> Component:
    """Fetch one component by its id."""
    response = await _send(
        "GET", f"{base_url}{COMPONENTS_PATH}/{component_id}", token, root_cert
    )
    return _decode(response, Component.from_dict)


async def get_by_nid(
    base_url: str, token: str, root_cert: bytes | str | None, nid: str
) -> Component:
    """Fetch one component by its node id."""
    response = await _send(
        "GET", f"{base_url}{COMPONENTS_PATH}/ByNID/{nid}", token, root_cert
    )
    return _decode(response, Component.from_dict)


async def get_query(
    base_url: str,
    token: str,
    root_cert: bytes | str | None,
    xname: str,
    component_filter: ComponentFilter | None = None,
) -> ComponentArray:
    """List the components under ``xname`` matching ``component_filter``."""
    params = (component_filter or ComponentFilter()).to_params()
    params.pop("id", None)
    response = await _send(
        "GET",
        f"{base_url}{COMPONENTS_PATH}/Query/{xname}",
        token,
        root_cert,
        params=params,
    )
    return _decode(response, ComponentArray.from_dict)


async def post(
    base_url: str, token: str, root_cert: bytes | str | None, component: Component
) -> Component:
    """Create a component."""
    response = await _send(
        "POST",
        f"{base_url}{COMPONENTS_PATH}",
        token,
        root_cert,
        payload=component.to_dict(),
    )
    return _decode(response, Component.from_dict)


async def post_query(
    base_url: str,
    token: str,
    root_cert: bytes | str | None,
    query: ComponentPostQuery,
) -> ComponentArray:
    """List components matching a query body."""
    response = await _send(
        "POST",
        f"{base_url}{COMPONENTS_PATH}/Query",
        token,
        root_cert,
        payload=query.to_dict(),
    )
    return _decode(response, ComponentArray.from_dict)


async def post_by_nid_query(
    base_url: str,
    token: str,
    root_cert: bytes | str | None,
    query: ComponentPostByNidQuery,
) -> Component:
    """Look up components by NID ranges."""
    response = await _send(
        "POST",
        f"{base_url}{COMPONENTS_PATH}/ByNID/Query",
        token,
        root_cert,
        payload=query.to_dict(),
    )
    return _decode(response, Component.from_dict)


async def put(
    base_url: str, token: str, root_cert: bytes | str | None, component: Component
) -> None:
    """Replace a component; its ``id`` must be set."""
    if component.id is None:
        raise MessageError("ERROR - component.id not defined")
    await _send(
        "PUT",
        f"{base_url}{COMPONENTS_PATH}/{component.id}",
        token,
        root_cert,
        payload=component.to_dict(),
    )


async def delete_all(base_url: str, token: str, root_cert: bytes | str | None) -> Any:
    """Delete every component."""
    response = await _send("DELETE", f"{base_url}{COMPONENTS_PATH}", token, root_cert)
    return _json_body(response)


async def delete_one(
    base_url: str, token: str, root_cert: bytes | str | None, component_id: str
) -> Any:
    """Delete one component by its id."""
    response = await _send(
        "DELETE", f"{base_url}{COMPONENTS_PATH}/{component_id}", token, root_cert
    )
    return _json_body(response)