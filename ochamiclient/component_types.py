"""Data types of the hardware state manager component API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

_MISSING = object()


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first of ``keys`` present in ``data``."""
    for key in keys:
        if key in data:
            return data[key]
    return _MISSING


def _optional(data: Mapping[str, Any], *keys: str) -> Any:
    value = _pick(data, *keys)
    return None if value is _MISSING else value


def _without_none(items: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in items.items() if value is not None}


# (attribute, key sent to the service, plain key also accepted when reading)
_COMPONENT_FIELDS = (
    ("id", "ID", "id"),
    ("type", "Type", "type"),
    ("state", "State", "state"),
    ("flag", "Flag", "flag"),
    ("enabled", "Enabled", "enabled"),
    ("software_status", "SoftwareStatus", "software_status"),
    ("role", "Role", "role"),
    ("sub_role", "SubRole", "sub_role"),
    ("nid", "Nid", "nid"),
    ("subtype", "SubType", "subtype"),
    ("net_type", "NetType", "net_type"),
    ("arch", "Arch", "arch"),
    ("class_", "Class", "class"),
    ("reservation_disabled", "Reservation", "reservation_disabled"),
    ("locked", "Locked", "locked"),
)


@dataclass
class Component:
    """State of a single hardware component."""

    id: str | None = None
    type: str | None = None
    state: str | None = None
    flag: str | None = None
    enabled: bool | None = None
    software_status: str | None = None
    role: str | None = None
    sub_role: str | None = None
    nid: int | None = None
    subtype: str | None = None
    net_type: str | None = None
    arch: str | None = None
    class_: str | None = None
    reservation_disabled: bool | None = None
    locked: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {wire: getattr(self, attr) for attr, wire, _ in _COMPONENT_FIELDS}
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Component:
        return cls(
            **{
                attr: _optional(data, wire, plain)
                for attr, wire, plain in _COMPONENT_FIELDS
            }
        )


@dataclass
class ComponentArray:
    """A list of components, optionally with the force flag for bulk updates."""

    components: list[Component] = field(default_factory=list)
    force: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "Components": [component.to_dict() for component in self.components]
        }
        if self.force is not None:
            data["Force"] = self.force
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ComponentArray:
        components = _pick(data, "Components", "components")
        if components is _MISSING:
            raise ValueError("ComponentArray: missing field 'components'")
        return cls(
            components=[Component.from_dict(item) for item in components],
            force=_optional(data, "Force", "force"),
        )


@dataclass
class ComponentPostQuery:
    """Body of a component query sent with POST."""

    component_ids: list[str] | None = None
    partition: str | None = None
    group: str | None = None
    state_only: bool | None = None
    flag_only: bool | None = None
    role_only: bool | None = None
    nid_only: bool | None = None
    type: str | None = None
    state: str | None = None
    flag: str | None = None
    enabled: bool | None = None
    software_status: str | None = None
    role: str | None = None
    sub_role: str | None = None
    subtype: str | None = None
    arch: str | None = None
    class_: str | None = None
    nid: str | None = None
    nid_start: str | None = None
    nid_end: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "ComponentIDs": (
                    list(self.component_ids)
                    if self.component_ids is not None
                    else None
                ),
                "partition": self.partition,
                "group": self.group,
                "stateonly": self.state_only,
                "flagonly": self.flag_only,
                "roleonly": self.role_only,
                "nidonly": self.nid_only,
                "type": self.type,
                "state": self.state,
                "flag": self.flag,
                "enabled": self.enabled,
                "softwarestatus": self.software_status,
                "role": self.role,
                "subrole": self.sub_role,
                "subtype": self.subtype,
                "arch": self.arch,
                "class": self.class_,
                "nid": self.nid,
                "nid_start": self.nid_start,
                "nid_end": self.nid_end,
            }
        )


@dataclass
class ComponentPostByNidQuery:
    """Body of a query selecting components by NID ranges."""

    nid_ranges: list[str] = field(default_factory=list)
    partition: str | None = None
    stateonly: bool | None = None
    flagonly: bool | None = None
    roleonly: bool | None = None
    nidonly: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"NIDRanges": list(self.nid_ranges)}
        data.update(
            _without_none(
                {
                    "partition": self.partition,
                    "stateonly": self.stateonly,
                    "flagonly": self.flagonly,
                    "roleonly": self.roleonly,
                    "nidonly": self.nidonly,
                }
            )
        )
        return data