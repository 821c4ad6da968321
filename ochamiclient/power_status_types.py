"""Data types of the power status API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from .transitions_types import Operation


class PowerState(str, Enum):
    """Power state reported for a component."""

    ON = "on"
    OFF = "off"
    UNDEFINED = "undefined"


class ManagementState(str, Enum):
    """Whether a component's controller can be reached."""

    UNAVAILABLE = "unavailable"
    AVAILABLE = "available"


@dataclass
class PowerStatus:
    """Power status of a single component."""

    xname: str
    supported_power_transitions: list[Operation]
    last_updated: str
    power_state: PowerState | None = None
    management_state: ManagementState | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"xname": self.xname}
        if self.power_state is not None:
            data["powerState"] = self.power_state.value
        if self.management_state is not None:
            data["managementState"] = self.management_state.value
        if self.error is not None:
            data["error"] = self.error
        data["supportedPowerTransitions"] = [
            operation.value for operation in self.supported_power_transitions
        ]
        data["lastUpdated"] = self.last_updated
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PowerStatus:
        for key in ("xname", "supportedPowerTransitions", "lastUpdated"):
            if key not in data:
                raise ValueError(f"PowerStatus: missing field '{key}'")
        power_state = data.get("powerState")
        management_state = data.get("managementState")
        return cls(
            xname=data["xname"],
            supported_power_transitions=[
                Operation(value) for value in data["supportedPowerTransitions"]
            ],
            last_updated=data["lastUpdated"],
            power_state=PowerState(power_state) if power_state is not None else None,
            management_state=(
                ManagementState(management_state)
                if management_state is not None
                else None
            ),
            error=data.get("error"),
        )


@dataclass
class PowerStatusAll:
    """Power status of a set of components."""

    status: list[PowerStatus] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"status": [item.to_dict() for item in self.status]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PowerStatusAll:
        if "status" not in data:
            raise ValueError("PowerStatusAll: missing field 'status'")
        return cls(status=[PowerStatus.from_dict(item) for item in data["status"]])