"""Data types of the power transitions API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from .transport import MessageError


class Operation(str, Enum):
    """A power operation as named in transition requests."""

    ON = "On"
    OFF = "Off"
    SOFT_OFF = "Soft-Off"
    SOFT_RESTART = "Soft-Restart"
    HARD_RESTART = "Hard-Restart"
    INIT = "Init"
    FORCE_OFF = "Force-Off"

    @classmethod
    def from_str(cls, operation: str) -> Operation:
        """Parse a lower-case operation name such as ``soft-off``."""
        for member in cls:
            if member.value.lower() == operation:
                return member
        raise MessageError("Operation not valid")


@dataclass
class Location:
    """A component targeted by a transition."""

    xname: str
    deputy_key: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"xname": self.xname}
        if self.deputy_key is not None:
            data["deputyKey"] = self.deputy_key
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Location:
        if "xname" not in data:
            raise ValueError("Location: missing field 'xname'")
        return cls(xname=data["xname"], deputy_key=data.get("deputyKey"))


@dataclass
class Transition:
    """A request to apply a power operation to a set of components."""

    operation: Operation
    task_deadline_minutes: int | None = None
    location: list[Location] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"operation": self.operation.value}
        if self.task_deadline_minutes is not None:
            data["taskDeadlineMinutes"] = self.task_deadline_minutes
        data["location"] = [item.to_dict() for item in self.location]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Transition:
        for key in ("operation", "location"):
            if key not in data:
                raise ValueError(f"Transition: missing field '{key}'")
        return cls(
            operation=Operation(data["operation"]),
            task_deadline_minutes=data.get("taskDeadlineMinutes"),
            location=[Location.from_dict(item) for item in data["location"]],
        )