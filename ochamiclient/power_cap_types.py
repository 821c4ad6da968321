"""Data types of the power-cap API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _without_none(items: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in items.items() if value is not None}


def _require(data: Mapping[str, Any], key: str, kind: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{kind}: missing field '{key}'") from None


@dataclass
class TaskCounts:
    """Per-state counts of the tasks in a power-cap operation."""

    total: int
    new: int
    in_progress: int
    failed: int
    succeeded: int
    un_supported: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "new": self.new,
            "in_progress": self.in_progress,
            "failed": self.failed,
            "succeeded": self.succeeded,
            "un_supported": self.un_supported,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TaskCounts:
        return cls(
            **{
                name: _require(data, name, "TaskCounts")
                for name in (
                    "total",
                    "new",
                    "in_progress",
                    "failed",
                    "succeeded",
                    "un_supported",
                )
            }
        )


@dataclass
class Limit:
    """Host power limits of a component."""

    hosts_limit_max: int | None = None
    hosts_limit_min: int | None = None
    powerup_power: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "hostsLimitMax": self.hosts_limit_max,
                "hostsLimitMin": self.hosts_limit_min,
                "powerupPower": self.powerup_power,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Limit:
        return cls(
            hosts_limit_max=data.get("hostsLimitMax"),
            hosts_limit_min=data.get("hostsLimitMin"),
            powerup_power=data.get("powerupPower"),
        )


@dataclass
class PowerCapLimit:
    """A named power-cap control with its current and allowed values."""

    name: str | None = None
    current_value: int | None = None
    maximum_value: int | None = None
    minimum_value: int | None = None

    def to_dict(self) -> dict[str, Any]:
        # "mamximumValue" is the key the service uses on the wire.
        return _without_none(
            {
                "name": self.name,
                "currentValue": self.current_value,
                "mamximumValue": self.maximum_value,
                "minimumValue": self.minimum_value,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PowerCapLimit:
        return cls(
            name=data.get("name"),
            current_value=data.get("currentValue"),
            maximum_value=data.get("mamximumValue"),
            minimum_value=data.get("minimumValue"),
        )


@dataclass
class PowerCapComponent:
    """Power-cap settings or result for a single component."""

    xname: str | None = None
    error: str | None = None
    limits: Limit | None = None
    power_cap_limits: PowerCapLimit | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "xname": self.xname,
                "error": self.error,
                "limits": self.limits.to_dict() if self.limits else None,
                "power_cap_limits": (
                    self.power_cap_limits.to_dict() if self.power_cap_limits else None
                ),
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PowerCapComponent:
        limits = data.get("limits")
        cap_limits = data.get("power_cap_limits")
        return cls(
            xname=data.get("xname"),
            error=data.get("error"),
            limits=Limit.from_dict(limits) if limits is not None else None,
            power_cap_limits=(
                PowerCapLimit.from_dict(cap_limits) if cap_limits is not None else None
            ),
        )


@dataclass
class PowerCapTaskInfo:
    """A power-cap task (``snapshot`` or ``patch``) and its progress."""

    task_id: str | None = None
    type: str | None = None
    task_create_time: str | None = None
    automatic_expiration_time: str | None = None
    task_status: str | None = None
    task_counts: TaskCounts | None = None
    components: list[PowerCapComponent] | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "taskId": self.task_id,
                "type": self.type,
                "taskCreateTime": self.task_create_time,
                "automaticExpirationTime": self.automatic_expiration_time,
                "taskStatus": self.task_status,
                "taskCounts": self.task_counts.to_dict() if self.task_counts else None,
                "components": (
                    [component.to_dict() for component in self.components]
                    if self.components is not None
                    else None
                ),
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PowerCapTaskInfo:
        counts = data.get("taskCounts")
        components = data.get("components")
        return cls(
            task_id=data.get("taskId"),
            type=data.get("type"),
            task_create_time=data.get("taskCreateTime"),
            automatic_expiration_time=data.get("automaticExpirationTime"),
            task_status=data.get("taskStatus"),
            task_counts=TaskCounts.from_dict(counts) if counts is not None else None,
            components=(
                [PowerCapComponent.from_dict(item) for item in components]
                if components is not None
                else None
            ),
        )


@dataclass
class PowerCapTaskList:
    """A list of power-cap tasks."""

    tasks: list[PowerCapTaskInfo] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [task.to_dict() for task in self.tasks]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PowerCapTaskList:
        tasks = _require(data, "tasks", "PowerCapTaskList")
        return cls(tasks=[PowerCapTaskInfo.from_dict(task) for task in tasks])