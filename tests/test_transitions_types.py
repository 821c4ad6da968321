import pytest

from ochamiclient.transitions_types import Location, Operation, Transition
from ochamiclient.transport import MessageError


@pytest.mark.parametrize(
    "name, expected",
    [
        ("on", Operation.ON),
        ("off", Operation.OFF),
        ("soft-off", Operation.SOFT_OFF),
        ("soft-restart", Operation.SOFT_RESTART),
        ("hard-restart", Operation.HARD_RESTART),
        ("init", Operation.INIT),
        ("force-off", Operation.FORCE_OFF),
    ],
)
def test_operation_from_str(name, expected):
    assert Operation.from_str(name) is expected


@pytest.mark.parametrize("name", ["", "On", "reboot", "soft_off"])
def test_operation_from_str_rejects_unknown(name):
    with pytest.raises(MessageError) as excinfo:
        Operation.from_str(name)
    assert excinfo.value.message == "Operation not valid"


def test_operation_wire_values():
    assert Operation.SOFT_RESTART.value == "Soft-Restart"
    assert Operation("Force-Off") is Operation.FORCE_OFF


def test_location_omits_missing_deputy_key():
    assert Location("x1000c0s0b0n0").to_dict() == {"xname": "x1000c0s0b0n0"}


def test_location_round_trip_with_deputy_key():
    data = {"xname": "x1000c0s0b0n0", "deputyKey": "deputy-1"}
    location = Location.from_dict(data)
    assert location.deputy_key == "deputy-1"
    assert location.to_dict() == data


def test_location_requires_xname():
    with pytest.raises(ValueError):
        Location.from_dict({"deputyKey": "deputy-1"})


def test_transition_serialises_request_body():
    transition = Transition(
        operation=Operation.from_str("soft-off"),
        location=[Location("x1000c0s0b0n0"), Location("x1000c0s0b0n1")],
    )
    assert transition.to_dict() == {
        "operation": "Soft-Off",
        "location": [{"xname": "x1000c0s0b0n0"}, {"xname": "x1000c0s0b0n1"}],
    }


def test_transition_round_trip_with_deadline():
    data = {
        "operation": "Init",
        "taskDeadlineMinutes": 5,
        "location": [{"xname": "x1000c0s0b0n0"}],
    }
    transition = Transition.from_dict(data)
    assert transition.operation is Operation.INIT
    assert transition.task_deadline_minutes == 5
    assert transition.to_dict() == data


def test_transition_rejects_unknown_operation():
    with pytest.raises(ValueError):
        Transition.from_dict({"operation": "on", "location": []})