import pytest

from spatgris_control.constants import (
    MAX_ELEVATION,
    MIN_ELEVATION,
    AutomationParameter,
    id_to_enum,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("recordingTrajectory_x", AutomationParameter.x),
        ("recordingTrajectory_y", AutomationParameter.y),
        ("recordingTrajectory_z", AutomationParameter.z),
        ("sourceLink", AutomationParameter.positionSourceLink),
        ("sourceLinkAlt", AutomationParameter.elevationSourceLink),
        ("azimuthSpan", AutomationParameter.azimuthSpan),
        ("elevationSpan", AutomationParameter.elevationSpan),
        ("positionPreset", AutomationParameter.positionPreset),
        ("elevationMode", AutomationParameter.elevationMode),
    ],
)
def test_id_to_enum_known_ids(name, expected):
    assert id_to_enum(name) is expected
    assert AutomationParameter.from_id(name) is expected


def test_from_id_round_trips_every_member():
    for member in AutomationParameter:
        assert AutomationParameter.from_id(member.id) is member


@pytest.mark.parametrize("name", ["", "sourcelink", "recordingTrajectory_w", " azimuthSpan"])
def test_unknown_id_raises(name):
    with pytest.raises(ValueError):
        id_to_enum(name)


def test_automation_order_matches_declaration():
    members = list(AutomationParameter)
    assert members.index(id_to_enum("recordingTrajectory_x")) == 0
    assert members.index(id_to_enum("elevationMode")) == len(members) - 1


def test_elevation_limits():
    assert MIN_ELEVATION.as_degrees() == pytest.approx(0.0)
    assert MAX_ELEVATION.as_degrees() == pytest.approx(90.0)
    assert MIN_ELEVATION < MAX_ELEVATION