import math

import pytest

from spatgris_control.constants import (
    MAX_ELEVATION,
    MIN_ELEVATION,
    ElevationTrajectoryType,
    PositionTrajectoryType,
)
from spatgris_control.strong_types import Degrees, Normalized, Point, Radians
from spatgris_control.trajectory_manager import (
    Direction,
    ElevationTrajectoryManager,
    PositionTrajectoryManager,
)


class FakeSource:
    def __init__(self, position=Point(1.0, 0.0), elevation=Radians(0.0), primary=True):
        self.position = position
        self.elevation = elevation
        self.is_primary_source = primary
        self.origins = []

    @property
    def normalized_elevation(self):
        return Normalized(self.elevation / MAX_ELEVATION)

    def set_position(self, position, origin):
        self.position = position
        self.origins.append(origin)

    def set_elevation(self, elevation, origin):
        self.elevation = elevation
        self.origins.append(origin)


class RecordingListener:
    def __init__(self):
        self.calls = []

    def trajectory_position_changed(self, manager, position, elevation):
        self.calls.append((manager, position, elevation))


def close(a, b, tol=1e-6):
    return math.isclose(a.x, b.x, abs_tol=tol) and math.isclose(a.y, b.y, abs_tol=tol)


def make_circle_manager(source=None):
    source = source or FakeSource()
    manager = PositionTrajectoryManager(source)
    manager.set_trajectory_type(PositionTrajectoryType.circleClockwise, source.position)
    return manager, source


def test_set_trajectory_type_builds_shape_through_start():
    manager, _ = make_circle_manager()
    assert manager.trajectory_type == PositionTrajectoryType.circleClockwise
    assert len(manager.trajectory) == 300
    assert close(manager.trajectory.start_position(), Point(1.0, 0.0))


def test_realtime_removes_trajectory():
    manager, _ = make_circle_manager()
    manager.set_trajectory_type(PositionTrajectoryType.realtime, Point(1.0, 0.0))
    assert manager.trajectory is None


def test_inactive_manager_reports_source_position():
    source = FakeSource(position=Point(0.3, -0.2))
    manager, _ = make_circle_manager(source)
    assert manager.current_trajectory_point() == Point(0.3, -0.2)


def test_inactive_manager_does_not_move_source():
    manager, source = make_circle_manager(FakeSource(position=Point(0.5, 0.0)))
    listener = RecordingListener()
    manager.add_listener(listener)
    manager.set_trajectory_delta_time(2.5)
    assert source.position == Point(0.5, 0.0)
    assert listener.calls == []


def test_active_start_moves_source_to_start_and_notifies():
    manager, source = make_circle_manager()
    listener = RecordingListener()
    manager.add_listener(listener)
    manager.set_activate_state(True)
    manager.set_trajectory_delta_time(0.0)
    assert close(source.position, Point(1.0, 0.0))
    assert source.origins == ["trajectory"]
    assert len(listener.calls) == 1
    assert listener.calls[0][0] is manager
    assert listener.calls[0][1] == source.position


def test_halfway_is_on_far_side_of_circle():
    manager, source = make_circle_manager()
    manager.set_activate_state(True)
    manager.set_trajectory_delta_time(2.5)
    assert source.position.x < -0.99
    assert math.isclose(source.position.distance_from_origin(), 1.0, abs_tol=1e-3)
    assert manager.current_trajectory_point() == source.position


def test_back_and_forth_inverts_direction_on_wrap():
    manager, _ = make_circle_manager()
    manager.back_and_forth = True
    manager.set_activate_state(True)
    manager.set_trajectory_delta_time(4.0)
    assert manager.direction is Direction.forward
    manager.set_trajectory_delta_time(1.0)
    assert manager.direction is Direction.backward
    manager.set_trajectory_delta_time(4.0)
    manager.set_trajectory_delta_time(1.0)
    assert manager.direction is Direction.forward


def test_activation_resets_direction():
    manager, _ = make_circle_manager()
    manager.back_and_forth = True
    manager.set_activate_state(True)
    manager.set_trajectory_delta_time(4.0)
    manager.set_trajectory_delta_time(1.0)
    assert manager.direction is Direction.backward
    manager.set_activate_state(True)
    assert manager.direction is Direction.forward


def test_dampening_freezes_position_after_all_cycles():
    manager, source = make_circle_manager()
    manager.back_and_forth = True
    manager.dampening_cycles = 1
    manager.set_activate_state(True)
    for time in (4.5, 0.1, 4.5, 0.1):
        manager.set_trajectory_delta_time(time)
    frozen = source.position
    manager.set_trajectory_delta_time(2.0)
    assert source.position == frozen


def test_deviation_rotates_trajectory_point():
    plain, plain_source = make_circle_manager()
    deviated, deviated_source = make_circle_manager()
    deviated.deviation_per_cycle = Degrees(90.0)
    for manager in (plain, deviated):
        manager.set_activate_state(True)
        manager.set_trajectory_delta_time(2.5)
    expected = plain_source.position.rotated_about_origin(Degrees(45.0))
    assert deviated_source.position.x == pytest.approx(expected.x, abs=1e-6)
    assert deviated_source.position.y == pytest.approx(expected.y, abs=1e-6)


def test_realtime_position_uses_source_position():
    source = FakeSource(position=Point(0.2, 0.4))
    manager = PositionTrajectoryManager(source)
    manager.set_trajectory_type(PositionTrajectoryType.realtime, source.position)
    manager.set_activate_state(True)
    manager.set_trajectory_delta_time(1.0)
    assert source.position == Point(0.2, 0.4)
    assert manager.current_trajectory_point() == Point(0.2, 0.4)


def test_source_moved_rebuilds_from_new_position():
    manager, source = make_circle_manager()
    source.position = Point(0.0, 0.5)
    manager.source_moved(source)
    start = manager.trajectory.start_position()
    assert start.x == pytest.approx(0.0, abs=1e-6)
    assert start.y == pytest.approx(0.5, abs=1e-6)
    assert len(manager.trajectory) == 300


def test_source_moved_rejects_secondary_source():
    manager, _ = make_circle_manager()
    with pytest.raises(ValueError):
        manager.source_moved(FakeSource(primary=False))


def test_recording_without_trajectory_raises():
    manager = PositionTrajectoryManager(FakeSource())
    with pytest.raises(RuntimeError):
        manager.reset_recording_trajectory(Point(0.0, 0.0))
    with pytest.raises(RuntimeError):
        manager.add_recording_point(Point(0.0, 0.0))


def test_recording_rejects_position_outside_field():
    source = FakeSource()
    manager = PositionTrajectoryManager(source)
    manager.set_trajectory_type(PositionTrajectoryType.drawing, source.position)
    with pytest.raises(ValueError):
        manager.reset_recording_trajectory(Point(1.5, 0.0))


def test_recording_smooths_points():
    source = FakeSource()
    manager = PositionTrajectoryManager(source)
    manager.set_trajectory_type(PositionTrajectoryType.drawing, source.position)
    manager.reset_recording_trajectory(Point(0.5, 0.5))
    assert len(manager.trajectory) == 1
    manager.add_recording_point(Point(1.0, 1.0))
    assert len(manager.trajectory) == 2
    assert close(manager.trajectory.end_position(), Point(0.6, 0.6))


def test_elevation_down_up_starts_at_minimum():
    source = FakeSource(elevation=Radians(1.0))
    manager = ElevationTrajectoryManager(source)
    manager.set_trajectory_type(ElevationTrajectoryType.downUp)
    manager.set_activate_state(True)
    manager.set_trajectory_delta_time(0.0)
    assert math.isclose(source.elevation.value, MIN_ELEVATION.value, abs_tol=1e-9)


def test_elevation_up_down_starts_at_maximum():
    source = FakeSource()
    manager = ElevationTrajectoryManager(source)
    manager.set_trajectory_type(ElevationTrajectoryType.upDown)
    manager.set_activate_state(True)
    manager.set_trajectory_delta_time(0.0)
    assert math.isclose(source.elevation.value, MAX_ELEVATION.value, abs_tol=1e-9)


def test_elevation_realtime_keeps_source_elevation():
    half = MAX_ELEVATION * 0.5
    source = FakeSource(elevation=half)
    manager = ElevationTrajectoryManager(source)
    manager.set_trajectory_type(ElevationTrajectoryType.realtime)
    assert manager.trajectory is None
    manager.set_activate_state(True)
    manager.set_trajectory_delta_time(3.0)
    assert math.isclose(source.elevation.value, half.value, abs_tol=1e-9)


def test_elevation_recompute_keeps_type():
    manager = ElevationTrajectoryManager(FakeSource())
    manager.set_trajectory_type(ElevationTrajectoryType.downUp)
    manager.recompute_trajectory()
    assert manager.trajectory_type == ElevationTrajectoryType.downUp
    assert len(manager.trajectory) == 200