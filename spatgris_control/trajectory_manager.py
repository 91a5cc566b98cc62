"""Drives the primary source along a trajectory as playback time advances."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Protocol

from .constants import (
    MAX_ELEVATION,
    ElevationSourceLink,
    ElevationTrajectoryType,
    PositionSourceLink,
    PositionTrajectoryType,
)
from .strong_types import Degrees, Normalized, Point, Radians
from .trajectory import Trajectory

__all__ = [
    "Direction",
    "TrajectoryListener",
    "TrajectoryManager",
    "PositionTrajectoryManager",
    "ElevationTrajectoryManager",
]

_SMOOTHING_FACTOR = 0.8
_TRAJECTORY_ORIGIN = "trajectory"
_FULL_TURN = Degrees(360.0)


class Direction(Enum):
    """Direction of travel along a back-and-forth trajectory."""

    forward = "forward"
    backward = "backward"


class TrajectoryListener(Protocol):
    """Receives a notification each time a trajectory moves the primary source."""

    def trajectory_position_changed(
        self, manager: TrajectoryManager, position: Point, elevation: Radians
    ) -> None:
        ...


def _approximately_equal(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=sys.float_info.epsilon, abs_tol=sys.float_info.min)


class TrajectoryManager(ABC):
    """Common playback logic for position and elevation trajectories.

    The primary source must provide ``position``, ``elevation``,
    ``normalized_elevation``, ``is_primary_source``,
    ``set_position(position, origin)`` and ``set_elevation(elevation, origin)``.
    """

    def __init__(self, primary_source) -> None:
        self._primary_source = primary_source
        self._listeners: list[TrajectoryListener] = []

        self.back_and_forth = False
        self._direction = Direction.forward

        self.dampening_cycles = 0
        self._dampening_cycle_count = 0
        self._dampening_last_delta = 0.0

        self._activate_state = False
        self.playback_duration = 5.0
        self._current_playback_duration = 5.0

        self._delta_time = 0.0
        self._last_delta_time = 0.0
        self._trajectory: Optional[Trajectory] = None
        self._current_point = Point()
        self._last_recording_point = Point()

        self.deviation_per_cycle = Degrees(0.0)
        self._current_deviation = Degrees(0.0)
        self._deviation_cycle_count = 0

    @property
    def primary_source(self):
        return self._primary_source

    @property
    def activate_state(self) -> bool:
        return self._activate_state

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def trajectory(self) -> Optional[Trajectory]:
        return self._trajectory

    def set_activate_state(self, state: bool) -> None:
        """Turn playback on or off; turning it on restarts the cycle counters."""
        self._activate_state = state
        if state:
            self._delta_time = 0.0
            self._last_delta_time = 0.0
            self._direction = Direction.forward
            self._dampening_cycle_count = 0
            self._dampening_last_delta = 0.0
            self._current_playback_duration = self.playback_duration
            self._current_deviation = Degrees(0.0)
            self._deviation_cycle_count = 0

    def reset_recording_trajectory(self, current_position: Point) -> None:
        """Start a new drawing at ``current_position``."""
        if not (-1.0 <= current_position.x <= 1.0 and -1.0 <= current_position.y <= 1.0):
            raise ValueError(f"recording position {current_position!r} lies outside the field")
        trajectory = self._require_trajectory()
        trajectory.clear()
        trajectory.add_point(current_position)
        self._last_recording_point = current_position
        self._direction = Direction.forward

    def add_recording_point(self, pos: Point) -> None:
        """Add a smoothed point to the drawing being recorded."""
        trajectory = self._require_trajectory()
        trajectory.add_point(self._smooth_recording_position(pos))

    def current_trajectory_point(self) -> Point:
        """The trajectory point while active, otherwise the primary source position."""
        if self._activate_state:
            return self._current_point
        return self._primary_source.position

    def set_trajectory_delta_time(self, relative_time_from_play: float) -> None:
        """Advance playback to ``relative_time_from_play`` seconds and move the source."""
        self._delta_time = math.fmod(relative_time_from_play / self._current_playback_duration, 1.0)
        self._compute_current_trajectory_point()
        self.apply_current_trajectory_point_to_primary_source()

    def add_listener(self, listener: TrajectoryListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TrajectoryListener) -> None:
        self._listeners.remove(listener)

    def source_moved(self, source) -> None:
        """Rebuild the trajectory after the primary source was moved."""
        if not source.is_primary_source:
            raise ValueError("only the primary source drives a trajectory")
        self.recompute_trajectory()

    def send_trajectory_position_changed_event(self) -> None:
        position = self._primary_source.position
        elevation = self._primary_source.elevation
        for listener in list(self._listeners):
            listener.trajectory_position_changed(self, position, elevation)

    @abstractmethod
    def recompute_trajectory(self) -> None:
        """Rebuild the trajectory from the current trajectory type and source."""

    @abstractmethod
    def apply_current_trajectory_point_to_primary_source(self) -> None:
        """Move the primary source to the current trajectory point when active."""

    @abstractmethod
    def _extract_trajectory_point_from_primary_source(self) -> Point:
        """The trajectory point matching where the primary source is now."""

    def _require_trajectory(self) -> Trajectory:
        if self._trajectory is None:
            raise RuntimeError("no trajectory is set")
        return self._trajectory

    def _smooth_recording_position(self, pos: Point) -> Point:
        self._last_recording_point = (self._last_recording_point - pos) * _SMOOTHING_FACTOR + pos
        return self._last_recording_point

    def _invert_direction(self) -> None:
        self._direction = (
            Direction.backward if self._direction is Direction.forward else Direction.forward
        )

    def _compute_current_trajectory_point(self) -> None:
        trajectory = self._trajectory
        if trajectory is None:
            self._current_point = self._extract_trajectory_point_from_primary_source()
            return

        cycles_times_2 = self.dampening_cycles * 2
        damped = self.back_and_forth and self.dampening_cycles > 0
        scale_min = 0.0
        scale_max = 0.0
        size = len(trajectory)

        if size > 0:
            if self._delta_time < self._last_delta_time:
                if self.back_and_forth:
                    self._invert_direction()
                    self._dampening_cycle_count = min(self._dampening_cycle_count + 1, cycles_times_2)
                self._deviation_cycle_count += 1
            self._last_delta_time = self._delta_time

            if damped:
                if self._delta_time <= 0.5:
                    phase = (self._delta_time * 2.0) ** 2 * 0.5
                else:
                    phase = 1.0 - (1.0 - (self._delta_time - 0.5) * 2.0) ** 2 * 0.5
            else:
                phase = self._delta_time

            delta = phase * size
            if self._direction is Direction.backward:
                delta = size - delta
            delta = min(max(delta, 0.0), float(size))

            if damped:
                if self._dampening_cycle_count < cycles_times_2:
                    relative = (self._dampening_cycle_count + self._delta_time) / cycles_times_2
                    self._current_playback_duration = (
                        self.playback_duration - relative**2 * self.playback_duration * 0.25
                    )
                    scale_min = relative * size * 0.5
                    scale_max = size - scale_min
                    delta = delta * ((scale_max - scale_min) / size) + scale_min
                    self._dampening_last_delta = delta
                else:
                    delta = self._dampening_last_delta
            else:
                self._dampening_last_delta = delta

            delta *= (size - 1) / size
            if int(delta) + 1 < size:
                self._current_point = trajectory.position_at(Normalized(delta / size))
            else:
                self._current_point = trajectory.end_position()

        if self.deviation_per_cycle != Degrees(0.0):
            if not (damped and _approximately_equal(scale_min, scale_max)):
                self._current_deviation = self.deviation_per_cycle * float(
                    self._deviation_cycle_count + self._delta_time
                )
                if self._current_deviation >= _FULL_TURN:
                    self._current_deviation = self._current_deviation - _FULL_TURN
            self._current_point = self._current_point.rotated_about_origin(
                self._current_deviation.as_radians()
            )


class PositionTrajectoryManager(TrajectoryManager):
    """Moves the primary source across the field."""

    def __init__(self, primary_source) -> None:
        super().__init__(primary_source)
        self._trajectory_type = PositionTrajectoryType.drawing
        self.source_link = PositionSourceLink.independent

    @property
    def trajectory_type(self) -> PositionTrajectoryType:
        return self._trajectory_type

    def set_trajectory_type(self, trajectory_type: PositionTrajectoryType, start_pos: Point) -> None:
        """Select a shape passing through ``start_pos``; realtime removes the trajectory."""
        self._trajectory_type = trajectory_type
        if trajectory_type == PositionTrajectoryType.realtime:
            self._trajectory = None
        else:
            self._trajectory = Trajectory.for_position(trajectory_type, start_pos)
        self._direction = Direction.forward

    def recompute_trajectory(self) -> None:
        self.set_trajectory_type(self._trajectory_type, self._primary_source.position)
        self._direction = Direction.forward

    def apply_current_trajectory_point_to_primary_source(self) -> None:
        if self._activate_state:
            self._primary_source.set_position(self._current_point, _TRAJECTORY_ORIGIN)
            self.send_trajectory_position_changed_event()

    def _extract_trajectory_point_from_primary_source(self) -> Point:
        return self._primary_source.position


class ElevationTrajectoryManager(TrajectoryManager):
    """Moves the primary source up and down; the trajectory's y maps to elevation."""

    def __init__(self, primary_source) -> None:
        super().__init__(primary_source)
        self._trajectory_type = ElevationTrajectoryType.drawing
        self.source_link = ElevationSourceLink.independent

    @property
    def trajectory_type(self) -> ElevationTrajectoryType:
        return self._trajectory_type

    def set_trajectory_type(self, trajectory_type: ElevationTrajectoryType) -> None:
        """Select an elevation shape; realtime removes the trajectory."""
        self._trajectory_type = trajectory_type
        if trajectory_type == ElevationTrajectoryType.realtime:
            self._trajectory = None
        else:
            self._trajectory = Trajectory.for_elevation(trajectory_type)
        self._direction = Direction.forward

    def recompute_trajectory(self) -> None:
        self.set_trajectory_type(self._trajectory_type)

    def apply_current_trajectory_point_to_primary_source(self) -> None:
        if self._activate_state:
            elevation = MAX_ELEVATION * ((self._current_point.y + 1.0) / 2.0)
            self._primary_source.set_elevation(elevation, _TRAJECTORY_ORIGIN)
            self.send_trajectory_position_changed_event()

    def _extract_trajectory_point_from_primary_source(self) -> Point:
        return Point(0.0, float(self._primary_source.normalized_elevation) * 2.0 - 1.0)