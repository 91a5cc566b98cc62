"""Trajectories followed by the primary source: preset shapes and hand drawings."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Union

from .constants import ElevationTrajectoryType, PositionTrajectoryType
from .strong_types import Degrees, Normalized, Point, Radians

__all__ = ["Trajectory"]

_CIRCLE_POINTS = 300
_SPIRAL_ROTATIONS = 3
_SPIRAL_POINTS_PER_ROTATION = 100
_SQUARE_POINTS_PER_SIDE = 75
_TRIANGLE_POINTS_PER_SIDE = 100
_DOWN_UP_POINTS = 200
_SQRT_3 = 1.73205080757


def _walk(start: Point, steps: Iterable[Point], points_per_side: int) -> list[Point]:
    """Collect points starting at ``start``, taking ``points_per_side`` of each step in turn."""
    result: list[Point] = []
    current = start
    for step in steps:
        for _ in range(points_per_side):
            result.append(current)
            current = current + step
    return result


def _circle_points() -> list[Point]:
    return [
        Point(math.cos(angle), math.sin(angle))
        for angle in (i / _CIRCLE_POINTS * 2.0 * math.pi for i in range(_CIRCLE_POINTS))
    ]


def _ellipse_points() -> list[Point]:
    return [point.with_y(point.y * 0.5) for point in _circle_points()]


def _spiral_points() -> list[Point]:
    total = _SPIRAL_ROTATIONS * _SPIRAL_POINTS_PER_ROTATION
    angle_step = 2.0 * math.pi / _SPIRAL_POINTS_PER_ROTATION
    radius_step = 1.0 / total
    result: list[Point] = []
    radius = 0.0
    angle = 0.0
    for _ in range(total):
        result.append(Point(math.cos(angle) * radius, math.sin(angle) * radius))
        radius += radius_step
        angle += angle_step
    return result


def _square_points() -> list[Point]:
    step = 1.0 / _SQUARE_POINTS_PER_SIDE
    steps = (Point(-step, step), Point(-step, -step), Point(step, -step), Point(step, step))
    return _walk(Point(1.0, 0.0), steps, _SQUARE_POINTS_PER_SIDE)


def _triangle_points() -> list[Point]:
    step = _SQRT_3 / _TRIANGLE_POINTS_PER_SIDE
    up_left = Degrees(150.0).as_radians()
    up_right = Degrees(30.0).as_radians()
    steps = (
        Point(math.cos(up_left) * step, math.sin(up_left) * step),
        Point(0.0, -step),
        Point(math.cos(up_right) * step, math.sin(up_right) * step),
    )
    return _walk(Point(1.0, 0.0), steps, _TRIANGLE_POINTS_PER_SIDE)


def _down_up_points() -> list[Point]:
    increment = 2.0 / (_DOWN_UP_POINTS - 1)
    return _walk(Point(-1.0, -1.0), (Point(increment, increment),), _DOWN_UP_POINTS)


def _flipped(points: Sequence[Point]) -> list[Point]:
    return [point.with_y(-point.y) for point in points]


def _reversed(points: Sequence[Point]) -> list[Point]:
    return list(reversed(points))


_POSITION_SHAPES = {
    PositionTrajectoryType.circleClockwise: lambda: _circle_points(),
    PositionTrajectoryType.circleCounterClockwise: lambda: _reversed(_circle_points()),
    PositionTrajectoryType.ellipseClockwise: lambda: _ellipse_points(),
    PositionTrajectoryType.ellipseCounterClockwise: lambda: _reversed(_ellipse_points()),
    PositionTrajectoryType.spiralClockwiseInOut: lambda: _flipped(_spiral_points()),
    PositionTrajectoryType.spiralCounterClockwiseInOut: lambda: _spiral_points(),
    PositionTrajectoryType.spiralClockwiseOutIn: lambda: _reversed(_flipped(_spiral_points())),
    PositionTrajectoryType.spiralCounterClockwiseOutIn: lambda: _reversed(_spiral_points()),
    PositionTrajectoryType.squareClockwise: lambda: _square_points(),
    PositionTrajectoryType.squareCounterClockwise: lambda: _reversed(_square_points()),
    PositionTrajectoryType.triangleClockwise: lambda: _triangle_points(),
    PositionTrajectoryType.triangleCounterClockwise: lambda: _reversed(_triangle_points()),
    PositionTrajectoryType.drawing: lambda: [],
}

_ELEVATION_SHAPES = {
    ElevationTrajectoryType.downUp: lambda: _down_up_points(),
    ElevationTrajectoryType.upDown: lambda: _flipped(_down_up_points()),
    ElevationTrajectoryType.drawing: lambda: [],
}


class Trajectory:
    """An ordered list of points in the [-1, 1] field that a source travels along."""

    def __init__(self, points: Iterable[Point] = (), is_elevation_drawing: bool = False) -> None:
        self._points: list[Point] = list(points)
        self._is_elevation_drawing = is_elevation_drawing

    @staticmethod
    def for_position(trajectory_type: PositionTrajectoryType, starting_point: Point) -> Trajectory:
        """Build a preset shape, rotated and scaled so that it goes through ``starting_point``."""
        try:
            shape = _POSITION_SHAPES[trajectory_type]
        except KeyError:
            raise ValueError(f"no trajectory can be built for {trajectory_type!r}") from None
        angle = Radians(math.atan2(starting_point.y, starting_point.x))
        radius = starting_point.distance_from_origin()
        points = [point.rotated_about_origin(angle) * radius for point in shape()]
        return Trajectory(points, False)

    @staticmethod
    def for_elevation(trajectory_type: ElevationTrajectoryType) -> Trajectory:
        """Build an elevation trajectory; drawings start empty and space their points evenly."""
        try:
            shape = _ELEVATION_SHAPES[trajectory_type]
        except KeyError:
            raise ValueError(f"no trajectory can be built for {trajectory_type!r}") from None
        return Trajectory(shape(), trajectory_type == ElevationTrajectoryType.drawing)

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def is_elevation_drawing(self) -> bool:
        return self._is_elevation_drawing

    def start_position(self) -> Point:
        if not self._points:
            raise IndexError("trajectory is empty")
        return self._points[0]

    def end_position(self) -> Point:
        if not self._points:
            raise IndexError("trajectory is empty")
        return self._points[-1]

    def position_at(self, normalized: Union[Normalized, float]) -> Point:
        """Interpolate the point at ``normalized`` progress along the trajectory."""
        if not self._points:
            raise IndexError("trajectory is empty")
        progress = normalized.value if isinstance(normalized, Normalized) else float(normalized)
        index_f = (len(self._points) - 1) * progress
        point_a = self._points[math.floor(index_f)]
        point_b = self._points[math.ceil(index_f)]
        balance = math.fmod(index_f, 1.0)
        return point_a * (1.0 - balance) + point_b * balance

    def clear(self) -> None:
        self._points.clear()

    def add_point(self, point: Point) -> None:
        """Append a point; elevation drawings re-space all points evenly across x in [-1, 1]."""
        self._points.append(point)
        count = len(self._points)
        if self._is_elevation_drawing and count > 1:
            spacing = 2.0 / (count - 1)
            self._points = [p.with_x(-1.0 + i * spacing) for i, p in enumerate(self._points)]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)