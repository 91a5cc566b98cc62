"""Strongly typed indices, angles and 2D points used throughout the package."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, TypeVar, Union

_T = TypeVar("_T")
_F = TypeVar("_F", bound="StrongFloat")

__all__ = [
    "Point",
    "StrongIndex",
    "SourceId",
    "SourceIndex",
    "StrongFloat",
    "Degrees",
    "Radians",
    "Normalized",
    "narrow",
    "QUARTER_PI",
    "HALF_PI",
    "PI",
    "TWO_PI",
]


def narrow(value, target: type[_T]) -> _T:
    """Convert ``value`` to ``target``, raising ValueError if information is lost."""
    converted = target(value)
    try:
        round_trip = type(value)(converted)
    except (TypeError, ValueError, OverflowError) as error:
        raise ValueError(f"cannot narrow {value!r} to {target.__name__}") from error
    if round_trip != value:
        raise ValueError(f"narrowing {value!r} to {target.__name__} loses information")
    return converted


@dataclass(frozen=True)
class Point:
    """An immutable 2D point."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Point(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def with_x(self, x: float) -> Point:
        return Point(x, self.y)

    def with_y(self, y: float) -> Point:
        return Point(self.x, y)

    def rotated_about_origin(self, angle: Union[float, "Radians", "Degrees"]) -> Point:
        """Rotate counter-clockwise about the origin by ``angle`` (radians if a plain number)."""
        if isinstance(angle, (Radians, Degrees)):
            angle = angle.as_radians()
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Point(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def distance_from_origin(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True, order=True)
class StrongIndex:
    """An integer index that cannot be mixed with indices of another kind."""

    OFFSET: ClassVar[int] = 0

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{type(self).__name__} requires an int, got {self.value!r}")

    def __add__(self, other: StrongIndex) -> StrongIndex:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def next(self) -> StrongIndex:
        return type(self)(self.value + 1)

    def previous(self) -> StrongIndex:
        return type(self)(self.value - 1)

    def remove_offset(self) -> int:
        """Return the zero-based position this index refers to."""
        return narrow(self.value - self.OFFSET, int)


@dataclass(frozen=True, order=True)
class SourceId(StrongIndex):
    """A one-based source identifier."""

    OFFSET: ClassVar[int] = 1


@dataclass(frozen=True, order=True)
class SourceIndex(StrongIndex):
    """A zero-based source index."""

    OFFSET: ClassVar[int] = 0


class StrongFloat:
    """An immutable float that only combines with values of its own kind."""

    __slots__ = ("_value",)

    def __init__(self, value: float = 0.0) -> None:
        if isinstance(value, StrongFloat):
            raise TypeError(f"{type(self).__name__} cannot be built from {type(value).__name__}")
        object.__setattr__(self, "_value", float(value))

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def to_string(self, precision: int = 2) -> str:
        return f"{self._value:.{precision}f}"

    def __float__(self) -> float:
        return self._value

    def _same(self, other) -> bool:
        return type(other) is type(self)

    def __eq__(self, other) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __lt__(self, other) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._value >= other._value

    def __neg__(self: _F) -> _F:
        return type(self)(-self._value)

    def __add__(self: _F, other: _F) -> _F:
        if not self._same(other):
            return NotImplemented
        return type(self)(self._value + other._value)

    def __sub__(self: _F, other: _F) -> _F:
        if not self._same(other):
            return NotImplemented
        return type(self)(self._value - other._value)

    def __mul__(self: _F, factor: float) -> _F:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return type(self)(self._value * factor)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if self._same(other):
            return self._value / other._value
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return type(self)(self._value / other)

    def __abs__(self: _F) -> _F:
        return type(self)(abs(self._value))

    def clamped(self: _F, low: _F, high: _F) -> _F:
        """Return this value limited to the range [low, high]."""
        if self < low:
            return low
        if self > high:
            return high
        return self

    def _centered_around_zero(self: _F, amplitude: float) -> _F:
        half = amplitude / 2.0
        value = self._value
        if value < -half:
            value += amplitude
            while value < -half:
                value += amplitude
            return type(self)(value)
        if value >= half:
            value -= amplitude
            while value >= half:
                value -= amplitude
            return type(self)(value)
        return self


class Degrees(StrongFloat):
    """An angle expressed in degrees."""

    __slots__ = ()

    DEGREE_PER_RADIAN: ClassVar[float] = 360.0 / (2.0 * math.pi)

    def centered(self) -> Degrees:
        """Wrap into the range [-180, 180)."""
        return self._centered_around_zero(360.0)

    def made_positive(self) -> Degrees:
        return Degrees(self._value + 360.0 if self._value < 0 else self._value)

    def as_degrees(self) -> float:
        return self._value

    def as_radians(self) -> float:
        return self._value / self.DEGREE_PER_RADIAN

    def to_radians(self) -> Radians:
        return Radians(self.as_radians())

    @staticmethod
    def angle_of(point: Point) -> Degrees:
        """Angle of ``point`` measured from the positive x axis; zero for the origin."""
        if point.x == 0.0 and point.y == 0.0:
            return Degrees()
        return Degrees(math.atan2(point.y, point.x) * Degrees.DEGREE_PER_RADIAN)


class Radians(StrongFloat):
    """An angle expressed in radians."""

    __slots__ = ()

    RADIAN_PER_DEGREE: ClassVar[float] = (2.0 * math.pi) / 360.0

    def centered(self) -> Radians:
        """Wrap into the range [-pi, pi)."""
        return self._centered_around_zero(2.0 * math.pi)

    def made_positive(self) -> Radians:
        return Radians(self._value + 2.0 * math.pi if self._value < 0 else self._value)

    def to_degrees(self) -> Degrees:
        return Degrees(self._value * Degrees.DEGREE_PER_RADIAN)

    def as_degrees(self) -> float:
        return self._value * Degrees.DEGREE_PER_RADIAN

    def as_radians(self) -> float:
        return self._value

    @staticmethod
    def from_degrees(degrees: Degrees) -> Radians:
        if not isinstance(degrees, Degrees):
            raise TypeError(f"expected Degrees, got {type(degrees).__name__}")
        return Radians(degrees.value * Radians.RADIAN_PER_DEGREE)

    @staticmethod
    def angle_of(point: Point) -> Radians:
        """Angle of ``point`` measured from the positive x axis; zero for the origin."""
        if point.x == 0.0 and point.y == 0.0:
            return Radians()
        return Radians(math.atan2(point.y, point.x))


class Normalized(StrongFloat):
    """A value normally lying in [0, 1]."""

    __slots__ = ()


QUARTER_PI = Radians(math.pi / 4.0)
HALF_PI = Radians(math.pi / 2.0)
PI = Radians(math.pi)
TWO_PI = Radians(2.0 * math.pi)