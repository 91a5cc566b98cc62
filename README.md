# spatgris-control

Building blocks for controlling the position of sound sources in a
spatialization system: strongly typed angles and indices, source snapshots,
preset trajectory shapes and a playback manager that drives a primary source
along a trajectory over time.

The package is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `spatgris_control.strong_types`
  - `Point`: an immutable 2D point with `+`, `-`, scalar `*` and `/`,
    `with_x`, `with_y`, `rotated_about_origin(angle)` and
    `distance_from_origin()`.
  - `Degrees`, `Radians`, `Normalized`: immutable floats that only compare
    and add with values of their own kind. Angles offer `centered()`,
    `made_positive()`, `as_degrees()`, `as_radians()` and `angle_of(point)`;
    `Radians.from_degrees`, `Radians.to_degrees` and `Degrees.to_radians`
    convert between them. `clamped(low, high)` limits any of them.
  - `SourceId` (one-based) and `SourceIndex` (zero-based), with
    `remove_offset()`.
  - `narrow(value, target)`: converts and raises `ValueError` if the value
    does not survive the round trip.
  - `QUARTER_PI`, `HALF_PI`, `PI`, `TWO_PI`.
- `spatgris_control.constants`: limits such as `MAX_NUMBER_OF_SOURCES` and
  `MAX_ELEVATION`; the enumerations `SpatMode`, `ElevationMode`,
  `SourcePlacement`, `PositionSourceLink`, `ElevationSourceLink`,
  `PositionTrajectoryType` and `ElevationTrajectoryType`; their display names
  (`POSITION_TRAJECTORY_TYPE_TYPES` and the like); and `AutomationParameter`
  with `AutomationParameter.from_id(name)` / `id_to_enum(name)`, which raise
  `ValueError` for an unknown id.
- `spatgris_control.snapshot`: `SourceSnapshot` (a position and `z`) and
  `SourcesSnapshots`, indexable by `SourceIndex` or `int`, where index 0 is
  the primary source.
- `spatgris_control.trajectory`: `Trajectory`, built with
  `Trajectory.for_position(type, starting_point)` (circle, ellipse, spiral,
  square, triangle or an empty drawing, rotated and scaled to pass through
  the starting point) or `Trajectory.for_elevation(type)` (down-up, up-down
  or an empty drawing). It offers `start_position()`, `end_position()`,
  `position_at(normalized)`, `add_point(point)`, `clear()` and `len()`.
  Points added to an elevation drawing are re-spaced evenly across x in
  [-1, 1]. Types that have no shape (`realtime`, `undefined`) raise
  `ValueError`.
- `spatgris_control.trajectory_manager`: `PositionTrajectoryManager` and
  `ElevationTrajectoryManager`, which move a primary source along a
  trajectory as `set_trajectory_delta_time(seconds)` is called, with
  `back_and_forth`, `dampening_cycles`, `playback_duration` and
  `deviation_per_cycle` settings, drawing via `reset_recording_trajectory`
  and `add_recording_point`, and listeners notified through
  `trajectory_position_changed(manager, position, elevation)`.
- `spatgris_control.utilities`: `XmlElementDataSorter`, which compares and
  sorts `xml.etree.ElementTree` elements by a numeric attribute, forwards or
  backwards.

## Example

```python
from spatgris_control.constants import PositionTrajectoryType
from spatgris_control.strong_types import Normalized, Point
from spatgris_control.trajectory import Trajectory

circle = Trajectory.for_position(PositionTrajectoryType.circleClockwise, Point(0.5, 0.0))
print(len(circle))                      # 300
print(circle.start_position())          # Point(x=0.5, y=0.0)
print(circle.position_at(Normalized(0.5)))
```

Angles are kept apart by type:

```python
from spatgris_control.strong_types import Degrees, Radians

angle = Radians.from_degrees(Degrees(270.0))
print(angle.centered().as_degrees())    # about -90.0
```

## Driving a source

The trajectory managers do not define a source class. They work with any
object that provides `position`, `elevation`, `normalized_elevation`,
`is_primary_source`, `set_position(position, origin)` and
`set_elevation(elevation, origin)`; the origin passed is the string
`"trajectory"`.

## What this package does not do

It has no audio processing, no user interface, no command-line program and
no storage of presets or settings. It does not model sources itself and does
not enforce links between a primary source and its secondaries: the
`PositionSourceLink` and `ElevationSourceLink` values are only recorded on
the managers.