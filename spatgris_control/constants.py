"""Global limits, mode enumerations, their display names and automation parameter ids."""

from __future__ import annotations

from enum import Enum, IntEnum

from .strong_types import Degrees, Radians

__all__ = [
    "MIN_FIELD_WIDTH",
    "MAX_NUMBER_OF_SOURCES",
    "NUMBER_OF_POSITION_PRESETS",
    "SOURCE_FIELD_COMPONENT_RADIUS",
    "SOURCE_FIELD_COMPONENT_DIAMETER",
    "LBAP_FAR_FIELD",
    "MIN_ELEVATION",
    "MAX_ELEVATION",
    "SpatMode",
    "ElevationMode",
    "SourcePlacement",
    "PositionSourceLink",
    "ElevationSourceLink",
    "PositionTrajectoryType",
    "ElevationTrajectoryType",
    "AutomationParameter",
    "id_to_enum",
    "ELEVATION_MODE_TYPES",
    "SOURCE_SELECTION_WARNING",
    "SOURCE_PLACEMENT_SKETCH",
    "POSITION_SOURCE_LINK_TYPES",
    "ELEVATION_SOURCE_LINK_TYPES",
    "POSITION_TRAJECTORY_TYPE_TYPES",
    "ELEVATION_TRAJECTORY_TYPE_TYPES",
    "FIXED_POSITION_DATA_HEADERS",
    "FIXED_POSITION_DATA_TAG",
]

MIN_FIELD_WIDTH = 300
MAX_NUMBER_OF_SOURCES = 8
NUMBER_OF_POSITION_PRESETS = 50
SOURCE_FIELD_COMPONENT_RADIUS = 12.0
SOURCE_FIELD_COMPONENT_DIAMETER = SOURCE_FIELD_COMPONENT_RADIUS * 2.0
LBAP_FAR_FIELD = 1.666666667

MIN_ELEVATION = Radians.from_degrees(Degrees(0.0))
MAX_ELEVATION = Radians.from_degrees(Degrees(90.0))


class SpatMode(IntEnum):
    """Spatialisation modes."""

    dome = 0
    cube = 1


class ElevationMode(IntEnum):
    """Elevation modes."""

    normal = 0
    extendedTop = 1
    extendedTopAndBottom = 2


class SourcePlacement(IntEnum):
    """Ways of laying out the sources around the field."""

    undefined = 0
    leftAlternate = 1
    rightAlternate = 2
    leftClockwise = 3
    leftCounterClockwise = 4
    rightClockwise = 5
    rightCounterClockwise = 6
    topClockwise = 7
    topCounterClockwise = 8


class PositionSourceLink(IntEnum):
    """How secondary sources follow the primary source in the horizontal plane."""

    undefined = 0
    independent = 1
    circular = 2
    circularFixedRadius = 3
    circularFixedAngle = 4
    circularFullyFixed = 5
    deltaLock = 6
    symmetricX = 7
    symmetricY = 8


class ElevationSourceLink(IntEnum):
    """How secondary sources follow the primary source in elevation."""

    undefined = 0
    independent = 1
    fixedElevation = 2
    linearMin = 3
    linearMax = 4
    deltaLock = 5


class PositionTrajectoryType(IntEnum):
    """Shapes of position trajectories."""

    undefined = 0
    realtime = 1
    drawing = 2
    circleClockwise = 3
    circleCounterClockwise = 4
    ellipseClockwise = 5
    ellipseCounterClockwise = 6
    spiralClockwiseOutIn = 7
    spiralCounterClockwiseOutIn = 8
    spiralClockwiseInOut = 9
    spiralCounterClockwiseInOut = 10
    squareClockwise = 11
    squareCounterClockwise = 12
    triangleClockwise = 13
    triangleCounterClockwise = 14


class ElevationTrajectoryType(IntEnum):
    """Shapes of elevation trajectories."""

    undefined = 0
    realtime = 1
    drawing = 2
    downUp = 3
    upDown = 4


class AutomationParameter(Enum):
    """Automatable parameters; each member's value is its parameter id."""

    x = "recordingTrajectory_x"
    y = "recordingTrajectory_y"
    z = "recordingTrajectory_z"
    positionSourceLink = "sourceLink"
    elevationSourceLink = "sourceLinkAlt"
    azimuthSpan = "azimuthSpan"
    elevationSpan = "elevationSpan"
    positionPreset = "positionPreset"
    elevationMode = "elevationMode"

    @property
    def id(self) -> str:
        return self.value

    @staticmethod
    def from_id(name: str) -> AutomationParameter:
        """Return the parameter whose id is exactly ``name``."""
        try:
            return AutomationParameter(name)
        except ValueError:
            raise ValueError(f"unknown automation parameter id: {name!r}") from None


def id_to_enum(name: str) -> AutomationParameter:
    """Return the automation parameter whose id is exactly ``name``."""
    return AutomationParameter.from_id(name)


SOURCE_SELECTION_WARNING = "This source link does not allow individual moves."

ELEVATION_MODE_TYPES = ("Normal", "Extended Top", "Extended Top and Bottom")

SOURCE_PLACEMENT_SKETCH = (
    "Left Alternate",
    "Right Alternate",
    "Left Clockwise",
    "Left Counter Clockwise",
    "Right Clockwise",
    "Right Counter Clockwise",
    "Top Clockwise",
    "Top Counter Clockwise",
)

POSITION_SOURCE_LINK_TYPES = (
    "Independent",
    "Circular",
    "Circular Fixed Radius",
    "Circular Fixed Angle",
    "Circular Fully Fixed",
    "Delta Lock",
    "Symmetric X",
    "Symmetric Y",
)

ELEVATION_SOURCE_LINK_TYPES = (
    "Independent",
    "Equal Elevation",
    "Bottom-Top",
    "Top-Bottom",
    "Delta Lock",
)

POSITION_TRAJECTORY_TYPE_TYPES = (
    "Realtime",
    "Drawing",
    "Circle Clockwise",
    "Circle Counter Clockwise",
    "Ellipse Clockwise",
    "Ellipse Counter Clockwise",
    "Spiral Clockwise Out In",
    "Spiral Counter Clockwise Out In",
    "Spiral Clockwise In Out",
    "Spiral Counter Clockwise In Out",
    "Square Clockwise",
    "Square Counter Clockwise",
    "Triangle Clockwise",
    "Triangle Counter Clockwise",
)

ELEVATION_TRAJECTORY_TYPE_TYPES = ("Realtime", "Drawing", "Up Down", "Down Up")

FIXED_POSITION_DATA_HEADERS = (
    "ID",
    *(f"S{source}_{axis}" for source in range(1, 9) for axis in "XYZ"),
    *(f"T{slot}_{axis}" for slot in range(1, 3) for axis in "XYZ"),
)

FIXED_POSITION_DATA_TAG = "Fix_Position_Data"