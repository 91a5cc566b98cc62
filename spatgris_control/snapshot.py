"""Saved positions of the primary and secondary sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from .strong_types import Point, Radians, SourceIndex

__all__ = ["SourceSnapshot", "SourcesSnapshots"]


@dataclass(frozen=True)
class SourceSnapshot:
    """Position of one source; ``z`` is the height in cube mode and the elevation in dome mode."""

    position: Point = field(default_factory=Point)
    z: Radians = field(default_factory=Radians)

    @staticmethod
    def from_source(source) -> SourceSnapshot:
        """Capture the ``position`` and ``elevation`` of a source."""
        return SourceSnapshot(position=source.position, z=source.elevation)


_Index = Union[SourceIndex, int]


@dataclass
class SourcesSnapshots:
    """Snapshots of all sources; index 0 is the primary source."""

    primary: SourceSnapshot = field(default_factory=SourceSnapshot)
    secondaries: list[SourceSnapshot] = field(default_factory=list)

    def _position(self, index: _Index) -> int:
        if isinstance(index, SourceIndex):
            position = index.value
        elif isinstance(index, int) and not isinstance(index, bool):
            position = index
        else:
            raise TypeError(f"snapshot index must be a SourceIndex or int, got {type(index).__name__}")
        if not 0 <= position < len(self):
            raise IndexError(f"snapshot index {position} out of range for {len(self)} sources")
        return position

    def __getitem__(self, index: _Index) -> SourceSnapshot:
        position = self._position(index)
        if position == 0:
            return self.primary
        return self.secondaries[position - 1]

    def __setitem__(self, index: _Index, snapshot: SourceSnapshot) -> None:
        position = self._position(index)
        if position == 0:
            self.primary = snapshot
        else:
            self.secondaries[position - 1] = snapshot

    def __len__(self) -> int:
        return len(self.secondaries) + 1

    def __iter__(self) -> Iterator[SourceSnapshot]:
        yield self.primary
        yield from self.secondaries