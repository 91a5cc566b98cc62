"""Trajectories, source snapshots and typed angles for sound spatialization control."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "snapshot",
    "strong_types",
    "trajectory",
    "trajectory_manager",
    "utilities",
]