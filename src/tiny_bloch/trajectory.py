"""
Trajectory history.

The animation driver never stores where a state has been. Callers that
want to draw a trail keep their own bounded history and feed it from the
driver's ``on_state_change`` callback:

    history = TrajectoryHistory(max_points=200)
    driver = AnimationDriver(initial, on_state_change=history.record)
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import numpy as np

from .core.coordinates import spherical_to_cartesian
from .core.states import CartesianCoordinates, SphericalCoordinates


@dataclass(frozen=True)
class TrajectoryConfig:
    """Whether to draw a trail and how many recent points to keep."""
    enabled: bool = False
    max_points: int = 100

    def __post_init__(self) -> None:
        if self.max_points < 1:
            raise ValueError(f"max_points must be >= 1, got {self.max_points}")


class TrajectoryHistory:
    """Most-recent-N spherical states, oldest first."""

    def __init__(self, max_points: int = 100,
                 points: Optional[Iterable[SphericalCoordinates]] = None):
        if max_points < 1:
            raise ValueError(f"max_points must be >= 1, got {max_points}")
        self.max_points = max_points
        self._points: deque[SphericalCoordinates] = deque(points or (), maxlen=max_points)

    @classmethod
    def from_config(cls, config: TrajectoryConfig) -> Optional[TrajectoryHistory]:
        """Empty history sized by ``config``, or None if trails are disabled."""
        if not config.enabled:
            return None
        return cls(max_points=config.max_points)

    def append(self, state: SphericalCoordinates) -> None:
        self._points.append(state)

    def extend(self, states: Iterable[SphericalCoordinates]) -> None:
        self._points.extend(states)

    def record(self, state: SphericalCoordinates,
               cartesian: Optional[CartesianCoordinates] = None) -> None:
        """Same signature as ``on_state_change``; the Cartesian form is unused."""
        self.append(state)

    def clear(self) -> None:
        self._points.clear()

    @property
    def points(self) -> List[SphericalCoordinates]:
        return list(self._points)

    def recent(self, n: int) -> List[SphericalCoordinates]:
        if n <= 0:
            return []
        return list(self._points)[-n:]

    def as_cartesian(self) -> np.ndarray:
        """Points as an (N, 3) array, ready for a line plot."""
        if not self._points:
            return np.zeros((0, 3))
        return np.array([spherical_to_cartesian(p).as_array() for p in self._points])

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[SphericalCoordinates]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"TrajectoryHistory({len(self)}/{self.max_points} points)"
