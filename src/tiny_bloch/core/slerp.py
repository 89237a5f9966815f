"""
Great-circle interpolation on the Bloch sphere.

SLERP moves at constant angular speed along the minor arc between two
states, so intermediate frames stay on the sphere surface instead of
cutting through it as a straight-line blend of vectors would.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .coordinates import cartesian_to_spherical, spherical_to_cartesian
from .states import CartesianCoordinates, SphericalCoordinates

# Below this angle (radians) sin(omega) is too small to divide by.
SLERP_EPSILON = 1e-4


def angle_between(start: SphericalCoordinates, end: SphericalCoordinates) -> float:
    """Central angle between two states, in [0, π]."""
    a = spherical_to_cartesian(start).as_array()
    b = spherical_to_cartesian(end).as_array()
    return float(np.arccos(np.clip(np.dot(a, b), -1.0, 1.0)))


def slerp(start: SphericalCoordinates, end: SphericalCoordinates, t: float) -> SphericalCoordinates:
    """
    Interpolate from ``start`` to ``end`` along the great circle.

    Parameters
    ----------
    start, end : SphericalCoordinates
        Endpoints of the arc.
    t : float
        Fraction of the way along the arc, 0 gives ``start`` and 1 gives ``end``.

    Notes
    -----
    For nearly coincident endpoints the angles are blended linearly
    instead. Exactly antipodal endpoints have no unique great circle and
    are not special-cased.
    """
    a_vec = spherical_to_cartesian(start).as_array()
    b_vec = spherical_to_cartesian(end).as_array()

    dot = np.clip(np.dot(a_vec, b_vec), -1.0, 1.0)
    omega = np.arccos(dot)

    if abs(omega) < SLERP_EPSILON:
        return SphericalCoordinates(
            start.theta + t * (end.theta - start.theta),
            start.phi + t * (end.phi - start.phi),
        )

    sin_omega = np.sin(omega)
    wa = np.sin((1 - t) * omega) / sin_omega
    wb = np.sin(t * omega) / sin_omega

    x, y, z = wa * a_vec + wb * b_vec
    return cartesian_to_spherical(CartesianCoordinates(float(x), float(y), float(z)))


def slerp_path(start: SphericalCoordinates, end: SphericalCoordinates,
               steps: int = 32) -> List[SphericalCoordinates]:
    """Sample ``steps`` evenly spaced points on the arc, both ends included."""
    if steps < 2:
        raise ValueError(f"steps must be >= 2, got {steps}")
    return [slerp(start, end, float(t)) for t in np.linspace(0.0, 1.0, steps)]
