"""
Conversions between amplitude, spherical and Cartesian forms.

Every function is pure and total: degenerate inputs (the zero amplitude
pair, the zero vector) map to the north pole instead of raising.

Bloch sphere convention:
    - Z axis: |0⟩ at z=+1, |1⟩ at z=-1
    - X axis: |+⟩ at x=+1, |−⟩ at x=-1
    - Y axis: |+i⟩ at y=+1, |−i⟩ at y=-1
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .states import (
    CartesianCoordinates,
    ComplexAmplitude,
    QuantumState,
    SphericalCoordinates,
    magnitude,
    phase,
)

TWO_PI = 2 * np.pi

StateLike = Union[QuantumState, SphericalCoordinates, ComplexAmplitude, CartesianCoordinates]


def wrap_phase(phi: float) -> float:
    """Bring an angle into [0, 2π) by whole turns."""
    while phi < 0:
        phi += TWO_PI
    while phi >= TWO_PI:
        phi -= TWO_PI
    return phi


def amplitudes_to_spherical(amp: ComplexAmplitude) -> SphericalCoordinates:
    """
    Map α|0⟩ + β|1⟩ to Bloch angles.

    θ = 2·arccos(|α|/‖ψ‖) and φ = arg β − arg α. The input need not be
    normalized; the zero pair maps to |0⟩.
    """
    alpha_mag = magnitude(amp.alpha)
    beta_mag = magnitude(amp.beta)
    norm = np.sqrt(alpha_mag ** 2 + beta_mag ** 2)
    if norm == 0:
        return SphericalCoordinates(0.0, 0.0)

    # clip guards arccos against |α|/norm drifting past 1
    theta = 2 * np.arccos(np.clip(alpha_mag / norm, 0.0, 1.0))
    phi = wrap_phase(phase(amp.beta) - phase(amp.alpha))
    return SphericalCoordinates(float(theta), float(phi))


def spherical_to_amplitudes(coords: SphericalCoordinates) -> ComplexAmplitude:
    """
    Amplitudes for (θ, φ) with the global phase fixed so that α is real.

    This is one representative of the state; any e^{iγ} multiple of it is
    physically the same.
    """
    half = coords.theta / 2
    s = np.sin(half)
    return ComplexAmplitude(
        complex(np.cos(half), 0.0),
        complex(s * np.cos(coords.phi), s * np.sin(coords.phi)),
    )


def spherical_to_cartesian(coords: SphericalCoordinates) -> CartesianCoordinates:
    theta, phi = coords.theta, coords.phi
    return CartesianCoordinates(
        float(np.sin(theta) * np.cos(phi)),
        float(np.sin(theta) * np.sin(phi)),
        float(np.cos(theta)),
    )


def cartesian_to_spherical(cart: CartesianCoordinates) -> SphericalCoordinates:
    """
    Angles of the direction of ``cart``; its length is ignored.

    At the poles φ is undefined and whatever atan2 yields is returned.
    """
    r = cart.norm
    if r == 0:
        return SphericalCoordinates(0.0, 0.0)

    theta = np.arccos(np.clip(cart.z / r, -1.0, 1.0))
    phi = np.arctan2(cart.y, cart.x)
    # atan2 is in [-π, π], one turn is enough
    if phi < 0:
        phi += TWO_PI
    return SphericalCoordinates(float(theta), float(phi))


def amplitudes_to_cartesian(amp: ComplexAmplitude) -> CartesianCoordinates:
    return spherical_to_cartesian(amplitudes_to_spherical(amp))


def to_spherical(state: StateLike) -> SphericalCoordinates:
    """Normalize any supported state object to spherical coordinates."""
    if isinstance(state, SphericalCoordinates):
        return state
    if isinstance(state, QuantumState):
        return state.to_spherical()
    if isinstance(state, ComplexAmplitude):
        return amplitudes_to_spherical(state)
    if isinstance(state, CartesianCoordinates):
        return cartesian_to_spherical(state)
    raise TypeError(
        f"Cannot interpret {type(state).__name__} as a qubit state. "
        "Use QuantumState, SphericalCoordinates, ComplexAmplitude or CartesianCoordinates."
    )
