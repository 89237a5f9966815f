"""
Single-qubit state representations.

A pure qubit state can be written three equivalent ways:

- complex amplitudes  |ψ⟩ = α|0⟩ + β|1⟩
- spherical angles    |ψ⟩ = cos(θ/2)|0⟩ + e^{iφ} sin(θ/2)|1⟩
- a Cartesian unit vector on the Bloch sphere

All value types here are immutable. Spherical coordinates are the
canonical form; conversions live in :mod:`tiny_bloch.core.coordinates`.

Example
-------
>>> from tiny_bloch.core.states import QuantumState
>>> plus = QuantumState.from_amplitudes(1, 1).to_spherical()
>>> round(plus.theta, 6), plus.phi
(1.570796, 0.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


# ---------------------------------------------------------------------------
# Complex helpers (values are plain built-in complex numbers)
# ---------------------------------------------------------------------------

def magnitude(z: complex) -> float:
    """Return |z|."""
    return float(abs(z))


def phase(z: complex) -> float:
    """Return arg(z) in (-π, π]."""
    return float(np.angle(z))


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ComplexAmplitude:
    """
    Amplitude pair (α, β) of |ψ⟩ = α|0⟩ + β|1⟩.

    The pair need not be normalized; converters normalize internally.
    """
    alpha: complex
    beta: complex

    def __post_init__(self) -> None:
        object.__setattr__(self, "alpha", complex(self.alpha))
        object.__setattr__(self, "beta", complex(self.beta))

    @property
    def norm(self) -> float:
        return float(np.sqrt(abs(self.alpha) ** 2 + abs(self.beta) ** 2))

    def normalized(self) -> ComplexAmplitude:
        """Return a unit-norm copy. The zero pair is returned unchanged."""
        n = self.norm
        if n == 0:
            return self
        return ComplexAmplitude(self.alpha / n, self.beta / n)

    def as_array(self) -> np.ndarray:
        return np.array([self.alpha, self.beta], dtype=np.complex128)

    @classmethod
    def from_array(cls, vector: Sequence[complex]) -> ComplexAmplitude:
        """Build from a length-2 numpy state vector."""
        vec = np.asarray(vector, dtype=np.complex128).reshape(-1)
        if vec.shape != (2,):
            raise ValueError(f"Expected a 2-element state vector, got shape {vec.shape}")
        return cls(complex(vec[0]), complex(vec[1]))


@dataclass(frozen=True)
class SphericalCoordinates:
    """Polar angle theta ∈ [0, π] from +Z, azimuth phi ∈ [0, 2π) from +X."""
    theta: float
    phi: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.theta, self.phi)


@dataclass(frozen=True)
class CartesianCoordinates:
    """Point on (or, for arbitrary input, near) the Bloch sphere."""
    x: float
    y: float
    z: float

    @property
    def norm(self) -> float:
        return float(np.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2))

    def dot(self, other: CartesianCoordinates) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class QuantumState:
    """
    A target state given in either spherical or amplitude form.

    Exactly one of ``coords`` and ``amplitudes`` is set. Use the
    classmethod constructors rather than filling the fields directly.
    """
    coords: Optional[SphericalCoordinates] = None
    amplitudes: Optional[ComplexAmplitude] = None

    def __post_init__(self) -> None:
        if (self.coords is None) == (self.amplitudes is None):
            raise ValueError("QuantumState needs exactly one of coords or amplitudes")

    @classmethod
    def spherical(cls, theta: float, phi: float) -> QuantumState:
        return cls(coords=SphericalCoordinates(float(theta), float(phi)))

    @classmethod
    def from_amplitudes(cls, alpha: complex, beta: complex) -> QuantumState:
        return cls(amplitudes=ComplexAmplitude(alpha, beta))

    @property
    def kind(self) -> str:
        return "spherical" if self.coords is not None else "amplitudes"

    def to_spherical(self) -> SphericalCoordinates:
        if self.coords is not None:
            return self.coords
        from .coordinates import amplitudes_to_spherical
        return amplitudes_to_spherical(self.amplitudes)


# ---------------------------------------------------------------------------
# Named states: the six cardinal points of the sphere
# ---------------------------------------------------------------------------

COMMON_STATES: dict[str, SphericalCoordinates] = {
    "zero": SphericalCoordinates(0.0, 0.0),                 # |0⟩, north pole
    "one": SphericalCoordinates(np.pi, 0.0),                # |1⟩, south pole
    "plus": SphericalCoordinates(np.pi / 2, 0.0),           # |+⟩, +X
    "minus": SphericalCoordinates(np.pi / 2, np.pi),        # |−⟩, −X
    "plus_i": SphericalCoordinates(np.pi / 2, np.pi / 2),   # |+i⟩, +Y
    "minus_i": SphericalCoordinates(np.pi / 2, 3 * np.pi / 2),  # |−i⟩, −Y
}


def common_state(name: str) -> SphericalCoordinates:
    """Look up a named state such as ``'plus'`` or ``'minus_i'``."""
    key = name.lower().replace("-", "_")
    try:
        return COMMON_STATES[key]
    except KeyError:
        raise KeyError(
            f"Unknown state '{name}'. Available: {', '.join(COMMON_STATES)}"
        ) from None
