"""State representation and interpolation."""
from .states import (
    ComplexAmplitude,
    SphericalCoordinates,
    CartesianCoordinates,
    QuantumState,
    COMMON_STATES,
    common_state,
    magnitude,
    phase,
)
from .coordinates import (
    amplitudes_to_spherical,
    spherical_to_amplitudes,
    spherical_to_cartesian,
    cartesian_to_spherical,
    amplitudes_to_cartesian,
    to_spherical,
    wrap_phase,
)
from .slerp import slerp, slerp_path, angle_between
from .easing import EasingKind, EASING_FUNCTIONS, get_easing, easing_kind

__all__ = [
    'ComplexAmplitude',
    'SphericalCoordinates',
    'CartesianCoordinates',
    'QuantumState',
    'COMMON_STATES',
    'common_state',
    'magnitude',
    'phase',
    'amplitudes_to_spherical',
    'spherical_to_amplitudes',
    'spherical_to_cartesian',
    'cartesian_to_spherical',
    'amplitudes_to_cartesian',
    'to_spherical',
    'wrap_phase',
    'slerp',
    'slerp_path',
    'angle_between',
    'EasingKind',
    'EASING_FUNCTIONS',
    'get_easing',
    'easing_kind',
]
