"""
tiny-bloch: single-qubit states on the Bloch sphere.

Features:
- Conversions between amplitudes, spherical angles and Cartesian vectors
- Great-circle (SLERP) interpolation between states
- Frame-driven animation driver with easing and superseding targets
- ASCII Bloch sphere rendering

Quick Start:
    from tiny_bloch import QuantumState, spherical_to_cartesian

    coords = QuantumState.from_amplitudes(1, 1j).to_spherical()
    spherical_to_cartesian(coords)      # |+i⟩, the +Y axis

Animation:
    from tiny_bloch import AnimationDriver, ManualFrameScheduler, common_state

    sched = ManualFrameScheduler()
    driver = AnimationDriver(common_state('zero'), scheduler=sched,
                             on_state_change=lambda s, c: print(s))
    driver.set_target(common_state('plus'))
    sched.run_until_idle()
"""
__version__ = "1.0.0"

# Core components
from .core import (
    ComplexAmplitude,
    SphericalCoordinates,
    CartesianCoordinates,
    QuantumState,
    COMMON_STATES,
    common_state,
    amplitudes_to_spherical,
    spherical_to_amplitudes,
    spherical_to_cartesian,
    cartesian_to_spherical,
    amplitudes_to_cartesian,
    to_spherical,
    slerp,
    slerp_path,
    angle_between,
    EasingKind,
    EASING_FUNCTIONS,
    get_easing,
)

# Animation
from .animation import (
    AnimationConfig,
    AnimationDriver,
    FrameScheduler,
    ManualFrameScheduler,
    AsyncioFrameScheduler,
    is_animating_between,
)

from .trajectory import TrajectoryConfig, TrajectoryHistory

# Visualization
from .visualization import BlochSphere, show_bloch, describe_state

__all__ = [
    # Core
    'ComplexAmplitude',
    'SphericalCoordinates',
    'CartesianCoordinates',
    'QuantumState',
    'COMMON_STATES',
    'common_state',
    'amplitudes_to_spherical',
    'spherical_to_amplitudes',
    'spherical_to_cartesian',
    'cartesian_to_spherical',
    'amplitudes_to_cartesian',
    'to_spherical',
    'slerp',
    'slerp_path',
    'angle_between',
    'EasingKind',
    'EASING_FUNCTIONS',
    'get_easing',
    # Animation
    'AnimationConfig',
    'AnimationDriver',
    'FrameScheduler',
    'ManualFrameScheduler',
    'AsyncioFrameScheduler',
    'is_animating_between',
    # Trajectory
    'TrajectoryConfig',
    'TrajectoryHistory',
    # Visualization
    'BlochSphere',
    'show_bloch',
    'describe_state',
]
