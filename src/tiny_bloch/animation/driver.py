"""
Animation driver for Bloch sphere state transitions.

The driver owns the one piece of mutable state in the library: the state
currently shown, the state the running transition started from, and the
transition's timing. It is a two-state machine:

    Idle(state)
    Animating(start, target, start_time, elapsed)

Setting a new target while animating supersedes the running transition:
its pending frame is cancelled, it never completes or fires its end
event, and the new transition starts from wherever the old one had got to.

Example
-------
>>> from tiny_bloch import AnimationDriver, ManualFrameScheduler, common_state
>>> sched = ManualFrameScheduler()
>>> driver = AnimationDriver(common_state('zero'), scheduler=sched)
>>> driver.set_target(common_state('one'))
True
>>> frames = sched.run_until_idle()
>>> driver.current == common_state('one')
True
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..core.coordinates import StateLike, spherical_to_cartesian, to_spherical
from ..core.easing import get_easing
from ..core.slerp import slerp
from ..core.states import CartesianCoordinates, SphericalCoordinates
from .config import AnimationConfig
from .scheduler import FrameScheduler, ManualFrameScheduler

logger = logging.getLogger(__name__)

EventCallback = Callable[[], None]
StateChangeCallback = Callable[[SphericalCoordinates, CartesianCoordinates], None]


class AnimationDriver:
    """
    Animate the displayed state towards the latest target.

    Parameters
    ----------
    initial : state
        Starting state, shown immediately without animation.
    config : AnimationConfig, optional
        Duration, easing and on/off switch. Defaults to 300 ms easeInOut.
    scheduler : FrameScheduler, optional
        Frame source. Defaults to a :class:`ManualFrameScheduler`.
    on_animation_start, on_animation_end : callable, optional
        Called with no arguments when a transition starts or completes.
    on_state_change : callable, optional
        Called as ``on_state_change(spherical, cartesian)`` once for every
        change of the displayed state, including the initial one.
    """

    def __init__(self, initial: StateLike,
                 config: Optional[AnimationConfig] = None,
                 scheduler: Optional[FrameScheduler] = None,
                 on_animation_start: Optional[EventCallback] = None,
                 on_animation_end: Optional[EventCallback] = None,
                 on_state_change: Optional[StateChangeCallback] = None):
        self._config = config if config is not None else AnimationConfig()
        self._easing = get_easing(self._config.easing)
        self.scheduler = scheduler if scheduler is not None else ManualFrameScheduler()
        self.on_animation_start = on_animation_start
        self.on_animation_end = on_animation_end
        self.on_state_change = on_state_change

        state = to_spherical(initial)
        self._target = state
        self._start = state
        self._current = state
        self._start_time: Optional[float] = None
        self._progress = 1.0
        self._frame = None
        self._last_notified: Optional[SphericalCoordinates] = None
        self._closed = False
        # bumped whenever the running transition is replaced or stopped
        self._generation = 0

        self._show(state)

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def current(self) -> SphericalCoordinates:
        """State displayed on the most recent frame."""
        return self._current

    @property
    def cartesian(self) -> CartesianCoordinates:
        return spherical_to_cartesian(self._current)

    @property
    def target(self) -> SphericalCoordinates:
        return self._target

    @property
    def start(self) -> SphericalCoordinates:
        """Where the current (or last) transition began."""
        return self._start

    @property
    def progress(self) -> float:
        """Un-eased progress of the current transition, 1.0 when idle."""
        return self._progress

    @property
    def is_animating(self) -> bool:
        return self._frame is not None

    @property
    def config(self) -> AnimationConfig:
        return self._config

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def set_target(self, state: StateLike) -> bool:
        """
        Move towards a new state.

        Returns False when ``state`` equals the current target, in which
        case nothing happens.
        """
        if self._closed:
            raise RuntimeError("AnimationDriver is closed")

        target = to_spherical(state)
        if target == self._target:
            return False
        self._target = target
        self._generation += 1

        if not self._config.enabled:
            self._cancel_frame()
            self._snap(target)
            logger.debug("Snapped to θ=%.4f φ=%.4f (animation disabled)",
                         target.theta, target.phi)
            return True

        if self._frame is not None:
            logger.debug("Superseding transition at progress %.3f", self._progress)
        self._cancel_frame()

        self._start = self._current
        self._start_time = None
        self._progress = 0.0
        logger.debug("Transition θ=%.4f φ=%.4f -> θ=%.4f φ=%.4f over %.0f ms",
                     self._start.theta, self._start.phi, target.theta, target.phi,
                     self._config.duration_ms)

        if self.on_animation_start is not None:
            self.on_animation_start()
        self._frame = self.scheduler.request_frame(self._tick)
        return True

    def update_config(self, config: AnimationConfig) -> None:
        """
        Swap in a new configuration.

        A running transition carries on with the new duration and easing;
        if animation is now disabled it jumps to its target instead.
        """
        self._config = config
        self._easing = get_easing(config.easing)
        if not config.enabled and self._frame is not None:
            self.cancel()

    def cancel(self) -> bool:
        """Stop a running transition at its target, without an end event."""
        if self._frame is None:
            return False
        self._cancel_frame()
        self._snap(self._target)
        logger.debug("Transition cancelled")
        return True

    def close(self) -> None:
        """Stop all frames and drop callbacks. The driver cannot be reused."""
        self._cancel_frame()
        self._generation += 1
        self.on_animation_start = None
        self.on_animation_end = None
        self.on_state_change = None
        self._closed = True

    def __enter__(self) -> AnimationDriver:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _tick(self, timestamp: float) -> None:
        self._frame = None
        if self._start_time is None:
            self._start_time = timestamp
        elapsed = timestamp - self._start_time

        duration = self._config.duration_ms
        if duration <= 0:
            progress = 1.0
        else:
            progress = min(max(elapsed / duration, 0.0), 1.0)
        self._progress = progress

        # on_state_change may retarget, cancel or close the driver; if so
        # this transition is over and must not schedule or finish
        generation = self._generation
        if progress < 1.0:
            self._show(slerp(self._start, self._target, self._easing(progress)))
            if self._generation != generation:
                return
            self._frame = self.scheduler.request_frame(self._tick)
            return

        self._show(self._target)
        if self._generation != generation:
            return
        logger.debug("Transition finished after %.1f ms", elapsed)
        if self.on_animation_end is not None:
            self.on_animation_end()

    def _snap(self, state: SphericalCoordinates) -> None:
        self._generation += 1
        self._start = state
        self._start_time = None
        self._progress = 1.0
        self._show(state)

    def _show(self, state: SphericalCoordinates) -> None:
        self._current = state
        if state == self._last_notified:
            return
        self._last_notified = state
        if self.on_state_change is not None:
            self.on_state_change(state, spherical_to_cartesian(state))

    def _cancel_frame(self) -> None:
        if self._frame is not None:
            self.scheduler.cancel_frame(self._frame)
            self._frame = None

    def __repr__(self) -> str:
        status = "animating" if self.is_animating else "idle"
        return (f"AnimationDriver({status}, θ={self._current.theta:.3f}, "
                f"φ={self._current.phi:.3f})")


def is_animating_between(target: SphericalCoordinates, current: SphericalCoordinates,
                         threshold: float = 1e-3) -> bool:
    """True when ``current`` is still visibly away from ``target``."""
    return (abs(target.theta - current.theta) > threshold
            or abs(target.phi - current.phi) > threshold)
