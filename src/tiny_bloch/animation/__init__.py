"""
Animated state transitions.

Usage:
    from tiny_bloch.animation import AnimationDriver, AnimationConfig, ManualFrameScheduler

    sched = ManualFrameScheduler()
    driver = AnimationDriver(initial, AnimationConfig(duration_ms=500),
                             scheduler=sched, on_state_change=print)
    driver.set_target(target)
    sched.run_until_idle()
"""
from .config import AnimationConfig
from .scheduler import (
    FrameScheduler,
    ManualFrameScheduler,
    AsyncioFrameScheduler,
    DEFAULT_FPS,
    FRAME_MS,
)
from .driver import AnimationDriver, is_animating_between

__all__ = [
    'AnimationConfig',
    'FrameScheduler',
    'ManualFrameScheduler',
    'AsyncioFrameScheduler',
    'DEFAULT_FPS',
    'FRAME_MS',
    'AnimationDriver',
    'is_animating_between',
]
