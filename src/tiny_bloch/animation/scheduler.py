"""
Frame schedulers.

An animation advances one step per display refresh. The driver only asks
for "call me on the next frame" and "never mind", so any event loop can
drive it:

- ManualFrameScheduler: a virtual clock stepped by hand (tests, offline
  frame export, the CLI)
- AsyncioFrameScheduler: real frames on a running asyncio loop

Callbacks receive the frame timestamp in milliseconds.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

FrameCallback = Callable[[float], None]

DEFAULT_FPS = 60.0
FRAME_MS = 1000.0 / DEFAULT_FPS


class FrameScheduler(ABC):
    """Requests and cancels single-shot frame callbacks."""

    @abstractmethod
    def request_frame(self, callback: FrameCallback) -> Any:
        """Run ``callback(timestamp_ms)`` on the next frame. Returns a handle."""

    @abstractmethod
    def cancel_frame(self, handle: Any) -> None:
        """Drop a pending callback. Unknown or spent handles are ignored."""


class ManualFrameScheduler(FrameScheduler):
    """
    Deterministic scheduler with a virtual clock.

    Callbacks requested before a frame run during it, in request order;
    callbacks requested while a frame is running wait for the next one.

    Example
    -------
    >>> sched = ManualFrameScheduler()
    >>> sched.request_frame(print)
    1
    >>> sched.step(16.0)
    16.0
    1
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)
        self._next_handle = 0
        self._queue: Dict[int, FrameCallback] = {}
        self._running: Dict[int, FrameCallback] = {}
        self.frames = 0

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request_frame(self, callback: FrameCallback) -> int:
        self._next_handle += 1
        self._queue[self._next_handle] = callback
        return self._next_handle

    def cancel_frame(self, handle: int) -> None:
        self._queue.pop(handle, None)
        self._running.pop(handle, None)

    def step(self, ms: float = FRAME_MS) -> int:
        """Advance the clock by ``ms`` and run one frame. Returns callbacks run."""
        self._now += ms
        self.frames += 1
        self._running, self._queue = self._queue, {}
        ran = 0
        while self._running:
            handle = next(iter(self._running))
            callback = self._running.pop(handle)
            callback(self._now)
            ran += 1
        return ran

    # a single frame of arbitrary length
    advance = step

    def run_until_idle(self, frame_ms: float = FRAME_MS, max_frames: int = 100_000) -> int:
        """Step frames until nothing is pending. Returns the number of frames."""
        count = 0
        while self._queue:
            if count >= max_frames:
                raise RuntimeError(f"Scheduler still busy after {max_frames} frames")
            self.step(frame_ms)
            count += 1
        return count


class AsyncioFrameScheduler(FrameScheduler):
    """
    Frames on an asyncio event loop at a fixed rate.

    Must be used from inside a running loop unless ``loop`` is given.
    """

    def __init__(self, fps: float = DEFAULT_FPS,
                 loop: Optional[asyncio.AbstractEventLoop] = None):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = float(fps)
        self.frame_interval = 1.0 / self.fps
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        loop = self._get_loop()
        return loop.call_later(self.frame_interval,
                               lambda: callback(loop.time() * 1000.0))

    def cancel_frame(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
