"""Tests for frame schedulers."""

import asyncio

import pytest

from tiny_bloch import AsyncioFrameScheduler, ManualFrameScheduler


@pytest.fixture
def sched():
    return ManualFrameScheduler()


def test_callbacks_run_in_request_order(sched):
    calls = []
    sched.request_frame(lambda ts: calls.append(("a", ts)))
    sched.request_frame(lambda ts: calls.append(("b", ts)))
    assert sched.pending == 2
    assert sched.step(10.0) == 2
    assert calls == [("a", 10.0), ("b", 10.0)]
    assert sched.pending == 0
    assert sched.now == 10.0


def test_cancelled_callback_never_runs(sched):
    calls = []
    handle = sched.request_frame(lambda ts: calls.append(ts))
    sched.cancel_frame(handle)
    sched.step()
    assert calls == []


def test_cancel_unknown_handle_is_ignored(sched):
    sched.cancel_frame(12345)


def test_cancel_from_inside_same_frame(sched):
    """A callback can cancel one that is due later in the same frame."""
    calls = []
    handles = {}
    handles["first"] = sched.request_frame(lambda ts: sched.cancel_frame(handles["second"]))
    handles["second"] = sched.request_frame(lambda ts: calls.append(ts))
    sched.step()
    assert calls == []


def test_requests_during_frame_wait_for_next(sched):
    calls = []

    def again(ts):
        calls.append(ts)
        if len(calls) < 3:
            sched.request_frame(again)

    sched.request_frame(again)
    assert sched.step(5.0) == 1
    assert calls == [5.0]
    assert sched.run_until_idle(frame_ms=5.0) == 2
    assert calls == [5.0, 10.0, 15.0]


def test_run_until_idle_gives_up(sched):
    def forever(ts):
        sched.request_frame(forever)

    sched.request_frame(forever)
    with pytest.raises(RuntimeError):
        sched.run_until_idle(max_frames=50)


def test_start_time_and_frame_count():
    sched = ManualFrameScheduler(start_ms=1000.0)
    sched.step(16.0)
    sched.advance(4.0)
    assert sched.now == 1020.0
    assert sched.frames == 2


def test_asyncio_scheduler_fires_and_cancels():
    async def scenario():
        sched = AsyncioFrameScheduler(fps=500)
        fired = []
        keep = sched.request_frame(fired.append)
        drop = sched.request_frame(lambda ts: fired.append("dropped"))
        sched.cancel_frame(drop)
        await asyncio.sleep(0.05)
        return keep, fired

    _, fired = asyncio.run(scenario())
    assert len(fired) == 1
    assert isinstance(fired[0], float)


def test_asyncio_scheduler_rejects_bad_fps():
    with pytest.raises(ValueError):
        AsyncioFrameScheduler(fps=0)
