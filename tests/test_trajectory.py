"""Tests for trajectory history."""

import numpy as np
import pytest

from tiny_bloch import SphericalCoordinates, TrajectoryConfig, TrajectoryHistory, common_state


def test_keeps_most_recent_points():
    history = TrajectoryHistory(max_points=3)
    for i in range(5):
        history.append(SphericalCoordinates(0.1 * i, 0.0))
    assert len(history) == 3
    assert [p.theta for p in history] == pytest.approx([0.2, 0.3, 0.4])


def test_record_matches_state_change_signature():
    history = TrajectoryHistory()
    history.record(common_state("plus"), None)
    history.record(common_state("one"))
    assert history.points == [common_state("plus"), common_state("one")]


def test_recent_and_clear():
    history = TrajectoryHistory(max_points=10)
    history.extend(SphericalCoordinates(t, 0.0) for t in (0.1, 0.2, 0.3))
    assert [p.theta for p in history.recent(2)] == [0.2, 0.3]
    assert history.recent(0) == []
    history.clear()
    assert len(history) == 0


def test_as_cartesian():
    history = TrajectoryHistory()
    assert history.as_cartesian().shape == (0, 3)
    history.extend([common_state("zero"), common_state("plus_i")])
    np.testing.assert_allclose(history.as_cartesian(), [[0, 0, 1], [0, 1, 0]], atol=1e-12)


def test_initial_points_are_bounded():
    pts = [SphericalCoordinates(0.0, float(i)) for i in range(8)]
    history = TrajectoryHistory(max_points=4, points=pts)
    assert history.points == pts[-4:]


def test_from_config():
    history = TrajectoryHistory.from_config(TrajectoryConfig(enabled=True, max_points=7))
    assert history.max_points == 7
    assert len(history) == 0


def test_from_config_disabled_gives_no_history():
    assert TrajectoryHistory.from_config(TrajectoryConfig()) is None
    assert TrajectoryHistory.from_config(TrajectoryConfig(enabled=False, max_points=7)) is None


@pytest.mark.parametrize("bad", [0, -3])
def test_max_points_must_be_positive(bad):
    with pytest.raises(ValueError):
        TrajectoryHistory(max_points=bad)
    with pytest.raises(ValueError):
        TrajectoryConfig(max_points=bad)
