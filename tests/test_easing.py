"""Tests for easing curves."""

import numpy as np
import pytest

from tiny_bloch import EASING_FUNCTIONS, EasingKind, get_easing
from tiny_bloch.core.easing import ease_in, ease_in_out, ease_out, easing_kind, linear


@pytest.mark.parametrize("kind", list(EasingKind))
def test_endpoints_fixed(kind):
    fn = EASING_FUNCTIONS[kind]
    assert fn(0.0) == pytest.approx(0.0)
    assert fn(1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("kind", list(EasingKind))
def test_monotonic_and_bounded(kind):
    fn = EASING_FUNCTIONS[kind]
    values = [fn(t) for t in np.linspace(0, 1, 101)]
    assert all(0.0 <= v <= 1.0 + 1e-12 for v in values)
    assert all(b >= a for a, b in zip(values, values[1:]))


def test_formulas():
    assert linear(0.3) == 0.3
    assert ease_in(0.5) == pytest.approx(0.25)
    assert ease_out(0.5) == pytest.approx(0.75)
    assert ease_in_out(0.25) == pytest.approx(0.125)
    assert ease_in_out(0.5) == pytest.approx(0.5)
    assert ease_in_out(0.75) == pytest.approx(0.875)


def test_ease_in_out_is_symmetric():
    for t in np.linspace(0, 1, 11):
        assert ease_in_out(t) + ease_in_out(1 - t) == pytest.approx(1.0)


@pytest.mark.parametrize("name,kind", [
    ("linear", EasingKind.LINEAR),
    ("easeIn", EasingKind.EASE_IN),
    ("easeOut", EasingKind.EASE_OUT),
    ("easeInOut", EasingKind.EASE_IN_OUT),
    ("ease_in_out", EasingKind.EASE_IN_OUT),
    ("ease-out", EasingKind.EASE_OUT),
    (EasingKind.EASE_IN, EasingKind.EASE_IN),
])
def test_lookup_by_name(name, kind):
    assert easing_kind(name) is kind
    assert get_easing(name) is EASING_FUNCTIONS[kind]


def test_unknown_easing():
    with pytest.raises(ValueError, match="Unknown easing"):
        get_easing("bounce")
