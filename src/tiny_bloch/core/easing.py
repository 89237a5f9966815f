"""
Easing curves for state transitions.

Each curve maps progress in [0, 1] to eased progress in [0, 1] with
f(0) = 0 and f(1) = 1.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Union

EasingFn = Callable[[float], float]


class EasingKind(str, Enum):
    LINEAR = "linear"
    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"
    EASE_IN_OUT = "easeInOut"


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


EASING_FUNCTIONS: Dict[EasingKind, EasingFn] = {
    EasingKind.LINEAR: linear,
    EasingKind.EASE_IN: ease_in,
    EasingKind.EASE_OUT: ease_out,
    EasingKind.EASE_IN_OUT: ease_in_out,
}

# snake_case spellings, e.g. from the command line
_ALIASES = {
    "linear": EasingKind.LINEAR,
    "ease_in": EasingKind.EASE_IN,
    "ease_out": EasingKind.EASE_OUT,
    "ease_in_out": EasingKind.EASE_IN_OUT,
}


def easing_kind(name: Union[EasingKind, str]) -> EasingKind:
    """Resolve an easing name (``'easeInOut'`` or ``'ease_in_out'``) to its kind."""
    if isinstance(name, EasingKind):
        return name
    try:
        return EasingKind(name)
    except ValueError:
        pass
    key = name.lower().replace("-", "_")
    if key in _ALIASES:
        return _ALIASES[key]
    valid = ", ".join(k.value for k in EasingKind)
    raise ValueError(f"Unknown easing '{name}'. Use one of: {valid}")


def get_easing(kind: Union[EasingKind, str]) -> EasingFn:
    """Return the easing function for ``kind``."""
    return EASING_FUNCTIONS[easing_kind(kind)]
