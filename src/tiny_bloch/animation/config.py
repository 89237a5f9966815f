"""Animation configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import numpy as np

from ..core.easing import EasingKind, easing_kind


@dataclass(frozen=True)
class AnimationConfig:
    """
    How state transitions are animated.

    Parameters
    ----------
    enabled : bool
        When False, new targets are applied immediately with no frames.
    duration_ms : float
        Length of one transition in milliseconds. Zero completes on the
        first frame.
    easing : EasingKind or str
        Progress curve, e.g. ``'easeInOut'`` or ``'linear'``.
    """
    enabled: bool = True
    duration_ms: float = 300.0
    easing: Union[EasingKind, str] = EasingKind.EASE_IN_OUT

    def __post_init__(self) -> None:
        duration = float(self.duration_ms)
        if not np.isfinite(duration) or duration < 0:
            raise ValueError(f"duration_ms must be a finite value >= 0, got {self.duration_ms}")
        object.__setattr__(self, "duration_ms", duration)
        object.__setattr__(self, "enabled", bool(self.enabled))
        object.__setattr__(self, "easing", easing_kind(self.easing))

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]] = None) -> AnimationConfig:
        """
        Resolve a mapping of optional settings against the defaults.

        Accepts ``enabled``, ``duration`` (or ``duration_ms``) and ``easing``.
        """
        opts = dict(options or {})
        kwargs: dict[str, Any] = {}
        if "enabled" in opts:
            kwargs["enabled"] = opts.pop("enabled")
        if "duration" in opts:
            kwargs["duration_ms"] = opts.pop("duration")
        if "duration_ms" in opts:
            kwargs["duration_ms"] = opts.pop("duration_ms")
        if "easing" in opts:
            kwargs["easing"] = opts.pop("easing")
        if opts:
            raise ValueError(f"Unknown animation options: {', '.join(sorted(opts))}")
        return cls(**kwargs)
