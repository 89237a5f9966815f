"""
Text rendering of a qubit state on the Bloch sphere.

Features:
- One-line state summary (angles, vector, amplitudes)
- ASCII top and side projections of the sphere with the state marked
- Trails of earlier animation frames
- Animation frame lines for terminal playback
"""
import numpy as np
from typing import Iterable, List, Optional, Tuple

from .core.coordinates import StateLike, spherical_to_amplitudes, spherical_to_cartesian, to_spherical
from .core.states import CartesianCoordinates, SphericalCoordinates


def _fmt_complex(z: complex) -> str:
    if abs(z.imag) < 5e-4:
        return f"{z.real:.3f}"
    sign = '+' if z.imag >= 0 else '-'
    return f"{z.real:.3f}{sign}{abs(z.imag):.3f}i"


class BlochSphere:
    """
    ASCII Bloch sphere for single-qubit states.

    The sphere is drawn as two projections: the top view looks down the
    +z axis onto the x,y plane and the side view looks along +y onto the
    x,z plane. A marker shows whether the state is toward the viewer,
    away from it, or close to the projected plane.
    """

    GRID_SIZE = 11
    PANEL_GAP = 6
    DEPTH_THRESHOLD = 0.3

    TOWARD = '●'
    AWAY = '○'
    IN_PLANE = '◐'
    TRAIL = '∘'

    @staticmethod
    def describe(state: StateLike) -> str:
        """One-line summary of a state in all three forms."""
        coords = to_spherical(state)
        cart = spherical_to_cartesian(coords)
        amp = spherical_to_amplitudes(coords)
        return (f"θ={coords.theta:.3f} φ={coords.phi:.3f} | "
                f"x={cart.x:.3f} y={cart.y:.3f} z={cart.z:.3f} | "
                f"α={_fmt_complex(amp.alpha)} β={_fmt_complex(amp.beta)}")

    @classmethod
    def _cell(cls, h: float, v: float) -> Tuple[int, int]:
        """Grid (row, column) of a point in a panel's plane, up is +v."""
        center = cls.GRID_SIZE // 2
        radius = center * 0.9
        col = int(np.clip(round(center + radius * h), 0, cls.GRID_SIZE - 1))
        row = int(np.clip(round(center - radius * v), 0, cls.GRID_SIZE - 1))
        return row, col

    @classmethod
    def _marker(cls, depth: float) -> str:
        if depth > cls.DEPTH_THRESHOLD:
            return cls.TOWARD
        if depth < -cls.DEPTH_THRESHOLD:
            return cls.AWAY
        return cls.IN_PLANE

    @classmethod
    def _panel(cls, point: Tuple[float, float, float],
               trail: List[Tuple[float, float]]) -> List[str]:
        """One projection. ``point`` is (horizontal, vertical, depth)."""
        size = cls.GRID_SIZE
        center = size // 2
        grid = [[' '] * size for _ in range(size)]

        # outline first, axes only where the outline left gaps
        for angle in np.linspace(0, 2 * np.pi, 48, endpoint=False):
            row, col = cls._cell(np.cos(angle), np.sin(angle))
            grid[row][col] = '·'
        for i in range(size):
            if grid[center][i] == ' ':
                grid[center][i] = '─'
            if grid[i][center] == ' ':
                grid[i][center] = '│'
        grid[center][center] = '┼'

        for h, v in trail:
            row, col = cls._cell(h, v)
            grid[row][col] = cls.TRAIL

        h, v, depth = point
        row, col = cls._cell(h, v)
        grid[row][col] = cls._marker(depth)
        return [''.join(cells) for cells in grid]

    @classmethod
    def panels(cls, state: StateLike,
               trail: Optional[Iterable[StateLike]] = None) -> Tuple[List[str], List[str]]:
        """
        Rows of the top (x,y) and side (x,z) projections.

        ``trail`` holds earlier states, oldest first, drawn under the marker.
        """
        cart = spherical_to_cartesian(to_spherical(state))
        past: List[CartesianCoordinates] = [
            spherical_to_cartesian(to_spherical(s)) for s in (trail or ())
        ]
        top = cls._panel((cart.x, cart.y, cart.z), [(p.x, p.y) for p in past])
        # seen from -y, so +y points away from the viewer
        side = cls._panel((cart.x, cart.z, -cart.y), [(p.x, p.z) for p in past])
        return top, side

    @classmethod
    def ascii_bloch(cls, state: StateLike,
                    trail: Optional[Iterable[StateLike]] = None) -> str:
        """ASCII top and side views of the Bloch sphere with the state marked."""
        trail = list(trail or ())
        top, side = cls.panels(state, trail)
        size = cls.GRID_SIZE
        gap = ' ' * cls.PANEL_GAP

        def row(left: str, right: str) -> str:
            return "    " + left + gap + right

        def labels(left: str, right: str) -> str:
            return row(left.center(size), right.center(size)).rstrip()

        horizontal = "-x".ljust(size - 2) + "+x"
        lines = [
            "Bloch Sphere:",
            "─" * 40,
            "  " + cls.describe(state),
            "",
            labels("top", "side"),
            labels("+y", "+z"),
        ]
        lines.extend(row(a, b) for a, b in zip(top, side))
        lines.append(row(horizontal, horizontal))
        lines.append(labels("-y", "-z"))
        lines.append("")
        lines.append(f"  {cls.TOWARD} toward viewer  {cls.AWAY} away  "
                     f"{cls.IN_PLANE} near the plane")
        if trail:
            lines.append(f"  {cls.TRAIL} earlier frames ({len(trail)})")
        return '\n'.join(lines)

    @staticmethod
    def frame_line(timestamp_ms: float, state: SphericalCoordinates) -> str:
        """A single animation frame as text."""
        return f"[{timestamp_ms:8.1f} ms] {BlochSphere.describe(state)}"


def describe_state(state: StateLike) -> str:
    """One-line summary of a state."""
    return BlochSphere.describe(state)


def show_bloch(state: StateLike, trail: Optional[Iterable[StateLike]] = None) -> str:
    """Show single-qubit state on Bloch sphere."""
    return BlochSphere.ascii_bloch(state, trail)


def render_path(states: List[SphericalCoordinates]) -> str:
    """Numbered list of states along a path."""
    return '\n'.join(f"{i:3d}: {BlochSphere.describe(s)}" for i, s in enumerate(states))
