"""
Command-line interface for tiny-bloch.

Usage:
    tiny-bloch convert --theta 1.5708 --phi 0
    tiny-bloch convert --alpha 0.7071 --beta 0.7071j
    tiny-bloch slerp zero one --steps 5
    tiny-bloch animate zero plus_i --duration 300 --easing easeInOut
    tiny-bloch animate zero one --trail 12
    tiny-bloch show minus
"""
import argparse
import logging

from ..core import (
    COMMON_STATES,
    ComplexAmplitude,
    SphericalCoordinates,
    amplitudes_to_spherical,
    common_state,
    slerp_path,
    spherical_to_amplitudes,
    spherical_to_cartesian,
    wrap_phase,
)
from ..core.easing import EasingKind
from ..animation import AnimationConfig, AnimationDriver, ManualFrameScheduler
from ..logging_config import setup_logging
from ..trajectory import TrajectoryConfig, TrajectoryHistory
from ..visualization import BlochSphere, render_path, show_bloch


def parse_state(text: str) -> SphericalCoordinates:
    """Parse a named state (``plus``) or a ``theta,phi`` pair in radians."""
    if ',' in text:
        theta_s, phi_s = text.split(',', 1)
        try:
            theta, phi = float(theta_s), float(phi_s)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid angles '{text}', expected THETA,PHI") from None
        return SphericalCoordinates(theta, wrap_phase(phi))
    try:
        return common_state(text)
    except KeyError as exc:
        raise argparse.ArgumentTypeError(str(exc.args[0])) from None


def parse_complex(text: str) -> complex:
    try:
        return complex(text.replace(' ', ''))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid complex number '{text}'") from None


def cmd_convert(args):
    """Show a state in spherical, Cartesian and amplitude form."""
    if args.alpha is not None or args.beta is not None:
        amp = ComplexAmplitude(args.alpha or 0, args.beta or 0)
        coords = amplitudes_to_spherical(amp)
    else:
        coords = SphericalCoordinates(args.theta, wrap_phase(args.phi))

    cart = spherical_to_cartesian(coords)
    amp = spherical_to_amplitudes(coords)
    print(f"Spherical:  θ={coords.theta:.6f}  φ={coords.phi:.6f}")
    print(f"Cartesian:  x={cart.x:.6f}  y={cart.y:.6f}  z={cart.z:.6f}")
    print(f"Amplitudes: α={amp.alpha.real:.6f}{amp.alpha.imag:+.6f}j  "
          f"β={amp.beta.real:.6f}{amp.beta.imag:+.6f}j")


def cmd_slerp(args):
    """Print points along the great circle between two states."""
    path = slerp_path(args.start, args.end, args.steps)
    print(render_path(path))


def cmd_animate(args):
    """Run a transition on a virtual clock and print every frame."""
    sched = ManualFrameScheduler()
    config = AnimationConfig(enabled=not args.no_animation,
                             duration_ms=args.duration, easing=args.easing)
    history = TrajectoryHistory.from_config(
        TrajectoryConfig(enabled=args.trail > 0, max_points=max(args.trail, 1)))

    def on_state_change(spherical, cartesian):
        print(BlochSphere.frame_line(sched.now, spherical))
        if history is not None:
            history.record(spherical, cartesian)

    driver = AnimationDriver(
        args.start, config, scheduler=sched,
        on_animation_start=lambda: print(f"[{sched.now:8.1f} ms] animation start"),
        on_animation_end=lambda: print(f"[{sched.now:8.1f} ms] animation end"),
        on_state_change=on_state_change,
    )
    with driver:
        driver.set_target(args.end)
        frames = sched.run_until_idle(frame_ms=1000.0 / args.fps)
    print(f"{frames} frames")

    if history is not None:
        print(show_bloch(driver.current, history.recent(len(history) - 1)))


def cmd_show(args):
    """Draw a state on the ASCII Bloch sphere."""
    print(show_bloch(args.state))


def cmd_info(args):
    """Show tiny-bloch information."""
    from .. import __version__

    names = ', '.join(COMMON_STATES)
    print(f"""
tiny-bloch v{__version__}
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

Single-qubit states on the Bloch sphere.

Features:
  • Amplitude / spherical / Cartesian conversions
  • Great-circle (SLERP) interpolation
  • Frame-driven animation with easing

Named states: {names}
""")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='tiny-bloch',
        description='Bloch sphere state conversion and animation'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Convert command
    convert_parser = subparsers.add_parser('convert', help='Convert between state forms')
    convert_parser.add_argument('--theta', type=float, default=0.0, help='Polar angle (rad)')
    convert_parser.add_argument('--phi', type=float, default=0.0, help='Azimuthal angle (rad)')
    convert_parser.add_argument('--alpha', type=parse_complex, help='Amplitude of |0⟩')
    convert_parser.add_argument('--beta', type=parse_complex, help='Amplitude of |1⟩')
    convert_parser.set_defaults(func=cmd_convert)

    # SLERP command
    slerp_parser = subparsers.add_parser('slerp', help='Sample a great-circle path')
    slerp_parser.add_argument('start', type=parse_state, help='Named state or THETA,PHI')
    slerp_parser.add_argument('end', type=parse_state, help='Named state or THETA,PHI')
    slerp_parser.add_argument('--steps', type=int, default=9, help='Number of points')
    slerp_parser.set_defaults(func=cmd_slerp)

    # Animate command
    animate_parser = subparsers.add_parser('animate', help='Print animation frames')
    animate_parser.add_argument('start', type=parse_state, help='Named state or THETA,PHI')
    animate_parser.add_argument('end', type=parse_state, help='Named state or THETA,PHI')
    animate_parser.add_argument('--duration', type=float, default=300.0, help='Duration in ms')
    animate_parser.add_argument('--easing', default=EasingKind.EASE_IN_OUT.value,
                                help='linear, easeIn, easeOut or easeInOut')
    animate_parser.add_argument('--fps', type=float, default=60.0, help='Frames per second')
    animate_parser.add_argument('--no-animation', action='store_true', help='Jump straight to the target')
    animate_parser.add_argument('--trail', type=int, default=0, metavar='N',
                                help='Draw the final state with the last N frames')
    animate_parser.set_defaults(func=cmd_animate)

    # Show command
    show_parser = subparsers.add_parser('show', help='ASCII Bloch sphere')
    show_parser.add_argument('state', type=parse_state, help='Named state or THETA,PHI')
    show_parser.set_defaults(func=cmd_show)

    # Info command
    info_parser = subparsers.add_parser('info', help='Show tiny-bloch info')
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return

    if args.command == 'animate' and args.fps <= 0:
        parser.error('--fps must be positive')

    try:
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == '__main__':
    main()
