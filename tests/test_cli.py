"""Tests for the command-line interface and text rendering."""

import argparse
import logging

import numpy as np
import pytest

from tiny_bloch import (
    BlochSphere,
    ComplexAmplitude,
    TrajectoryHistory,
    common_state,
    describe_state,
    show_bloch,
)
from tiny_bloch.cli import main, parse_complex, parse_state
from tiny_bloch.logging_config import LOGGER_NAME, setup_logging


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------

def test_describe_state_all_forms():
    text = describe_state(common_state("plus_i"))
    assert "θ=1.571" in text
    assert "y=1.000" in text
    assert "β=0.000+0.707i" in text


CENTER = BlochSphere.GRID_SIZE // 2


@pytest.mark.parametrize("name,top_marker,side_marker", [
    ("zero", "●", "◐"),
    ("one", "○", "◐"),
    ("plus", "◐", "◐"),
    ("plus_i", "◐", "○"),
    ("minus_i", "◐", "●"),
])
def test_panel_markers(name, top_marker, side_marker):
    top, side = BlochSphere.panels(common_state(name))
    assert len(top) == len(side) == BlochSphere.GRID_SIZE
    assert sum(r.count(top_marker) for r in top) == 1
    assert sum(r.count(side_marker) for r in side) == 1


def test_poles_mark_center_of_top_view():
    top, side = BlochSphere.panels(common_state("zero"))
    assert top[CENTER][CENTER] == "●"
    assert any("◐" in r for r in side[:2])     # +z is at the top of the side view
    top, _ = BlochSphere.panels(common_state("one"))
    assert top[CENTER][CENTER] == "○"


def test_side_view_of_y_axis_states():
    _, side = BlochSphere.panels(common_state("plus_i"))
    assert side[CENTER][CENTER] == "○"


def test_ascii_bloch_layout():
    art = show_bloch(common_state("plus"))
    lines = art.splitlines()
    assert lines[0] == "Bloch Sphere:"
    assert "x=1.000" in lines[2]
    assert "top" in lines[4] and "side" in lines[4]
    assert "+y" in lines[5] and "+z" in lines[5]
    assert lines[-1].startswith("  ● toward viewer")
    assert "∘" not in art


def test_ascii_bloch_accepts_amplitudes():
    art = BlochSphere.ascii_bloch(ComplexAmplitude(1, 1j))
    assert "y=1.000" in art


def test_ascii_bloch_draws_trail():
    trail = TrajectoryHistory(max_points=4)
    trail.extend([common_state("zero"), common_state("plus")])
    art = show_bloch(common_state("one"), trail)
    assert "∘" in art
    assert "earlier frames (2)" in art
    top, side = BlochSphere.panels(common_state("one"), trail)
    # |0⟩ sits under the |1⟩ marker in the top view but not in the side view
    assert top[CENTER][CENTER] == "○"
    assert any("∘" in r for r in side)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def test_parse_state():
    assert parse_state("minus") == common_state("minus")
    coords = parse_state("1.0,-1.0")
    assert coords.theta == 1.0
    assert coords.phi == pytest.approx(2 * np.pi - 1.0)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_state("nowhere")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_state("a,b")


def test_parse_complex():
    assert parse_complex("0.5+0.5j") == 0.5 + 0.5j
    assert parse_complex("1") == 1
    with pytest.raises(argparse.ArgumentTypeError):
        parse_complex("one")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def test_convert_spherical(capsys):
    main(["convert", "--theta", str(np.pi / 2), "--phi", str(np.pi / 2)])
    out = capsys.readouterr().out
    assert "y=1.000000" in out
    assert "β=0.000000+0.707107j" in out


def test_convert_amplitudes(capsys):
    main(["convert", "--alpha", "0", "--beta", "1"])
    out = capsys.readouterr().out
    assert "θ=3.141593" in out
    assert "z=-1.000000" in out


def test_slerp_command(capsys):
    main(["slerp", "zero", "one", "--steps", "3"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert "θ=1.571" in lines[1]


def test_animate_command(capsys):
    main(["animate", "zero", "plus", "--duration", "100", "--fps", "20", "--easing", "linear"])
    out = capsys.readouterr().out
    assert "animation start" in out
    assert "animation end" in out
    assert out.index("animation start") < out.index("animation end")
    assert out.strip().endswith("frames")


def test_animate_without_animation(capsys):
    main(["animate", "zero", "one", "--no-animation"])
    out = capsys.readouterr().out
    assert "animation start" not in out
    assert "0 frames" in out


def test_animate_with_trail(capsys):
    main(["animate", "zero", "one", "--duration", "100", "--fps", "100", "--trail", "4"])
    out = capsys.readouterr().out
    assert out.index("frames") < out.index("Bloch Sphere:")
    assert "earlier frames (3)" in out


def test_animate_bad_easing_exits():
    with pytest.raises(SystemExit):
        main(["animate", "zero", "one", "--easing", "wobble"])


def test_show_and_info(capsys):
    main(["show", "minus_i"])
    assert "Bloch Sphere:" in capsys.readouterr().out
    main(["info"])
    assert "plus_i" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    main([])
    assert "usage:" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_does_not_duplicate_handlers(package_logger, tmp_path):
    setup_logging(logging.INFO)
    logger = setup_logging(logging.DEBUG, log_file=str(tmp_path / "bloch.log"))
    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2


def test_verbose_flag_logs_transitions(package_logger, capsys):
    main(["-v", "animate", "zero", "one", "--duration", "50"])
    err = capsys.readouterr().err
    assert "tiny_bloch.animation.driver" in err
    assert "Transition finished" in err
