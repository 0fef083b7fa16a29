"""Tests for text rendering of states and results."""

import numpy as np
import pytest

from tiny_qubit import Complex, Qubit, SequenceRandomSource, hadamard, pauli_z
from tiny_qubit.visualization import (
    BLOCH_RADIUS,
    BlochSphere,
    format_amplitude,
    format_qubit,
    show_bloch,
    show_counts,
)


def test_format_amplitude():
    assert format_amplitude(Complex(0.5, -0.25)) == "0.500000-0.250000i"
    assert format_amplitude(Complex(1, 0), precision=2) == "1.00+0.00i"


def test_format_qubit_lines():
    text = format_qubit(Qubit.basis(0))
    lines = text.splitlines()
    assert lines[0] == "|0⟩ amplitude=1.000000+0.000000i, prob=1.000000"
    assert lines[1] == "|1⟩ amplitude=0.000000+0.000000i, prob=0.000000"
    assert len(lines) == 2


def test_format_qubit_superposition():
    text = format_qubit(hadamard().apply(Qubit.basis(0)))
    assert "0.707107" in text
    assert "prob=0.500000" in text


def test_format_collapsed_qubit():
    m = hadamard().apply(Qubit.basis(0)).measure(SequenceRandomSource([0.9]))
    assert "(collapsed to |1⟩)" in format_qubit(m.qubit)


# ---------------------------------------------------------------------------
# Bloch sphere
# ---------------------------------------------------------------------------

def test_bloch_angles():
    theta, phi = BlochSphere.bloch_to_angles(0.0, 0.0, 1.0)
    assert theta == pytest.approx(0.0)
    theta, phi = BlochSphere.bloch_to_angles(0.0, 1.0, 0.0)
    assert theta == pytest.approx(np.pi / 2)
    assert phi == pytest.approx(np.pi / 2)


def test_state_to_bloch_matches_qubit():
    q = Qubit(Complex(0.6, 0), Complex(0, 0.8))
    assert BlochSphere.state_to_bloch(q) == q.bloch_vector()


def _grid_rows(text):
    # three header lines, a pole label, the grid, then the other pole label
    lines = text.splitlines()
    return lines[4:5 + 2 * BLOCH_RADIUS]


def test_show_bloch_header():
    text = show_bloch(Qubit.basis(0))
    assert text.splitlines()[0] == "Bloch vector: x=+0.000 y=+0.000 z=+1.000"
    assert "θ=0.000 rad" in text


def test_show_bloch_pole_labels():
    lines = show_bloch(Qubit.basis(0)).splitlines()
    assert lines[3].strip() == "|0⟩"
    assert lines[-1].strip() == "|1⟩"


def test_show_bloch_grid_shape():
    rows = _grid_rows(show_bloch(Qubit.basis(0)))
    assert len(rows) == 2 * BLOCH_RADIUS + 1
    assert rows[BLOCH_RADIUS].startswith("|−⟩ ")
    assert rows[BLOCH_RADIUS].endswith(" |+⟩")


@pytest.mark.parametrize(
    "qubit,row",
    [
        (Qubit.basis(0), 0),
        (Qubit.basis(1), 2 * BLOCH_RADIUS),
        (Qubit(Complex(1, 0), Complex(1, 0)), BLOCH_RADIUS),
    ],
)
def test_show_bloch_marker_row(qubit, row):
    rows = _grid_rows(show_bloch(qubit))
    marked = [i for i, line in enumerate(rows) if "*" in line]
    assert marked == [row]


def test_show_bloch_plus_marker_on_right():
    rows = _grid_rows(show_bloch(hadamard().apply(Qubit.basis(0))))
    equator = rows[BLOCH_RADIUS]
    assert equator.endswith("* |+⟩")


def test_show_bloch_minus_marker_on_left():
    minus = pauli_z().apply(hadamard().apply(Qubit.basis(0)))
    equator = _grid_rows(show_bloch(minus))[BLOCH_RADIUS]
    assert equator.startswith("|−⟩ *")


def test_show_bloch_plus_i_marks_center():
    q = Qubit(Complex(1, 0), Complex(0, 1))
    text = show_bloch(q)
    assert "y=+1.000" in text
    equator = _grid_rows(text)[BLOCH_RADIUS]
    assert "+" not in equator.replace("|+⟩", "")
    assert "*" in equator


# ---------------------------------------------------------------------------
# Histogram
# ---------------------------------------------------------------------------

def test_show_counts():
    text = show_counts({0: 30, 1: 10})
    lines = text.splitlines()
    assert lines[0] == "Counts:"
    assert lines[1].startswith("  |0⟩ " + "#" * 30 + " ")
    assert lines[1].endswith("    30   75.0%")
    assert lines[2].endswith("    10   25.0%")
    assert lines[3] == "  total 40"


def test_show_counts_missing_outcome():
    text = show_counts({1: 4})
    assert "     0    0.0%" in text
    assert "     4  100.0%" in text


def test_show_counts_empty():
    text = show_counts({})
    assert "0.0%" in text
    assert text.splitlines()[-1] == "  total 0"


def test_show_counts_explicit_total():
    assert "   50.0%" in show_counts({0: 5}, total=10)
