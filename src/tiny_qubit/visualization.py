"""
Text rendering for qubit states and measurement results.

Features:
- Amplitude / probability listing per basis state
- Bloch sphere coordinates and an x-z cross-section
- Measurement histograms
"""
from __future__ import annotations

import numpy as np
from typing import Dict, List, Optional, Tuple

from tiny_qubit.core import Complex, Qubit

BLOCH_RADIUS = 5
HISTOGRAM_WIDTH = 40


def format_amplitude(value: Complex, precision: int = 6) -> str:
    """Fixed-precision ``a+bi`` rendering of an amplitude."""
    return f"{value.real:.{precision}f}{value.imag:+.{precision}f}i"


def format_qubit(qubit: Qubit, precision: int = 6) -> str:
    """One line per basis state with amplitude and probability."""
    lines = []
    for bit, (amp, prob) in enumerate(zip(qubit.amplitudes, qubit.probabilities())):
        lines.append(
            f"|{bit}⟩ amplitude={format_amplitude(amp, precision)}, "
            f"prob={prob:.{precision}f}"
        )
    if qubit.is_collapsed:
        lines.append(f"(collapsed to |{qubit.collapsed}⟩)")
    return '\n'.join(lines)


class BlochSphere:
    """Coordinate conversions for the Bloch sphere view of a qubit."""

    @staticmethod
    def state_to_bloch(qubit: Qubit) -> Tuple[float, float, float]:
        """Convert qubit amplitudes to Bloch sphere coordinates."""
        return qubit.bloch_vector()

    @staticmethod
    def bloch_to_angles(x: float, y: float, z: float) -> Tuple[float, float]:
        """Convert Bloch coordinates to spherical angles (θ, φ)."""
        theta = np.arccos(np.clip(z, -1, 1))
        phi = np.arctan2(y, x)
        return (float(theta), float(phi))


def _bloch_grid(x: float, z: float, radius: int) -> List[List[str]]:
    """
    Cross-section of the sphere in the x-z plane.

    Columns are half as wide as rows are tall on a terminal, so the grid
    has ``4 * radius + 1`` columns and ``2 * radius + 1`` rows. Row 0 is
    the |0⟩ pole and the last column is the |+⟩ side.
    """
    cols = 4 * radius + 1
    zs = radius - np.arange(2 * radius + 1)
    xs = (np.arange(cols) - 2 * radius) / 2
    on_circle = np.abs(np.hypot(xs[None, :], zs[:, None]) - radius) < 0.5

    grid = [['·' if cell else ' ' for cell in row] for row in on_circle]
    grid[radius][2 * radius] = '+'

    col = int(np.clip(round(2 * radius * (1 + x)), 0, cols - 1))
    row = int(np.clip(round(radius * (1 - z)), 0, 2 * radius))
    grid[row][col] = '*'
    return grid


def show_bloch(qubit: Qubit, radius: int = BLOCH_RADIUS) -> str:
    """
    Bloch sphere summary of a single-qubit state.

    Prints the (x, y, z) coordinates and the (θ, φ) angles, then draws
    the x-z great circle with the state projected onto it as ``*``. The
    y component only shows up in the coordinates line.
    """
    x, y, z = BlochSphere.state_to_bloch(qubit)
    theta, phi = BlochSphere.bloch_to_angles(x, y, z)

    lines = [
        f"Bloch vector: x={x:+.3f} y={y:+.3f} z={z:+.3f}",
        f"θ={theta:.3f} rad  φ={phi:.3f} rad",
        "",
    ]
    grid = _bloch_grid(x, z, radius)
    pad = " " * 4
    lines.append(pad + "|0⟩".center(len(grid[0])).rstrip())
    for i, row in enumerate(grid):
        text = ''.join(row)
        if i == radius:
            lines.append("|−⟩ " + text + " |+⟩")
        else:
            lines.append((pad + text).rstrip())
    lines.append(pad + "|1⟩".center(len(grid[0])).rstrip())
    return '\n'.join(lines)


def show_counts(counts: Dict[int, int], total: Optional[int] = None) -> str:
    """Measurement counts as a histogram, one row per outcome."""
    if total is None:
        total = sum(counts.values())

    lines: List[str] = []
    lines.append("Counts:")
    for outcome in (0, 1):
        count = counts.get(outcome, 0)
        share = count / total if total else 0.0
        bar = '#' * int(round(share * HISTOGRAM_WIDTH))
        lines.append(
            f"  |{outcome}⟩ {bar:<{HISTOGRAM_WIDTH}} {count:>6d}  {share:6.1%}"
        )
    lines.append(f"  total {total}")
    return '\n'.join(lines)
