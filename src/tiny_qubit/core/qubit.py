"""
Single-qubit state: a normalized pair of complex amplitudes.

A Qubit is an immutable value. Construction always normalizes, gate
application returns a new Qubit, and measurement returns a Measurement
holding a new, collapsed Qubit. The caller replaces its reference:

    >>> from tiny_qubit import Qubit, Complex, hadamard, SequenceRandomSource
    >>> q = hadamard().apply(Qubit(Complex(1, 0), Complex(0, 0)))
    >>> m = q.measure(SequenceRandomSource([0.25]))
    >>> m.outcome, m.qubit.collapsed
    (0, 0)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy import ndarray

from tiny_qubit.core.complex_number import ONE, ZERO, Complex
from tiny_qubit.errors import InvalidAmplitudeError
from tiny_qubit.random_source import RandomSource

logger = logging.getLogger(__name__)

NORM_TOLERANCE = 1e-9

Amplitudes = Tuple[Complex, Complex]

_BASIS = {0: (ONE, ZERO), 1: (ZERO, ONE)}


def normalize(alpha: Complex, beta: Complex) -> Amplitudes:
    """
    Scale two amplitudes so that |alpha|^2 + |beta|^2 = 1.

    Every component is divided by the Euclidean norm of the four
    components. ``math.hypot`` scales internally, so amplitudes near the
    float range limits normalize without overflow or underflow. A pair
    that is already normalized comes back unchanged.

    Raises
    ------
    InvalidAmplitudeError
        If both amplitudes are exactly zero, or the norm is not finite.
    """
    norm = math.hypot(alpha.real, alpha.imag, beta.real, beta.imag)
    if norm == 0.0:
        raise InvalidAmplitudeError(
            "Cannot normalize the zero vector: at least one amplitude must be non-zero"
        )
    if not math.isfinite(norm):
        raise InvalidAmplitudeError(f"Cannot normalize amplitudes with norm {norm}")
    logger.debug("Normalizing amplitudes with norm %.17g", norm)
    return (
        Complex(alpha.real / norm, alpha.imag / norm),
        Complex(beta.real / norm, beta.imag / norm),
    )


@dataclass(frozen=True)
class Qubit:
    """
    Normalized single-qubit state alpha|0⟩ + beta|1⟩.

    Parameters
    ----------
    alpha : Complex
        Amplitude of |0⟩ (need not be normalized).
    beta : Complex
        Amplitude of |1⟩ (need not be normalized).
    collapsed : int | None
        Outcome of the measurement that produced this state, or None for
        a state that has not been measured since its last gate. A tagged
        qubit must be exactly the matching basis state.
    """

    alpha: Complex
    beta: Complex
    collapsed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.collapsed not in (None, 0, 1):
            raise ValueError(f"collapsed must be None, 0 or 1, got {self.collapsed!r}")
        alpha, beta = normalize(self.alpha, self.beta)
        if self.collapsed is not None and (alpha, beta) != _BASIS[self.collapsed]:
            raise ValueError(
                f"collapsed={self.collapsed} requires the exact basis state |{self.collapsed}⟩"
            )
        object.__setattr__(self, "alpha", alpha)
        object.__setattr__(self, "beta", beta)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def basis(cls, bit: int, *, collapsed: Optional[int] = None) -> "Qubit":
        """Exact basis state |0⟩ or |1⟩."""
        if bit == 0:
            return cls(ONE, ZERO, collapsed=collapsed)
        if bit == 1:
            return cls(ZERO, ONE, collapsed=collapsed)
        raise ValueError(f"Basis state must be 0 or 1, got {bit!r}")

    @classmethod
    def from_complex(cls, alpha: complex, beta: complex) -> "Qubit":
        return cls(Complex.from_complex(alpha), Complex.from_complex(beta))

    @classmethod
    def from_numpy(cls, vector) -> "Qubit":
        """Build from any array-like of two complex amplitudes."""
        data = np.asarray(vector, dtype=np.complex128)
        if data.shape != (2,):
            raise ValueError(f"Qubit state must have shape (2,), got {data.shape}")
        return cls.from_complex(data[0], data[1])

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def amplitudes(self) -> Amplitudes:
        return (self.alpha, self.beta)

    state = amplitudes

    @property
    def is_collapsed(self) -> bool:
        return self.collapsed is not None

    def norm_squared(self) -> float:
        return self.alpha.modulus_squared() + self.beta.modulus_squared()

    def probabilities(self) -> Tuple[float, float]:
        """Born-rule probabilities (p0, p1)."""
        return (self.alpha.modulus_squared(), self.beta.modulus_squared())

    def bloch_vector(self) -> Tuple[float, float, float]:
        """Bloch sphere coordinates (x, y, z) of this state."""
        overlap = self.alpha.conjugate().mul(self.beta)
        p0, p1 = self.probabilities()
        return (2.0 * overlap.real, 2.0 * overlap.imag, p0 - p1)

    def to_numpy(self) -> ndarray:
        return np.array([complex(self.alpha), complex(self.beta)], dtype=np.complex128)

    def isclose(self, other: "Qubit", tol: float = NORM_TOLERANCE) -> bool:
        """Amplitude-wise comparison, ignoring the collapse tag."""
        return self.alpha.isclose(other.alpha, tol) and self.beta.isclose(other.beta, tol)

    # ------------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------------

    def measure(self, source: RandomSource) -> "Measurement":
        """
        Measure in the computational basis.

        Consumes exactly one draw ``r`` from ``source``. The outcome is 0
        when ``r < |alpha|^2`` and 1 otherwise. This qubit is left as it
        was; the returned Measurement carries the collapsed state.

        Parameters
        ----------
        source : RandomSource
            Provider of a uniform draw in [0, 1).

        Returns
        -------
        Measurement
            Outcome, collapsed qubit, and the draw that decided it.
        """
        r = source.uniform()
        p0 = self.alpha.modulus_squared()
        outcome = 0 if r < p0 else 1
        logger.debug("Measured draw=%.17g p0=%.17g -> |%d⟩", r, p0, outcome)
        return Measurement(
            outcome=outcome,
            qubit=Qubit.basis(outcome, collapsed=outcome),
            draw=r,
            probability_zero=p0,
        )

    def __str__(self) -> str:
        return f"({self.alpha})|0⟩ + ({self.beta})|1⟩"


@dataclass(frozen=True)
class Measurement:
    """
    Result of measuring a qubit.

    Attributes
    ----------
    outcome : int
        Classical bit observed (0 or 1).
    qubit : Qubit
        Post-measurement state, exactly |outcome⟩ and tagged collapsed.
    draw : float
        Random value consumed to decide the outcome.
    probability_zero : float
        |alpha|^2 of the measured state.
    """

    outcome: int
    qubit: Qubit
    draw: float
    probability_zero: float

    @property
    def probability(self) -> float:
        """Probability of the outcome that was observed."""
        return self.probability_zero if self.outcome == 0 else 1.0 - self.probability_zero
