"""
Single-qubit gates as 2x2 complex matrices.

Gates are assumed unitary and are not checked on construction. Qubit
construction renormalizes after every application, which absorbs
floating-point drift but does not repair a genuinely non-unitary matrix.
Use ``validate()`` or ``from_matrix(..., check_unitary=True)`` to opt into
the check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy import ndarray

from tiny_qubit.core.complex_number import Complex
from tiny_qubit.core.qubit import Qubit
from tiny_qubit.errors import NonUnitaryGateError

logger = logging.getLogger(__name__)

UNITARY_TOLERANCE = 1e-9

Row = Tuple[Complex, Complex]
Matrix2 = Tuple[Row, Row]


@dataclass(frozen=True)
class QuantumGate:
    """
    Unitary transform on one qubit.

    Attributes
    ----------
    matrix : ((Complex, Complex), (Complex, Complex))
        Row-major 2x2 matrix.
    name : str
        Display name, e.g. ``"H"``.
    """

    matrix: Matrix2
    name: str = "U"

    @classmethod
    def from_matrix(
        cls,
        matrix,
        name: str = "U",
        *,
        check_unitary: bool = False,
        tol: float = UNITARY_TOLERANCE,
    ) -> "QuantumGate":
        """
        Build a gate from any 2x2 array-like of numbers.

        Raises
        ------
        ValueError
            If the matrix is not 2x2.
        NonUnitaryGateError
            If ``check_unitary`` is set and U†U deviates from I by more
            than ``tol``.
        """
        data = np.asarray(matrix, dtype=np.complex128)
        if data.shape != (2, 2):
            raise ValueError(f"Gate '{name}' must be a 2x2 matrix, got shape {data.shape}")
        rows = tuple(
            tuple(Complex.from_complex(data[i, j]) for j in range(2)) for i in range(2)
        )
        gate = cls(matrix=rows, name=name)
        if check_unitary:
            gate.validate(tol)
        return gate

    def to_numpy(self) -> ndarray:
        return np.array(
            [[complex(entry) for entry in row] for row in self.matrix],
            dtype=np.complex128,
        )

    def is_unitary(self, tol: float = UNITARY_TOLERANCE) -> bool:
        """Check U†U = I within absolute tolerance."""
        m = self.to_numpy()
        return bool(np.allclose(m.conj().T @ m, np.eye(2), atol=tol))

    def validate(self, tol: float = UNITARY_TOLERANCE) -> "QuantumGate":
        """Return self, or raise NonUnitaryGateError."""
        if not self.is_unitary(tol):
            raise NonUnitaryGateError(f"Gate '{self.name}' is not unitary within tolerance {tol}")
        return self

    def apply(self, qubit: Qubit) -> Qubit:
        """
        Matrix-vector product new_i = sum_j U[i][j] * amp_j.

        The input qubit is not modified; the result is a new, renormalized
        and uncollapsed Qubit.
        """
        (u00, u01), (u10, u11) = self.matrix
        alpha = u00.mul(qubit.alpha).add(u01.mul(qubit.beta))
        beta = u10.mul(qubit.alpha).add(u11.mul(qubit.beta))
        logger.debug("Applied gate %s: (%s, %s)", self.name, alpha, beta)
        return Qubit(alpha, beta)

    __call__ = apply

    def adjoint(self) -> "QuantumGate":
        """Conjugate transpose U†."""
        (u00, u01), (u10, u11) = self.matrix
        return QuantumGate(
            matrix=(
                (u00.conjugate(), u10.conjugate()),
                (u01.conjugate(), u11.conjugate()),
            ),
            name=f"{self.name}†",
        )

    def compose(self, other: "QuantumGate") -> "QuantumGate":
        """Single gate equivalent to applying ``other`` first, then ``self``."""
        a, b = self.matrix, other.matrix
        rows = tuple(
            tuple(a[i][0].mul(b[0][j]).add(a[i][1].mul(b[1][j])) for j in range(2))
            for i in range(2)
        )
        return QuantumGate(matrix=rows, name=f"{self.name}·{other.name}")

    def __str__(self) -> str:
        (u00, u01), (u10, u11) = self.matrix
        return f"{self.name} [[{u00}, {u01}], [{u10}, {u11}]]"
