"""
Named single-qubit gates.

Matrices are defined as numpy arrays and wrapped as QuantumGate values.
Each factory returns the same constant gate on every call.

Gate categories:
    - Fixed: I, X, Y, Z, H, S, T
    - Parameterized: P (phase)
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from tiny_qubit.core.gate import QuantumGate
from tiny_qubit.errors import UnknownGateError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
_SQRT2_INV = 1.0 / np.sqrt(2.0)

# ---------------------------------------------------------------------------
# Fixed gates
# ---------------------------------------------------------------------------

_I = QuantumGate.from_matrix(np.eye(2, dtype=np.complex128), "I")
_X = QuantumGate.from_matrix([[0, 1], [1, 0]], "X")
_Y = QuantumGate.from_matrix([[0, -1j], [1j, 0]], "Y")
_Z = QuantumGate.from_matrix([[1, 0], [0, -1]], "Z")
_H = QuantumGate.from_matrix(np.array([[1, 1], [1, -1]], dtype=np.complex128) * _SQRT2_INV, "H")
_S = QuantumGate.from_matrix([[1, 0], [0, 1j]], "S")
_T = QuantumGate.from_matrix([[1, 0], [0, np.exp(1j * np.pi / 4)]], "T")


def identity() -> QuantumGate:
    """Identity gate."""
    return _I


def pauli_x() -> QuantumGate:
    """Pauli-X (NOT) gate."""
    return _X


def pauli_y() -> QuantumGate:
    """Pauli-Y gate."""
    return _Y


def pauli_z() -> QuantumGate:
    """Pauli-Z gate."""
    return _Z


def hadamard() -> QuantumGate:
    """Hadamard gate [[c, c], [c, -c]] with c = 1/sqrt(2)."""
    return _H


def s_gate() -> QuantumGate:
    """S (phase) gate: sqrt(Z)."""
    return _S


def t_gate() -> QuantumGate:
    """T gate: sqrt(S)."""
    return _T


# ---------------------------------------------------------------------------
# Parameterized gates
# ---------------------------------------------------------------------------

def phase(lam: float) -> QuantumGate:
    """Phase gate: diagonal with entries [1, exp(i*lam)]."""
    return QuantumGate.from_matrix([[1, 0], [0, np.exp(1j * lam)]], f"P({lam:g})")


# ---------------------------------------------------------------------------
# Gate metadata registry
# ---------------------------------------------------------------------------

GATE_REGISTRY: Dict[str, Dict[str, Any]] = {
    "i": {"factory": identity, "n_params": 0, "description": "Identity"},
    "x": {"factory": pauli_x, "n_params": 0, "description": "Pauli-X (bit flip)"},
    "y": {"factory": pauli_y, "n_params": 0, "description": "Pauli-Y"},
    "z": {"factory": pauli_z, "n_params": 0, "description": "Pauli-Z (phase flip)"},
    "h": {"factory": hadamard, "n_params": 0, "description": "Hadamard"},
    "s": {"factory": s_gate, "n_params": 0, "description": "S = sqrt(Z)"},
    "t": {"factory": t_gate, "n_params": 0, "description": "T = sqrt(S)"},
    "p": {"factory": phase, "n_params": 1, "description": "Phase P(lam)"},
}


def get_gate(name: str, params: tuple[float, ...] = ()) -> QuantumGate:
    """
    Look up a gate by name, with optional parameters.

    Parameters
    ----------
    name : str
        Gate name (case-insensitive).
    params : tuple of float
        Parameters for parameterized gates.

    Returns
    -------
    QuantumGate

    Raises
    ------
    UnknownGateError
        If gate name is not found.
    ValueError
        If wrong number of parameters provided.
    """
    key = name.lower()
    if key not in GATE_REGISTRY:
        raise UnknownGateError(
            f"Unknown gate: '{name}'. Available: {sorted(GATE_REGISTRY.keys())}"
        )

    info = GATE_REGISTRY[key]
    n_params = info["n_params"]
    if len(params) != n_params:
        if n_params == 0:
            raise ValueError(f"Gate '{name}' takes no parameters, got {len(params)}")
        raise ValueError(
            f"Gate '{name}' requires {n_params} parameter(s), got {len(params)}"
        )
    return info["factory"](*params)
