"""Core single-qubit model: complex amplitudes, qubit state, gates."""
from .complex_number import Complex
from .qubit import Qubit, Measurement, normalize, NORM_TOLERANCE
from .gate import QuantumGate, UNITARY_TOLERANCE

__all__ = [
    'Complex',
    'Qubit',
    'Measurement',
    'normalize',
    'QuantumGate',
    'NORM_TOLERANCE',
    'UNITARY_TOLERANCE',
]
