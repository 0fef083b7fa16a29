"""
tiny-qubit: a minimal single-qubit simulation kernel.

Features:
- Explicit complex arithmetic for amplitudes and gate entries
- Normalized two-amplitude qubit state
- 2x2 gates applied by matrix-vector product
- Born-rule measurement with an injected random source
- ASCII state, Bloch sphere and histogram output

Quick Start:
    >>> from tiny_qubit import Complex, Qubit, hadamard, NumpyRandomSource
    >>> q = Qubit(Complex(1, 0), Complex(0, 0))
    >>> q = hadamard().apply(q)
    >>> m = q.measure(NumpyRandomSource(seed=42))
    >>> m.outcome in (0, 1)
    True
"""
__version__ = "1.0.0"

# Core components
from .core import Complex, Qubit, Measurement, QuantumGate, normalize
from .errors import (
    QubitError,
    InvalidAmplitudeError,
    NonUnitaryGateError,
    UnknownGateError,
    RandomSourceExhausted,
)
from .random_source import RandomSource, NumpyRandomSource, SequenceRandomSource
from .gates import (
    GATE_REGISTRY,
    get_gate,
    hadamard,
    identity,
    pauli_x,
    pauli_y,
    pauli_z,
    s_gate,
    t_gate,
    phase,
)
from .experiment import ExperimentConfig, ExperimentResult, run_experiment, sample_counts
from .visualization import format_qubit, show_counts, show_bloch, BlochSphere

__all__ = [
    # Core
    'Complex',
    'Qubit',
    'Measurement',
    'QuantumGate',
    'normalize',
    # Errors
    'QubitError',
    'InvalidAmplitudeError',
    'NonUnitaryGateError',
    'UnknownGateError',
    'RandomSourceExhausted',
    # Randomness
    'RandomSource',
    'NumpyRandomSource',
    'SequenceRandomSource',
    # Gates
    'GATE_REGISTRY',
    'get_gate',
    'hadamard',
    'identity',
    'pauli_x',
    'pauli_y',
    'pauli_z',
    's_gate',
    't_gate',
    'phase',
    # Driver
    'ExperimentConfig',
    'ExperimentResult',
    'run_experiment',
    'sample_counts',
    # Visualization
    'format_qubit',
    'show_counts',
    'show_bloch',
    'BlochSphere',
]
