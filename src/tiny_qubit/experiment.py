"""
Prepare, transform and measure a single qubit.

Usage:
    from tiny_qubit.experiment import ExperimentConfig, run_experiment

    result = run_experiment(ExperimentConfig(gate="h", shots=1000, seed=7))
    print(result.measurement.outcome)   # 0 or 1
    print(result.counts)                # {0: ~500, 1: ~500}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from tiny_qubit.core import Complex, Measurement, QuantumGate, Qubit
from tiny_qubit.gates import get_gate
from tiny_qubit.random_source import NumpyRandomSource, RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExperimentConfig:
    """
    Settings for one prepare-apply-measure run.

    Attributes
    ----------
    gate : str
        Registry name of the gate to apply.
    params : tuple of float
        Gate parameters, for parameterized gates.
    initial : (Complex, Complex)
        Initial amplitudes; normalized on construction.
    shots : int
        Extra independent measurements of the transformed state (0 = none).
    seed : int | None
        Seed for the default numpy random source.
    strict : bool
        Reject gates that fail the unitarity check.
    """

    gate: str = "h"
    params: Tuple[float, ...] = ()
    initial: Tuple[Complex, Complex] = (Complex(1.0, 0.0), Complex(0.0, 0.0))
    shots: int = 0
    seed: Optional[int] = None
    strict: bool = False

    def __post_init__(self) -> None:
        if self.shots < 0:
            raise ValueError(f"shots must be non-negative, got {self.shots}")


@dataclass
class ExperimentResult:
    """Everything observed during one run."""

    initial: Qubit
    gate: QuantumGate
    transformed: Qubit
    measurement: Measurement
    counts: Dict[int, int] = field(default_factory=dict)

    @property
    def outcome(self) -> int:
        return self.measurement.outcome

    def frequency(self, outcome: int) -> float:
        """Observed frequency of an outcome over the sampled shots."""
        total = sum(self.counts.values())
        if total == 0:
            return 0.0
        return self.counts.get(outcome, 0) / total


def sample_counts(qubit: Qubit, shots: int, source: RandomSource) -> Dict[int, int]:
    """
    Measure ``shots`` fresh copies of the same state.

    The qubit is immutable, so each shot starts from the same
    pre-measurement amplitudes.
    """
    if shots <= 0:
        raise ValueError(f"shots must be positive, got {shots}")
    counts = {0: 0, 1: 0}
    for _ in range(shots):
        counts[qubit.measure(source).outcome] += 1
    return counts


def run_experiment(
    config: ExperimentConfig, source: Optional[RandomSource] = None
) -> ExperimentResult:
    """
    Build the initial qubit, apply the configured gate and measure it.

    Parameters
    ----------
    config : ExperimentConfig
        Run settings.
    source : RandomSource, optional
        Random source for measurement. Defaults to a NumpyRandomSource
        seeded with ``config.seed``.

    Returns
    -------
    ExperimentResult
    """
    if source is None:
        source = NumpyRandomSource(config.seed)

    initial = Qubit(*config.initial)
    gate = get_gate(config.gate, tuple(config.params))
    if config.strict:
        gate.validate()

    transformed = gate.apply(initial)
    measurement = transformed.measure(source)
    logger.info(
        "Applied %s to %s, measured |%d⟩ (p0=%.6f)",
        gate.name, initial, measurement.outcome, measurement.probability_zero,
    )

    counts: Dict[int, int] = {}
    if config.shots > 0:
        counts = sample_counts(transformed, config.shots, source)
        logger.info("Sampled %d shot(s): %s", config.shots, counts)

    return ExperimentResult(
        initial=initial,
        gate=gate,
        transformed=transformed,
        measurement=measurement,
        counts=counts,
    )
