"""Exception types raised by tiny-qubit."""

from __future__ import annotations


class QubitError(Exception):
    """Base class for all tiny-qubit errors."""


class InvalidAmplitudeError(QubitError, ValueError):
    """Amplitudes cannot be normalized (both are exactly zero)."""


class NonUnitaryGateError(QubitError, ValueError):
    """A gate matrix failed the unitarity check U†U = I."""


class UnknownGateError(QubitError, KeyError):
    """No gate is registered under the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class RandomSourceExhausted(QubitError, RuntimeError):
    """A replay source has no draws left."""
