"""
Complex number value type used for qubit amplitudes and gate entries.

Kept as an explicit (real, imag) pair of 64-bit floats so that every
arithmetic step of gate application is visible and reproducible.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    """
    Immutable complex number.

    Attributes
    ----------
    real : float
        Real part.
    imag : float
        Imaginary part.

    Example
    -------
    >>> Complex(1, 2).mul(Complex(3, 4))
    Complex(real=-5.0, imag=10.0)
    """

    real: float
    imag: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    @classmethod
    def from_complex(cls, value: complex) -> "Complex":
        """Build from a Python or numpy complex scalar."""
        value = complex(value)
        return cls(value.real, value.imag)

    def modulus_squared(self) -> float:
        """|z|^2 = real^2 + imag^2."""
        return self.real * self.real + self.imag * self.imag

    def modulus(self) -> float:
        return math.sqrt(self.modulus_squared())

    def add(self, other: "Complex") -> "Complex":
        """Componentwise sum."""
        return Complex(self.real + other.real, self.imag + other.imag)

    def mul(self, other: "Complex") -> "Complex":
        """Complex product (ac - bd) + (ad + bc)i."""
        return Complex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def scale(self, factor: float) -> "Complex":
        """Multiply both components by a real factor."""
        return Complex(self.real * factor, self.imag * factor)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def isclose(self, other: "Complex", tol: float = 1e-9) -> bool:
        """Componentwise comparison with absolute tolerance."""
        return (
            math.isclose(self.real, other.real, rel_tol=0.0, abs_tol=tol)
            and math.isclose(self.imag, other.imag, rel_tol=0.0, abs_tol=tol)
        )

    def __add__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.mul(other)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        return f"{self.real:g}{self.imag:+g}i"


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
