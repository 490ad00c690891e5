"""Small value types with arithmetic operators: a 2-D integer vector and a
complex number."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """An immutable two-dimensional integer vector."""

    x: int
    y: int

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def incremented(self) -> Vector:
        """Return a vector with both components increased by one."""
        return Vector(self.x + 1, self.y + 1)

    def __str__(self) -> str:
        return f"x: {self.x}\ny: {self.y}"


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Complex:
    """An immutable complex number with real and imaginary parts."""

    real: float = 0.0
    imag: float = 0.0

    def __add__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real - other.real, self.imag - other.imag)

    def __str__(self) -> str:
        real = _format_number(self.real)
        imag = _format_number(self.imag)
        if self.imag < 0:
            return f"{real}{imag}i"
        return f"{real}+{imag}i"