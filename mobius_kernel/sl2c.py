"""2x2 complex matrices acting as Möbius transformations."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from . import complexes as cx
from .errors import DomainError


@dataclass(frozen=True)
class SL2C:
    """Matrix ``[[a, b], [c, d]]`` representing ``z -> (az + b) / (cz + d)``.

    Instances are immutable; every operation returns a new matrix.
    """

    a: complex
    b: complex
    c: complex
    d: complex

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "d"):
            object.__setattr__(self, name, complex(getattr(self, name)))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "SL2C":
        arr = np.asarray(array, dtype=complex)
        if arr.shape != (2, 2):
            raise ValueError(f"expected a 2x2 array, got shape {arr.shape}")
        return cls(complex(arr[0, 0]), complex(arr[0, 1]), complex(arr[1, 0]), complex(arr[1, 1]))

    def as_array(self) -> np.ndarray:
        return np.array([[self.a, self.b], [self.c, self.d]], dtype=complex)

    @property
    def linear_array(self) -> list:
        """Entries flattened as ``[a.re, a.im, b.re, b.im, c.re, c.im, d.re, d.im]``."""

        return cx.linear_array((self.a, self.b, self.c, self.d))

    def apply(self, z: complex) -> complex:
        """Evaluate the transformation on the extended plane."""

        if cx.is_infinity(z):
            if cx.is_zero(self.c):
                return cx.INFINITY
            return self.a / self.c
        denom = self.c * z + self.d
        if cx.is_zero(denom):
            return cx.INFINITY
        return (self.a * z + self.b) / denom

    def trace(self) -> complex:
        return self.a + self.d

    def determinant(self) -> complex:
        return self.a * self.d - self.b * self.c

    def is_unimodular(self, tol: float) -> bool:
        return abs(self.determinant() - 1) <= tol

    def inverse(self) -> "SL2C":
        det = self.determinant()
        if cx.is_zero(det):
            raise DomainError(f"singular matrix {self!r} has no inverse")
        return SL2C(self.d / det, -self.b / det, -self.c / det, self.a / det)

    def multiply(self, other: "SL2C") -> "SL2C":
        return SL2C.from_array(self.as_array() @ other.as_array())

    def __matmul__(self, other: "SL2C") -> "SL2C":
        if not isinstance(other, SL2C):
            return NotImplemented
        return self.multiply(other)

    def scale(self, k: complex) -> "SL2C":
        return SL2C(self.a * k, self.b * k, self.c * k, self.d * k)

    def normalized(self) -> "SL2C":
        """Rescale by ``1 / sqrt(det)`` so the determinant is one again."""

        det = self.determinant()
        if cx.is_zero(det):
            raise DomainError(f"singular matrix {self!r} cannot be normalized")
        return self.scale(1 / cx.sqrt(det))

    def __repr__(self) -> str:
        entries = ", ".join(cx.format_complex(v) for v in (self.a, self.b, self.c, self.d))
        return f"SL2C[{entries}]"


IDENTITY = SL2C(cx.ONE, cx.ZERO, cx.ZERO, cx.ONE)


__all__ = ["SL2C", "IDENTITY"]
