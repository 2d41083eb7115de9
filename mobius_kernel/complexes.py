"""Helpers over the built-in ``complex`` type for the extended complex plane.

Python's ``complex`` already provides the field arithmetic, conjugation and
modulus. This module adds the point at infinity and the handful of vector
style operations the shape routines need (dot product, normalisation and a
quarter-turn rotation), treating a complex number as a point of the plane.
"""

from __future__ import annotations

import cmath
import math
from typing import Iterable, List

from .errors import DegenerateGeometryError

ZERO = complex(0.0, 0.0)
ONE = complex(1.0, 0.0)
INFINITY = complex(math.inf, math.inf)


def is_infinity(z: complex) -> bool:
    """Return ``True`` when ``z`` stands for the point at infinity."""

    return cmath.isinf(z)


def is_zero(z: complex) -> bool:
    return z == 0


def is_real(z: complex, eps: float) -> bool:
    return abs(z.imag) < eps


def abs_sq(z: complex) -> float:
    return z.real * z.real + z.imag * z.imag


def sqrt(z: complex) -> complex:
    """Principal square root."""

    return cmath.sqrt(z)


def distance(p: complex, q: complex) -> float:
    return abs(p - q)


def dot(p: complex, q: complex) -> float:
    """Euclidean dot product of ``p`` and ``q`` viewed as plane vectors."""

    return p.real * q.real + p.imag * q.imag


def rotate90(z: complex) -> complex:
    return complex(-z.imag, z.real)


def normalize(z: complex) -> complex:
    length = abs(z)
    if length == 0.0 or not math.isfinite(length):
        raise DegenerateGeometryError(f"cannot normalize vector {z!r}")
    return z / length


def linear_array(values: Iterable[complex]) -> List[float]:
    """Flatten ``values`` into ``[re0, im0, re1, im1, ...]``."""

    out: List[float] = []
    for value in values:
        out.append(float(value.real))
        out.append(float(value.imag))
    return out


def format_complex(z: complex) -> str:
    if is_infinity(z):
        return "inf"
    return f"({z.real:.6g}, {z.imag:.6g})"


__all__ = [
    "ZERO",
    "ONE",
    "INFINITY",
    "is_infinity",
    "is_zero",
    "is_real",
    "abs_sq",
    "sqrt",
    "distance",
    "dot",
    "rotate90",
    "normalize",
    "linear_array",
    "format_complex",
]
