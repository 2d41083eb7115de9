"""Fixed points of a Möbius map and the conjugators built from them.

The fixed points solve ``(az + b) / (cz + d) = z``, i.e.
``c z^2 + (d - a) z - b = 0``, whose roots are
``(a - d ± sqrt(tr^2 - 4)) / (2c)`` with ``tr = a + d``.
"""

from __future__ import annotations

from . import complexes as cx
from .errors import DomainError
from .sl2c import SL2C


def _fixed_point(m: SL2C, sign: float) -> complex:
    if cx.is_zero(m.c):
        raise DomainError(f"{m!r} has c = 0; its fixed point is infinity")
    tr = m.trace()
    root = cx.sqrt(tr * tr - 4)
    return (m.a - m.d + sign * root) / (2 * m.c)


def fix_plus(m: SL2C) -> complex:
    return _fixed_point(m, 1.0)


def fix_minus(m: SL2C) -> complex:
    return _fixed_point(m, -1.0)


def conjugator_to_infinity(fix: complex) -> SL2C:
    """Matrix ``[[0, 1], [1, -fix]]`` sending ``fix`` to infinity."""

    return SL2C(cx.ZERO, cx.ONE, cx.ONE, -fix)


def conjugator_to_zero_infinity(fix_minus_point: complex, fix_plus_point: complex) -> SL2C:
    """Matrix sending ``fix_minus_point`` to zero and ``fix_plus_point`` to infinity."""

    return SL2C(cx.ONE, -fix_minus_point, cx.ONE, -fix_plus_point)


__all__ = [
    "fix_plus",
    "fix_minus",
    "conjugator_to_infinity",
    "conjugator_to_zero_infinity",
]
