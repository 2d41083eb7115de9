"""Generalized circles of the extended complex plane.

A generalized circle is either an ordinary :class:`Circle` or a
:class:`HalfPlane`, i.e. a circle through infinity. The half-plane keeps an
oriented unit normal that points towards the *excluded* side::

          ^ normal
          |
    ------+------  boundary
    /////////////  kept side
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

from . import complexes as cx
from .config import KernelTolerances, resolve_tolerances
from .errors import DegenerateGeometryError

_DIAGONAL = math.sqrt(2.0) / 2.0


@dataclass(frozen=True)
class Circle:
    """Circle bounding a disk.

    The kept region is the open disk unless ``inside_excluded`` is set, in
    which case it is the exterior (the side containing infinity). The flag
    lets the image of a half-plane whose kept side holds the pole of a Möbius
    map be mapped back with the right orientation.
    """

    center: complex
    radius: float
    inside_excluded: bool = False

    kind: ClassVar[str] = "circle"
    is_half_plane: ClassVar[bool] = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", complex(self.center))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "inside_excluded", bool(self.inside_excluded))
        if not math.isfinite(self.radius) or self.radius < 0.0:
            raise DegenerateGeometryError(f"invalid circle radius {self.radius!r}")
        if cx.is_infinity(self.center):
            raise DegenerateGeometryError("circle center must be finite")

    def sample_points(self) -> Tuple[complex, complex, complex]:
        """Three boundary points at 45, 225 and 315 degrees."""

        k = self.radius * _DIAGONAL
        return (
            self.center + complex(k, k),
            self.center + complex(-k, -k),
            self.center + complex(k, -k),
        )

    def passes_through(self, p: complex, eps: float) -> bool:
        """Return ``True`` when ``p`` lies on the circle, relative to the radius."""

        if cx.is_infinity(p):
            return False
        return abs(cx.distance(p, self.center) - self.radius) <= eps * self.radius

    def __repr__(self) -> str:
        suffix = ", inside_excluded=True" if self.inside_excluded else ""
        return f"Circle(center={cx.format_complex(self.center)}, radius={self.radius:.6g}{suffix})"


@dataclass(frozen=True)
class HalfPlane:
    reference_point: complex
    normal: complex

    kind: ClassVar[str] = "half-plane"
    is_half_plane: ClassVar[bool] = True
    radius: ClassVar[float] = math.inf
    center: ClassVar[complex] = cx.INFINITY

    def __post_init__(self) -> None:
        object.__setattr__(self, "reference_point", complex(self.reference_point))
        if cx.is_infinity(self.reference_point):
            raise DegenerateGeometryError("half-plane reference point must be finite")
        object.__setattr__(self, "normal", cx.normalize(complex(self.normal)))

    @property
    def boundary_direction(self) -> complex:
        return cx.rotate90(self.normal)

    def boundary_point(self, offset: float) -> complex:
        return self.reference_point + self.boundary_direction * offset

    def signed_distance(self, p: complex) -> float:
        """Positive on the excluded side, negative on the kept side."""

        return cx.dot(p - self.reference_point, self.normal)

    def __repr__(self) -> str:
        return (
            f"HalfPlane(reference_point={cx.format_complex(self.reference_point)}, "
            f"normal={cx.format_complex(self.normal)})"
        )


GeneralizedCircle = Union[Circle, HalfPlane]


def circle_from_three_points(
    a: complex,
    b: complex,
    c: complex,
    *,
    tolerances: Optional[KernelTolerances] = None,
) -> Circle:
    """Return the circumcircle of ``a``, ``b`` and ``c``.

    Collinear or infinite inputs have no circumcircle and raise
    :class:`DegenerateGeometryError`.
    """

    tol = resolve_tolerances(tolerances)
    if any(cx.is_infinity(p) for p in (a, b, c)):
        raise DegenerateGeometryError("circumcircle through the point at infinity")

    la2 = cx.abs_sq(b - c)
    lb2 = cx.abs_sq(a - c)
    lc2 = cx.abs_sq(a - b)
    wa = la2 * (lb2 + lc2 - la2)
    wb = lb2 * (la2 + lc2 - lb2)
    wc = lc2 * (la2 + lb2 - lc2)
    denom = wa + wb + wc
    scale = (la2 + lb2 + lc2) ** 2
    if scale == 0.0 or abs(denom) <= tol.circumcircle_epsilon * scale:
        raise DegenerateGeometryError(
            f"points {cx.format_complex(a)}, {cx.format_complex(b)}, {cx.format_complex(c)} are collinear"
        )

    center = (wa * a + wb * b + wc * c) / denom
    return Circle(center, cx.distance(center, a))


def shape_radius(shape: GeneralizedCircle) -> float:
    return math.inf if shape.is_half_plane else shape.radius


__all__ = [
    "Circle",
    "HalfPlane",
    "GeneralizedCircle",
    "circle_from_three_points",
    "shape_radius",
]
