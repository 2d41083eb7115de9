"""Classification results produced for a single matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Union

import numpy as np

from . import complexes as cx
from .errors import DegenerateParabolicError
from .fixed_points import conjugator_to_zero_infinity
from .shapes import GeneralizedCircle
from .sl2c import SL2C

UNIFORM_CIRCLE_SIZE = 5
UNIFORM_ARRAY_SIZE = 3 * UNIFORM_CIRCLE_SIZE + 8 + 2 + 8


def _shape_uniforms(shape: GeneralizedCircle) -> List[float]:
    # [is_half_plane, x, y, r, r^2]; a half-plane stores its normal in place of r, r^2
    if shape.is_half_plane:
        p = shape.reference_point
        n = shape.normal
        return [1.0, p.real, p.imag, n.real, n.imag]
    c = shape.center
    return [0.0, c.real, c.imag, shape.radius, shape.radius * shape.radius]


@dataclass(frozen=True)
class Parabolic:
    """Parabolic map, conjugate to the translation ``w -> w + translation``.

    When ``c = 0`` the matrix already is a translation fixing infinity and only
    ``translation`` is set. ``degenerate`` marks a zero translation, for which
    no bounding circles exist.
    """

    matrix: SL2C
    translation: complex
    fixed_point: Optional[complex] = None
    conjugator: Optional[SL2C] = None
    conjugated: Optional[SL2C] = None
    inner_circle: Optional[GeneralizedCircle] = None
    outer_circle: Optional[GeneralizedCircle] = None
    mutual_inversion_image: Optional[GeneralizedCircle] = None
    degenerate: bool = False

    kind: ClassVar[str] = "parabolic"

    @property
    def has_geometry(self) -> bool:
        return self.inner_circle is not None

    def uniform_array(self) -> np.ndarray:
        """Flatten the geometry into the fixed 33-float uniform layout.

        Order: inner, outer and mutual-inversion shapes (5 floats each), the
        conjugator, the translation and the conjugator's inverse.
        """

        if not self.has_geometry or self.conjugator is None:
            raise DegenerateParabolicError(f"{self.matrix!r} has no parabolic geometry to flatten")
        values: List[float] = []
        for shape in (self.inner_circle, self.outer_circle, self.mutual_inversion_image):
            values.extend(_shape_uniforms(shape))
        values.extend(self.conjugator.linear_array)
        values.extend(cx.linear_array((self.translation,)))
        values.extend(self.conjugator.inverse().linear_array)
        return np.asarray(values, dtype=float)


@dataclass(frozen=True)
class _TwoFixedPoints:
    matrix: SL2C
    fixed_point_plus: complex
    fixed_point_minus: complex
    multiplier_invariant: complex

    @property
    def conjugator(self) -> SL2C:
        """Matrix sending the minus fixed point to 0 and the plus one to infinity."""

        return conjugator_to_zero_infinity(self.fixed_point_minus, self.fixed_point_plus)


@dataclass(frozen=True)
class Elliptic(_TwoFixedPoints):
    kind: ClassVar[str] = "elliptic"


@dataclass(frozen=True)
class Hyperbolic(_TwoFixedPoints):
    kind: ClassVar[str] = "hyperbolic"


@dataclass(frozen=True)
class Loxodromic(_TwoFixedPoints):
    kind: ClassVar[str] = "loxodromic"


TransformationClassification = Union[Parabolic, Elliptic, Hyperbolic, Loxodromic]


__all__ = [
    "UNIFORM_ARRAY_SIZE",
    "Parabolic",
    "Elliptic",
    "Hyperbolic",
    "Loxodromic",
    "TransformationClassification",
]
