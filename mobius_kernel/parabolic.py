"""Bounding geometry of a parabolic Möbius map.

The map is conjugated by ``s = [[0, 1], [1, -fix]]`` so that its fixed point
goes to infinity and it becomes a translation ``w -> w + t``. Two half-planes
perpendicular to ``t`` (through 0 and through ``t / 2``) are pulled back with
``s^-1``; in the original frame they become two generalized circles tangent at
the fixed point. The smaller one reflected across the larger one gives a third
tangent curve used as a rendering reference.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import complexes as cx
from .config import KernelTolerances, resolve_tolerances
from .errors import DegenerateParabolicError
from .fixed_points import conjugator_to_infinity, fix_minus
from .inversion import apply_mobius, invert_shape
from .logging_utils import apply_debug_logging
from .model import Parabolic
from .shapes import HalfPlane, shape_radius
from .sl2c import SL2C

logger = logging.getLogger(__name__)


def build_parabolic(m: SL2C, *, tolerances: Optional[KernelTolerances] = None) -> Parabolic:
    """Return the :class:`Parabolic` record for ``m``.

    Raises :class:`DegenerateParabolicError` when the conjugated translation
    vanishes.
    """

    tol = resolve_tolerances(tolerances)
    if cx.is_zero(m.c):
        # already a translation fixing infinity
        return Parabolic(matrix=m, translation=m.b, degenerate=cx.is_zero(m.b))

    fix = fix_minus(m)
    s = conjugator_to_infinity(fix)
    s_inv = s.inverse()
    t = (s @ m @ s_inv).normalized()
    translation = t.b
    logger.info(
        "Parabolic fixed point %s, translation %s",
        cx.format_complex(fix),
        cx.format_complex(translation),
    )
    if cx.is_zero(translation):
        raise DegenerateParabolicError(
            f"{m!r} is the identity after conjugation", fixed_point=fix, conjugator=s
        )

    hp1 = HalfPlane(cx.ZERO, translation)
    hp2 = HalfPlane(translation * 0.5, -translation)
    shape1 = apply_mobius(hp1, s_inv, tolerances=tol)
    shape2 = apply_mobius(hp2, s_inv, tolerances=tol)

    if shape_radius(shape1) < shape_radius(shape2):
        inner, outer = shape1, shape2
    else:
        inner, outer = shape2, shape1
    mirrored = invert_shape(outer, inner, tolerances=tol)
    logger.debug("Parabolic shapes inner=%r outer=%r mirrored=%r", inner, outer, mirrored)

    return Parabolic(
        matrix=m,
        translation=translation,
        fixed_point=fix,
        conjugator=s,
        conjugated=t,
        inner_circle=inner,
        outer_circle=outer,
        mutual_inversion_image=mirrored,
    )


apply_debug_logging(globals(), logger=logger)


__all__ = ["build_parabolic"]
