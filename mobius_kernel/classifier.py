"""Classification of SL(2, C) matrices into the four Möbius map types."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from . import complexes as cx
from .config import KernelTolerances, resolve_tolerances
from .errors import DegenerateParabolicError, DomainError
from .fixed_points import fix_minus, fix_plus
from .model import Elliptic, Hyperbolic, Loxodromic, Parabolic, TransformationClassification
from .parabolic import build_parabolic
from .sl2c import SL2C

logger = logging.getLogger(__name__)

ClassificationObserver = Callable[[str, TransformationClassification], None]


def log_observer(event: str, result: TransformationClassification) -> None:
    logger.info("%s: %r", event, result.matrix)


def null_observer(event: str, result: TransformationClassification) -> None:
    return None


def discriminant(m: SL2C) -> complex:
    """Discriminant ``(d - a)^2 + 4bc`` of the fixed-point quadratic."""

    da = m.d - m.a
    return da * da + 4 * m.b * m.c


def multiplier_invariant(m: SL2C) -> complex:
    """``k = tr^2 / 2 - 1``."""

    tr = m.trace()
    return tr * tr * 0.5 - 1


def classify(
    m: SL2C,
    *,
    observer: Optional[ClassificationObserver] = None,
    tolerances: Optional[KernelTolerances] = None,
) -> TransformationClassification:
    """Classify ``m`` as parabolic, elliptic, hyperbolic or loxodromic.

    The parabolic test compares the discriminant with zero exactly, and the
    elliptic test is the one-sided ``|k| - 1 < elliptic_threshold``; both
    reproduce the reference traces.
    """

    tol = resolve_tolerances(tolerances)
    notify = observer or log_observer
    if not m.is_unimodular(tol.determinant_tolerance):
        raise DomainError(f"{m!r} has determinant {cx.format_complex(m.determinant())}, expected 1")

    if cx.is_zero(m.c) or cx.is_zero(discriminant(m)):
        try:
            result = build_parabolic(m, tolerances=tol)
        except DegenerateParabolicError as exc:
            degenerate = Parabolic(
                matrix=m,
                translation=cx.ZERO,
                fixed_point=exc.fixed_point,
                conjugator=exc.conjugator,
                degenerate=True,
            )
            notify("degenerate-parabolic", degenerate)
            return degenerate
        notify("degenerate-parabolic" if result.degenerate else "parabolic", result)
        return result

    k = multiplier_invariant(m)
    if abs(k) - 1 < tol.elliptic_threshold:
        cls = Elliptic
    elif cx.is_real(k, tol.real_epsilon):
        cls = Hyperbolic
    else:
        cls = Loxodromic
    result = cls(
        matrix=m,
        fixed_point_plus=fix_plus(m),
        fixed_point_minus=fix_minus(m),
        multiplier_invariant=k,
    )
    notify(result.kind, result)
    return result


__all__ = [
    "ClassificationObserver",
    "log_observer",
    "null_observer",
    "discriminant",
    "multiplier_invariant",
    "classify",
]
