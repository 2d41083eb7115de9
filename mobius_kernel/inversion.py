"""Inversions and Möbius maps applied to points and generalized circles.

Both kinds of map send generalized circles to generalized circles, so the
image of a shape is rebuilt from the images of three of its boundary points.
Three collinear images, or an image at infinity, mean the result is a
half-plane; its orientation is recovered from the image of an interior probe
point so that the normal keeps pointing to the excluded side.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterator, List, Optional, Sequence

from . import complexes as cx
from .config import KernelTolerances, resolve_tolerances
from .errors import DegenerateGeometryError, DomainError
from .logging_utils import apply_debug_logging
from .shapes import Circle, GeneralizedCircle, HalfPlane, circle_from_three_points
from .sl2c import SL2C

logger = logging.getLogger(__name__)

PointMap = Callable[[complex], complex]

# offsets along the boundary direction used to sample a half-plane
MOBIUS_SAMPLE_OFFSETS = (2.0, -4.0, 6.0)
INVERSION_SAMPLE_OFFSETS = (0.0, -20.0, 10.0)


def invert_point(shape: GeneralizedCircle, p: complex) -> complex:
    """Reflect ``p`` across ``shape``."""

    if shape.is_half_plane:
        return p - shape.normal * (2.0 * shape.signed_distance(p))
    d = p - shape.center
    len_sq = cx.abs_sq(d)
    if len_sq == 0.0:
        raise DomainError(f"cannot invert the center {cx.format_complex(p)} of {shape!r}")
    return shape.center + d * (shape.radius * shape.radius / len_sq)


def _boundary_samples(shape: GeneralizedCircle, offsets: Sequence[float]) -> List[complex]:
    if shape.is_half_plane:
        return [shape.boundary_point(t) for t in offsets]
    return list(shape.sample_points())


def _interior_probes(shape: GeneralizedCircle) -> Iterator[complex]:
    if shape.is_half_plane:
        yield shape.reference_point - shape.normal
        yield shape.reference_point - shape.normal * 2.0
    elif shape.inside_excluded:
        yield shape.center + shape.radius * 2.0
        yield shape.center + shape.radius * 3.0
    else:
        yield shape.center
        yield shape.center + shape.radius * 0.5


def _extended_image(point_map: PointMap, p: complex) -> complex:
    try:
        return point_map(p)
    except DomainError:
        # the center of an inversion circle goes to infinity
        return cx.INFINITY


def _images_on_line(images: Sequence[complex], eps: float, *, axis_checks: bool) -> bool:
    if any(cx.is_infinity(p) for p in images):
        return True
    p1, p2, p3 = images
    mv = p1 - p2
    if axis_checks:
        # chord and third image on a coordinate axis direction, as in the
        # original; this also accepts a vertical chord with p3 on the
        # imaginary axis even when the three points are not collinear
        if mv.imag == 0 and p3.imag == 0:
            return True
        if mv.real == 0 and p3.real == 0:
            return True
    return abs((p3.real - p1.real) * mv.imag - mv.real * (p3.imag - p1.imag)) < eps


def _oriented_half_plane(
    shape: GeneralizedCircle,
    images: Sequence[complex],
    reference: Optional[complex],
    point_map: PointMap,
) -> HalfPlane:
    finite = [p for p in images if not cx.is_infinity(p)]
    if len(finite) < 2:
        raise DegenerateGeometryError("fewer than two finite boundary images")
    if reference is None or cx.is_infinity(reference):
        reference = finite[0]
    normal = cx.normalize(cx.rotate90(finite[0] - finite[1]))

    for probe in _interior_probes(shape):
        inner = _extended_image(point_map, probe)
        if cx.is_infinity(inner) or inner == reference:
            continue
        if cx.dot(cx.normalize(inner - reference), normal) > 0:
            normal = -normal
        return HalfPlane(reference, normal)
    raise DegenerateGeometryError(f"cannot orient the half-plane image of {shape!r}")


def _oriented_circle(
    shape: GeneralizedCircle,
    images: Sequence[complex],
    point_map: PointMap,
    tol: KernelTolerances,
) -> Circle:
    circle = circle_from_three_points(*images, tolerances=tol)
    for probe in _interior_probes(shape):
        inner = _extended_image(point_map, probe)
        if cx.is_infinity(inner):
            # the kept region reaches infinity, so it is the exterior
            return replace(circle, inside_excluded=True)
        if circle.passes_through(inner, tol.collinearity_epsilon):
            continue
        return replace(circle, inside_excluded=cx.distance(inner, circle.center) > circle.radius)
    raise DegenerateGeometryError(f"cannot orient the circle image of {shape!r}")


def invert_shape(
    shape: GeneralizedCircle,
    other: GeneralizedCircle,
    *,
    tolerances: Optional[KernelTolerances] = None,
) -> GeneralizedCircle:
    """Reflect ``other`` across ``shape``.

    Collinearity of the sampled images is decided with the absolute
    ``collinearity_epsilon``. A circle passing within about ``1e-4`` of the
    mirror's center therefore inverts to a huge circle whose own inversion
    comes back as a half-plane. A circle through the center itself, within
    the relative tolerance, always gives a half-plane.
    """

    tol = resolve_tolerances(tolerances)

    def point_map(p: complex) -> complex:
        return invert_point(shape, p)

    samples = _boundary_samples(other, INVERSION_SAMPLE_OFFSETS)
    images = [_extended_image(point_map, p) for p in samples]
    through_center = (
        not shape.is_half_plane
        and not other.is_half_plane
        and other.passes_through(shape.center, tol.collinearity_epsilon)
    )
    if through_center or _images_on_line(images, tol.collinearity_epsilon, axis_checks=False):
        return _oriented_half_plane(other, images, images[0], point_map)
    return _oriented_circle(other, images, point_map, tol)


def apply_mobius(
    shape: GeneralizedCircle,
    m: SL2C,
    *,
    tolerances: Optional[KernelTolerances] = None,
) -> GeneralizedCircle:
    """Return the image of ``shape`` under the Möbius map ``m``.

    The result keeps track of the excluded side: a circle image has
    ``inside_excluded`` set when the kept side of ``shape`` contains the pole
    ``-d/c``, so ``apply_mobius(apply_mobius(h, m), m.inverse())`` gives back
    ``h`` for every half-plane ``h``.
    """

    tol = resolve_tolerances(tolerances)
    samples = _boundary_samples(shape, MOBIUS_SAMPLE_OFFSETS)
    images = [m.apply(p) for p in samples]
    through_pole = (
        not shape.is_half_plane
        and not cx.is_zero(m.c)
        and shape.passes_through(-m.d / m.c, tol.collinearity_epsilon)
    )
    if not through_pole and not _images_on_line(images, tol.collinearity_epsilon, axis_checks=True):
        return _oriented_circle(shape, images, m.apply, tol)

    reference = m.apply(shape.reference_point) if shape.is_half_plane else None
    return _oriented_half_plane(shape, images, reference, m.apply)


def mobius_on_circle(m: SL2C, circle: Circle) -> Circle:
    """Closed-form image of an ordinary circle that avoids the pole of ``m``.

    Circles through ``-d/c`` map to lines; use :func:`apply_mobius` for them.
    """

    r = circle.radius
    if cx.is_zero(m.c):
        return Circle((m.a * circle.center + m.b) / m.d, r * abs(m.a / m.d), circle.inside_excluded)

    pole = -m.d / m.c
    denom = (m.d / m.c + circle.center).conjugate()
    if cx.is_zero(denom):
        # pole at the center: its reflection is infinity, which maps to a / c
        new_center = m.a / m.c
    else:
        z = circle.center - (r * r) / denom
        new_center = m.apply(z)
    if cx.is_infinity(new_center):
        raise DegenerateGeometryError(f"{circle!r} passes through the pole of {m!r}")
    edge = m.apply(circle.center + r)
    # the kept region flips to the exterior when it holds the pole
    pole_inside = cx.distance(pole, circle.center) < r
    return Circle(new_center, cx.distance(new_center, edge), pole_inside != circle.inside_excluded)


apply_debug_logging(globals(), logger=logger, skip={"_images_on_line", "_interior_probes", "_extended_image"})


__all__ = [
    "MOBIUS_SAMPLE_OFFSETS",
    "INVERSION_SAMPLE_OFFSETS",
    "invert_point",
    "invert_shape",
    "apply_mobius",
    "mobius_on_circle",
]
