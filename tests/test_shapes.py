import cmath
import math

import pytest

from mobius_kernel import (
    Circle,
    DegenerateGeometryError,
    DomainError,
    HalfPlane,
    INFINITY,
    circle_from_three_points,
)
from mobius_kernel.complexes import dot


def test_circle_from_points_on_known_circle():
    center = 1 - 2j
    radius = 3.0
    pts = [center + radius * cmath.exp(1j * theta) for theta in (0.3, 1.7, 4.0)]
    circle = circle_from_three_points(*pts)
    assert math.isclose(circle.radius, radius, rel_tol=1e-9)
    assert abs(circle.center - center) < 1e-9


def test_circle_from_collinear_points_is_a_domain_error():
    with pytest.raises(DegenerateGeometryError):
        circle_from_three_points(0, 1 + 1j, 2 + 2j)
    with pytest.raises(DomainError):
        circle_from_three_points(1, 1, 1)


def test_circle_from_points_rejects_infinity():
    with pytest.raises(DegenerateGeometryError):
        circle_from_three_points(0, 1, INFINITY)


def test_half_plane_normal_is_unit_and_orthogonal_to_boundary():
    hp = HalfPlane(0.5, 3 - 4j)
    assert math.isclose(abs(hp.normal), 1.0)
    assert math.isclose(dot(hp.normal, hp.boundary_direction), 0.0, abs_tol=1e-15)
    assert hp.radius == math.inf
    assert hp.is_half_plane and not Circle(0, 1).is_half_plane


def test_half_plane_with_zero_normal_is_rejected():
    with pytest.raises(DegenerateGeometryError):
        HalfPlane(0, 0)


def test_circle_rejects_negative_radius():
    with pytest.raises(DegenerateGeometryError):
        Circle(0, -1.0)


def test_signed_distance_is_positive_on_excluded_side():
    hp = HalfPlane(0, 1j)
    assert hp.signed_distance(2j) > 0
    assert hp.signed_distance(-2j) < 0
    assert hp.signed_distance(5) == 0


def test_circle_passes_through_is_relative_to_radius():
    big = Circle(0, 1e6)
    assert big.passes_through(1e6 + 1e-3, 1e-8)
    assert not big.passes_through(1e6 + 1.0, 1e-8)
    assert not Circle(0, 1).passes_through(INFINITY, 1e-8)


def test_circle_keeps_interior_by_default():
    assert not Circle(0, 1).inside_excluded
    assert "inside_excluded=True" in repr(Circle(0, 1, inside_excluded=True))
