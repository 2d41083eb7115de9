import cmath
import logging
import math

import pytest

import mobius_kernel.classifier as classifier_module
from mobius_kernel import (
    IDENTITY,
    DegenerateParabolicError,
    DomainError,
    Elliptic,
    Hyperbolic,
    KernelTolerances,
    Loxodromic,
    Parabolic,
    SL2C,
    classify,
    discriminant,
    get_tolerances,
    multiplier_invariant,
    null_observer,
)

M1 = SL2C(1, 0, -2j, 1)
M2 = SL2C(1 - 1j, 1, 1, 1 + 1j)


def _with_invariant(k):
    """Unit-determinant matrix ``[[tr, 1], [-1, 0]]`` with ``tr^2 / 2 - 1 = k``."""

    return SL2C(cmath.sqrt(2 * (k + 1)), 1, -1, 0)


def _recorder():
    events = []

    def observer(event, result):
        events.append((event, result))

    return events, observer


def test_reference_matrices_are_parabolic():
    for m in (M1, M2):
        assert discriminant(m) == 0
        result = classify(m, observer=null_observer)
        assert isinstance(result, Parabolic)
        assert result.kind == "parabolic"
        assert result.has_geometry


def test_identity_is_a_degenerate_parabolic():
    events, observer = _recorder()
    result = classify(IDENTITY, observer=observer)
    assert isinstance(result, Parabolic)
    assert result.translation == 0
    assert result.degenerate
    assert not result.has_geometry
    assert events == [("degenerate-parabolic", result)]


def test_pure_translation_keeps_b_and_has_no_geometry():
    m = SL2C(1, 2 + 1j, 0, 1)
    result = classify(m, observer=null_observer)
    assert isinstance(result, Parabolic)
    assert result.translation == 2 + 1j
    assert not result.degenerate
    assert result.fixed_point is None
    assert result.conjugator is None
    assert result.inner_circle is None


def test_rotation_is_elliptic():
    theta = math.pi / 3
    m = SL2C(math.cos(theta), -math.sin(theta), math.sin(theta), math.cos(theta))
    result = classify(m, observer=null_observer)
    assert isinstance(result, Elliptic)
    assert abs(result.multiplier_invariant - math.cos(2 * theta)) < 1e-12
    assert abs(result.fixed_point_plus - 1j) < 1e-12
    assert abs(result.fixed_point_minus + 1j) < 1e-12


def test_real_trace_above_two_is_hyperbolic():
    result = classify(SL2C(2, 1, 1, 1), observer=null_observer)
    assert isinstance(result, Hyperbolic)
    assert result.multiplier_invariant == 3.5


def test_non_real_invariant_is_loxodromic():
    m = SL2C(2 + 1j, 1, 1, 0.8 - 0.4j)
    result = classify(m, observer=null_observer)
    assert isinstance(result, Loxodromic)
    assert abs(result.multiplier_invariant - (2.74 + 1.68j)) < 1e-12
    s = result.conjugator
    assert abs(s.apply(result.fixed_point_minus)) < 1e-9


def test_classification_returns_exactly_one_variant():
    variants = (Parabolic, Elliptic, Hyperbolic, Loxodromic)
    for m in (M1, M2, IDENTITY, SL2C(2, 1, 1, 1), SL2C(2 + 1j, 1, 1, 0.8 - 0.4j), _with_invariant(0.5j)):
        result = classify(m, observer=null_observer)
        assert sum(isinstance(result, cls) for cls in variants) == 1


def test_elliptic_threshold_is_one_sided():
    # |k| - 1 < eps holds for every small |k|, even with a non-real invariant
    result = classify(_with_invariant(0.5j), observer=null_observer)
    assert isinstance(result, Elliptic)
    assert abs(result.multiplier_invariant - 0.5j) < 1e-12


def test_elliptic_threshold_boundary():
    assert isinstance(classify(_with_invariant(1 + 5e-7), observer=null_observer), Elliptic)
    assert isinstance(classify(_with_invariant(1 + 1e-4), observer=null_observer), Hyperbolic)
    assert isinstance(classify(_with_invariant(-3), observer=null_observer), Hyperbolic)


def test_elliptic_threshold_follows_tolerances():
    strict = KernelTolerances(elliptic_threshold=1e-9)
    result = classify(_with_invariant(1 + 5e-7), observer=null_observer, tolerances=strict)
    assert isinstance(result, Hyperbolic)


def test_discriminant_at_noise_level_is_not_parabolic():
    m = SL2C(1, 1e-12, 1, 1 + 1e-12)
    assert discriminant(m) != 0
    assert abs(discriminant(m)) < 1e-10
    result = classify(m, observer=null_observer)
    assert isinstance(result, Elliptic)
    assert abs(multiplier_invariant(m) - 1) < 1e-10


def test_non_unit_determinant_is_rejected():
    with pytest.raises(DomainError):
        classify(SL2C(2, 0, 0, 2), observer=null_observer)


def test_observer_receives_each_kind():
    events, observer = _recorder()
    classify(M1, observer=observer)
    classify(SL2C(2, 1, 1, 1), observer=observer)
    classify(SL2C(2 + 1j, 1, 1, 0.8 - 0.4j), observer=observer)
    classify(_with_invariant(0.2), observer=observer)
    assert [event for event, _ in events] == ["parabolic", "hyperbolic", "loxodromic", "elliptic"]


def test_degenerate_parabolic_error_is_reported_not_raised(monkeypatch):
    def _raise(m, tolerances=None):
        raise DegenerateParabolicError("zero translation", fixed_point=0j, conjugator=IDENTITY)

    monkeypatch.setattr(classifier_module, "build_parabolic", _raise)
    events, observer = _recorder()
    result = classify(M1, observer=observer)
    assert result.degenerate
    assert result.fixed_point == 0
    assert result.conjugator == IDENTITY
    assert [event for event, _ in events] == ["degenerate-parabolic"]
    # the next classification is unaffected
    assert isinstance(classify(SL2C(2, 1, 1, 1), observer=observer), Hyperbolic)


def test_default_observer_logs_the_kind(caplog):
    caplog.set_level(logging.INFO, logger="mobius_kernel.classifier")
    classify(SL2C(2, 1, 1, 1))
    assert any(record.getMessage().startswith("hyperbolic") for record in caplog.records)


def test_get_tolerances_returns_a_copy():
    tolerances = get_tolerances()
    tolerances.elliptic_threshold = 10.0
    assert get_tolerances().elliptic_threshold == 1e-6
