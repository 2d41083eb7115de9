"""Numeric tolerances used by the classifier and the shape routines."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class KernelTolerances:
    """Thresholds for the heuristic decisions made by the kernel.

    Results close to a threshold are inherently ambiguous; the defaults
    reproduce the reference classification traces.
    """

    elliptic_threshold: float = 1e-6
    collinearity_epsilon: float = 1e-8
    real_epsilon: float = 1e-7
    circumcircle_epsilon: float = 1e-12
    determinant_tolerance: float = 1e-6


_TOLERANCES = KernelTolerances()


def get_tolerances() -> KernelTolerances:
    return copy.deepcopy(_TOLERANCES)


def set_tolerances(tolerances: KernelTolerances) -> None:
    global _TOLERANCES
    _TOLERANCES = copy.deepcopy(tolerances)


def resolve_tolerances(tolerances: Optional[KernelTolerances]) -> KernelTolerances:
    return tolerances if tolerances is not None else _TOLERANCES


__all__ = [
    "KernelTolerances",
    "get_tolerances",
    "set_tolerances",
    "resolve_tolerances",
]
