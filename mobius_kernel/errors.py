"""Exception hierarchy shared across the kernel."""

from __future__ import annotations


class MobiusKernelError(Exception):
    """Base class for every error raised by :mod:`mobius_kernel`."""


class DomainError(MobiusKernelError, ValueError):
    """Raised when an operation is invoked outside its mathematical domain."""


class DegenerateGeometryError(DomainError):
    """Raised when a shape cannot be built from the supplied points."""


class DegenerateParabolicError(DomainError):
    """Raised when a parabolic map has no well-defined bounding circles."""

    def __init__(self, message: str, *, fixed_point: object = None, conjugator: object = None):
        super().__init__(message)
        self.fixed_point = fixed_point
        self.conjugator = conjugator


__all__ = [
    "MobiusKernelError",
    "DomainError",
    "DegenerateGeometryError",
    "DegenerateParabolicError",
]
