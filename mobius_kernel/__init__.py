from .complexes import INFINITY, ONE, ZERO
from .config import KernelTolerances, get_tolerances, set_tolerances
from .errors import DegenerateGeometryError, DegenerateParabolicError, DomainError, MobiusKernelError
from .sl2c import SL2C, IDENTITY
from .shapes import Circle, HalfPlane, GeneralizedCircle, circle_from_three_points
from .inversion import apply_mobius, invert_point, invert_shape, mobius_on_circle
from .fixed_points import conjugator_to_infinity, conjugator_to_zero_infinity, fix_minus, fix_plus
from .model import (
    UNIFORM_ARRAY_SIZE,
    Elliptic,
    Hyperbolic,
    Loxodromic,
    Parabolic,
    TransformationClassification,
)
from .parabolic import build_parabolic
from .classifier import ClassificationObserver, classify, discriminant, log_observer, multiplier_invariant, null_observer

__all__ = [
    'INFINITY',
    'ONE',
    'ZERO',
    'KernelTolerances',
    'get_tolerances',
    'set_tolerances',
    'MobiusKernelError',
    'DomainError',
    'DegenerateGeometryError',
    'DegenerateParabolicError',
    'SL2C',
    'IDENTITY',
    'Circle',
    'HalfPlane',
    'GeneralizedCircle',
    'circle_from_three_points',
    'invert_point',
    'invert_shape',
    'apply_mobius',
    'mobius_on_circle',
    'fix_plus',
    'fix_minus',
    'conjugator_to_infinity',
    'conjugator_to_zero_infinity',
    'UNIFORM_ARRAY_SIZE',
    'Parabolic',
    'Elliptic',
    'Hyperbolic',
    'Loxodromic',
    'TransformationClassification',
    'build_parabolic',
    'ClassificationObserver',
    'classify',
    'discriminant',
    'multiplier_invariant',
    'log_observer',
    'null_observer',
]
