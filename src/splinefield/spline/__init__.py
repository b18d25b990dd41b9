"""Differentiable cubic spline interpolation for PyTorch tensors.

A spline is built once from strictly increasing knots and then evaluated
many times, for whole fields of query points at once. Queries outside the
knot range are clamped to the nearest end; the engine never extrapolates.

Convenience Functions
---------------------
cubic_spline
    Create a cubic spline interpolator from data (fit + callable).

Cubic Splines
-------------
cubic_spline_fit
    Fit a natural or clamped cubic spline to data points.
cubic_spline_evaluate
    Evaluate a cubic spline at query points.
cubic_spline_derivative
    Evaluate derivatives of a cubic spline at query points.
solve_tridiagonal
    Thomas algorithm for tridiagonal systems.

Boundary Conditions
-------------------
NATURAL
    Boundary slope sentinel selecting a natural end.
is_natural
    Test whether a boundary slope selects a natural end.

Data Types
----------
CubicSpline
    Piecewise cubic interpolant in second-derivative form.

Exceptions
----------
SplineError
    Base exception for spline operations.
ConstructionError
    Knot data cannot define a spline.
LengthMismatchError
    Abscissae and ordinates differ in length.
InsufficientPointsError
    Fewer than two knots.
NotStrictlyIncreasingError
    Knots contain duplicates or inversions.
"""

# Import base exception first
from ._spline_error import SplineError

# Import exception subclasses
from ._construction_error import ConstructionError
from ._insufficient_points_error import InsufficientPointsError
from ._length_mismatch_error import LengthMismatchError
from ._not_strictly_increasing_error import NotStrictlyIncreasingError

# Import spline implementations
from ._cubic_spline import (
    CubicSpline,
    cubic_spline,
    cubic_spline_derivative,
    cubic_spline_evaluate,
    cubic_spline_fit,
)
from ._natural import NATURAL, is_natural
from ._solve_tridiagonal import solve_tridiagonal

__all__ = [
    "NATURAL",
    "ConstructionError",
    "CubicSpline",
    "InsufficientPointsError",
    "LengthMismatchError",
    "NotStrictlyIncreasingError",
    "SplineError",
    "cubic_spline",
    "cubic_spline_derivative",
    "cubic_spline_evaluate",
    "cubic_spline_fit",
    "is_natural",
    "solve_tridiagonal",
]
