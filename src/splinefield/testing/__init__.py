"""Testing utilities for splinefield.

Hypothesis strategies generating valid spline input data live in
:mod:`splinefield.testing.strategies`.
"""

from .strategies import knot_data, real_numbers, strictly_increasing_knots

__all__ = [
    "knot_data",
    "real_numbers",
    "strictly_increasing_knots",
]
