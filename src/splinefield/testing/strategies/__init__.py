"""Hypothesis strategies for spline testing."""

from ._knot_data import knot_data
from ._real_numbers import real_numbers
from ._strictly_increasing_knots import strictly_increasing_knots

__all__ = [
    "knot_data",
    "real_numbers",
    "strictly_increasing_knots",
]
