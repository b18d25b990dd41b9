"""Boundary sentinel for natural cubic splines."""

import math
from typing import Optional, Union

from torch import Tensor

NATURAL = 1e30
"""Boundary slope sentinel requesting a natural end (zero curvature)."""


def is_natural(slope: Optional[Union[float, Tensor]]) -> bool:
    """Return True if a boundary slope requests a natural end.

    ``None``, infinities and any value of magnitude at least :data:`NATURAL`
    select the natural condition; every other value is a clamped first
    derivative.
    """
    if slope is None:
        return True
    value = float(slope)
    return math.isinf(value) or abs(value) >= NATURAL
