"""splinefield: differentiable cubic spline properties for PyTorch."""

from . import (
    material,
    spline,
)

__all__ = [
    "material",
    "spline",
]

__version__ = "0.1.0"
