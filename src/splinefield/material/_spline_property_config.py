from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from torch import Tensor

from splinefield.spline import NATURAL


@dataclass
class SplinePropertyConfig:
    """Parameters of a property defined by cubic spline interpolation.

    Attributes
    ----------
    x : Tensor or sequence of float
        Abscissae of the spline knots, strictly increasing.
    y : Tensor or sequence of float
        Property values at the knots, e.g. a free energy f(c).
    property_name : str
        Name under which the property is published, e.g. ``"F"``.
    variable : str
        Name of the coupled variable the property depends on, e.g. ``"c"``.
        Derivative names are built from it.
    boundary_left : float, optional
        First derivative at x[0]. The default sentinel 1e30 gives a natural
        end.
    boundary_right : float, optional
        First derivative at x[-1]. The default sentinel 1e30 gives a natural
        end.
    spline_variable : str, optional
        Name of the variable the spline is meant to interpolate in. When set
        and different from ``variable``, a warning is issued and ``variable``
        is used.
    derivative_order : int
        Highest derivative published by :meth:`SplineProperty.compute`.
        Default is 2. Orders above 2 publish identically zero fields.
    warn_on_clamp : bool
        Warn once per property on the first field value outside the spline
        domain. Default is True.

    Examples
    --------
    >>> config = SplinePropertyConfig(
    ...     x=[0.0, 0.5, 1.0],
    ...     y=[0.0, -0.25, 0.0],
    ...     property_name="F",
    ...     variable="c",
    ... )
    """

    x: Union[Tensor, Sequence[float]]
    y: Union[Tensor, Sequence[float]]
    property_name: str
    variable: str
    boundary_left: Optional[float] = NATURAL
    boundary_right: Optional[float] = NATURAL
    spline_variable: Optional[str] = None
    derivative_order: int = 2
    warn_on_clamp: bool = True

    def __post_init__(self):
        if not self.property_name:
            raise ValueError("property_name must be a non-empty string")
        if not self.variable:
            raise ValueError("variable must be a non-empty string")
        if self.derivative_order < 0:
            raise ValueError(
                f"derivative_order must be non-negative, "
                f"got {self.derivative_order}"
            )
