"""Cubic spline interpolation."""

from typing import Callable, Optional, Sequence, Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._natural import NATURAL
from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_fit import cubic_spline_fit


@tensorclass
class CubicSpline:
    """Piecewise cubic interpolant in second-derivative form.

    Attributes
    ----------
    knots : Tensor
        Abscissae x, shape (n_knots,). Strictly increasing, n_knots >= 2.
    knot_values : Tensor
        Ordinates y at the knots, shape (n_knots,).
    second_derivatives : Tensor
        Second derivatives y2 at the knots, shape (n_knots,). Solved once by
        :func:`cubic_spline_fit`; on [x[i], x[i+1]] the spline is

        a*y[i] + b*y[i+1] + ((a^3 - a)*y2[i] + (b^3 - b)*y2[i+1]) * h^2 / 6

        with h = x[i+1] - x[i], a = (x[i+1] - t)/h and b = (t - x[i])/h.
    boundary_values : Tensor
        Requested first derivatives at the left and right end, shape (2,).
        An entry equal to the natural sentinel (1e30) marks a natural end.

    Instances are built by :func:`cubic_spline_fit` and are not modified
    afterwards, so they can be shared freely between readers.
    """

    knots: Tensor
    knot_values: Tensor
    second_derivatives: Tensor
    boundary_values: Tensor

    @property
    def domain_min(self) -> Tensor:
        return self.knots[0]

    @property
    def domain_max(self) -> Tensor:
        return self.knots[-1]


def cubic_spline(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    boundary_left: Optional[float] = NATURAL,
    boundary_right: Optional[float] = NATURAL,
) -> Callable[[Union[Tensor, float]], Tensor]:
    """Create a cubic spline interpolator from data.

    This is a convenience function that fits a cubic spline and returns
    a callable that evaluates it.

    Parameters
    ----------
    x : Tensor or sequence of float
        Data x-coordinates. Must be strictly monotonically increasing.
    y : Tensor or sequence of float
        Data y-values, same length as x.
    boundary_left : float, optional
        First derivative at x[0]. The default sentinel 1e30 (or None)
        requests a natural end, i.e. zero second derivative.
    boundary_right : float, optional
        First derivative at x[-1], with the same convention.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points. Points outside
        [x[0], x[-1]] are clamped to the nearest end.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 10, dtype=torch.float64)
    >>> y = torch.sin(x * 2 * torch.pi)
    >>> f = cubic_spline(x, y)
    >>> f(torch.tensor([0.5], dtype=torch.float64))  # Evaluate at x=0.5
    """
    fitted = cubic_spline_fit(
        x, y, boundary_left=boundary_left, boundary_right=boundary_right
    )
    return lambda t: cubic_spline_evaluate(fitted, t)
