from typing import Union

import torch
from torch import Tensor

from ._cubic_spline import CubicSpline
from ._cubic_spline_evaluate import _as_query, _locate, cubic_spline_evaluate


def cubic_spline_derivative(
    spline: CubicSpline,
    t: Union[Tensor, float],
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of a cubic spline at query points.

    Parameters
    ----------
    spline : CubicSpline
        Fitted cubic spline from cubic_spline_fit
    t : Tensor or float
        Query points, shape (*query_shape) or scalar
    order : int
        Order of derivative. 0 gives the value itself. Default is 1.

    Returns
    -------
    derivative : Tensor
        Derivative values, shape (*query_shape).

    Raises
    ------
    ValueError
        If order is negative.

    Notes
    -----
    With h = x[i+1] - x[i], a = (x[i+1] - t)/h and b = (t - x[i])/h:

    - First derivative:
      (y[i+1] - y[i])/h - (3a^2 - 1)/6 * h * y2[i] + (3b^2 - 1)/6 * h * y2[i+1]
    - Second derivative: a*y2[i] + b*y2[i+1]
    - Third and higher derivatives are defined as exactly zero.

    Query points are clamped to the spline domain, as in
    cubic_spline_evaluate.
    """
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")

    if order == 0:
        return cubic_spline_evaluate(spline, t)

    t = _as_query(spline, t)

    if order >= 3:
        return torch.zeros_like(t)

    query_shape = t.shape

    i, a, b, h = _locate(spline, t.reshape(-1))

    y = spline.knot_values
    y2 = spline.second_derivatives

    if order == 1:
        derivative = (
            (y[i + 1] - y[i]) / h
            - (3 * a**2 - 1) / 6 * h * y2[i]
            + (3 * b**2 - 1) / 6 * h * y2[i + 1]
        )
    else:
        derivative = a * y2[i] + b * y2[i + 1]

    return derivative.view(query_shape)
