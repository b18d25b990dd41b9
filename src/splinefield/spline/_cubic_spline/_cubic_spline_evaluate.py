from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def _as_query(spline: CubicSpline, t: Union[Tensor, float]) -> Tensor:
    knots = spline.knots
    if not isinstance(t, Tensor):
        return torch.as_tensor(t, dtype=knots.dtype, device=knots.device)
    return t.to(dtype=knots.dtype, device=knots.device)


def _locate(
    spline: CubicSpline,
    t: Tensor,
) -> Tuple[Tensor, Tensor, Tensor, Tensor]:
    """
    Clamp flat query points to the domain and find their intervals.

    Returns
    -------
    segment_idx : Tensor
        Index i of the interval [x[i], x[i+1]] holding each point.
    a, b : Tensor
        Normalized positions (x[i+1] - t)/h and (t - x[i])/h, with a + b = 1.
    h : Tensor
        Interval widths x[i+1] - x[i].
    """
    knots = spline.knots

    # Out-of-domain points take the boundary value and derivatives
    t = torch.clamp(t, spline.domain_min, spline.domain_max)

    # We want the segment index i such that knots[i] <= t < knots[i+1];
    # a hit on the last knot belongs to the last segment
    segment_idx = (
        torch.searchsorted(knots.detach(), t.detach().contiguous(), right=True)
        - 1
    )
    segment_idx = torch.clamp(segment_idx, 0, knots.shape[0] - 2)

    x_lo = knots[segment_idx]
    x_hi = knots[segment_idx + 1]
    h = x_hi - x_lo

    a = (x_hi - t) / h
    b = (t - x_lo) / h

    return segment_idx, a, b, h


def cubic_spline_evaluate(
    spline: CubicSpline,
    t: Union[Tensor, float],
) -> Tensor:
    """
    Evaluate a cubic spline at query points.

    Parameters
    ----------
    spline : CubicSpline
        Fitted cubic spline from cubic_spline_fit
    t : Tensor or float
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape). A Python float gives a
        0-d tensor.

    Notes
    -----
    Query points outside [knots[0], knots[-1]] are clamped to the nearest
    end, so the spline is never extrapolated and no error is raised. Callers
    that need to know about clamping compare t with the domain themselves.
    """
    t = _as_query(spline, t)
    query_shape = t.shape

    i, a, b, h = _locate(spline, t.reshape(-1))

    y = spline.knot_values
    y2 = spline.second_derivatives

    value = (
        a * y[i]
        + b * y[i + 1]
        + ((a**3 - a) * y2[i] + (b**3 - b) * y2[i + 1]) * h**2 / 6
    )

    return value.view(query_shape)
