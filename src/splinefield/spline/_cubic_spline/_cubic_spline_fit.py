from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Union

import torch
from torch import Tensor

from .._insufficient_points_error import InsufficientPointsError
from .._length_mismatch_error import LengthMismatchError
from .._natural import NATURAL, is_natural
from .._not_strictly_increasing_error import NotStrictlyIncreasingError
from .._solve_tridiagonal import solve_tridiagonal

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def _as_tensor(data: Union[Tensor, Sequence[float]]) -> Tensor:
    if isinstance(data, Tensor):
        if not data.is_floating_point():
            return data.to(torch.get_default_dtype())
        return data
    # Plain sequences of reals are taken as double precision
    return torch.as_tensor(data, dtype=torch.float64)


def cubic_spline_fit(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    boundary_left: Optional[Union[float, Tensor]] = NATURAL,
    boundary_right: Optional[Union[float, Tensor]] = NATURAL,
) -> CubicSpline:
    """
    Fit an interpolating cubic spline to data points.

    Parameters
    ----------
    x : Tensor or sequence of float
        Knot positions, shape (n_points,). Must be strictly increasing.
    y : Tensor or sequence of float
        Values at knots, shape (n_points,).
    boundary_left : float, optional
        First derivative imposed at x[0]. The sentinel 1e30 (default), any
        larger magnitude, infinity or None selects a natural end instead,
        i.e. zero second derivative at x[0].
    boundary_right : float, optional
        First derivative imposed at x[-1], with the same convention.

    Returns
    -------
    CubicSpline
        Fitted spline.

    Raises
    ------
    ValueError
        If x or y is not one-dimensional.
    LengthMismatchError
        If x and y differ in length.
    InsufficientPointsError
        If fewer than 2 points are given.
    NotStrictlyIncreasingError
        If any x[i] <= x[i-1].

    Notes
    -----
    The second derivatives y2 satisfy, for every interior knot,

        h[i-1]*y2[i-1] + 2*(h[i-1] + h[i])*y2[i] + h[i]*y2[i+1]
            = 6*(delta[i] - delta[i-1])

    with h[i] = x[i+1] - x[i] and delta[i] = (y[i+1] - y[i]) / h[i], which
    makes the first derivative continuous across the knots. Each end adds one
    row: y2 = 0 for a natural end, or the row that reproduces the requested
    slope for a clamped end. The resulting n x n tridiagonal system is solved
    in O(n) by a single forward sweep and back substitution.
    """
    x = _as_tensor(x)
    y = _as_tensor(y)

    if x.dim() != 1 or y.dim() != 1:
        raise ValueError(
            f"x and y must be one-dimensional, got shapes "
            f"{tuple(x.shape)} and {tuple(y.shape)}"
        )

    dtype = torch.promote_types(x.dtype, y.dtype)
    x = x.to(dtype=dtype)
    y = y.to(dtype=dtype, device=x.device)

    n = x.shape[0]

    # Validate knots
    if y.shape[0] != n:
        raise LengthMismatchError(
            f"x and y must have the same size, got {n} and {y.shape[0]}"
        )
    if n < 2:
        raise InsufficientPointsError(
            f"At least two data points are required, got {n}"
        )
    increasing = x[1:] > x[:-1]
    if not torch.all(increasing):
        i = int(torch.nonzero(~increasing)[0]) + 1
        raise NotStrictlyIncreasingError(
            f"x values must be strictly increasing, but "
            f"x[{i}] = {x[i].item()} <= x[{i - 1}] = {x[i - 1].item()}"
        )

    h = x[1:] - x[:-1]  # (n-1,)
    delta = (y[1:] - y[:-1]) / h  # (n-1,)

    # First row
    if is_natural(boundary_left):
        diag_first = torch.ones_like(h[:1])
        upper_first = torch.zeros_like(h[:1])
        rhs_first = torch.zeros_like(delta[:1])
    else:
        slope = torch.as_tensor(boundary_left, dtype=dtype, device=x.device)
        diag_first = 2 * h[:1]
        upper_first = h[:1]
        rhs_first = 6 * (delta[:1] - slope)

    # Last row
    if is_natural(boundary_right):
        diag_last = torch.ones_like(h[-1:])
        lower_last = torch.zeros_like(h[-1:])
        rhs_last = torch.zeros_like(delta[-1:])
    else:
        slope = torch.as_tensor(boundary_right, dtype=dtype, device=x.device)
        diag_last = 2 * h[-1:]
        lower_last = h[-1:]
        rhs_last = 6 * (slope - delta[-1:])

    # Interior rows i = 1..n-2
    diag = torch.cat([diag_first, 2 * (h[:-1] + h[1:]), diag_last])
    upper = torch.cat([upper_first, h[1:]])
    lower = torch.cat([h[:-1], lower_last])
    rhs = torch.cat([rhs_first, 6 * (delta[1:] - delta[:-1]), rhs_last])

    second_derivatives = solve_tridiagonal(diag, upper, lower, rhs)

    boundary_values = torch.tensor(
        [
            NATURAL if boundary_left is None else float(boundary_left),
            NATURAL if boundary_right is None else float(boundary_right),
        ],
        dtype=dtype,
        device=x.device,
    )

    # Lazy import to avoid circular dependency
    from ._cubic_spline import CubicSpline

    return CubicSpline(
        knots=x.clone(),
        knot_values=y.clone(),
        second_derivatives=second_derivatives,
        boundary_values=boundary_values,
        batch_size=[],
    )
