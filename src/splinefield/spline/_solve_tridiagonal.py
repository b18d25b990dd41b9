import torch
from torch import Tensor


def solve_tridiagonal(
    diag: Tensor,
    upper: Tensor,
    lower: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = b using the Thomas algorithm.

    The matrix A has the form:
        [d0  u0   0   0  ...  0   0 ]
        [l0  d1  u1   0  ...  0   0 ]
        [ 0  l1  d2  u2  ...  0   0 ]
        [        ...                ]
        [ 0   0   0   0  ... ln-2 dn-1]

    Parameters
    ----------
    diag : Tensor
        Main diagonal, shape (n,)
    upper : Tensor
        Upper diagonal, shape (n-1,)
    lower : Tensor
        Lower diagonal, shape (n-1,)
    rhs : Tensor
        Right-hand side, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n)

    Notes
    -----
    One forward sweep eliminates the lower diagonal, storing the modified
    upper coefficients ``u'`` and right-hand side ``d'``; one backward pass
    substitutes. No pivoting is performed, so A must be diagonally dominant
    (spline systems always are). Intermediate values are collected in lists
    rather than written in place, which keeps the solve differentiable.
    """
    n = diag.shape[0]

    # (*batch, n) -> (n, *batch)
    rhs_t = rhs.movedim(-1, 0)

    if n == 1:
        return (rhs_t[0] / diag[0]).unsqueeze(0).movedim(0, -1)

    u_prime = [upper[0] / diag[0]]
    d_prime = [rhs_t[0] / diag[0]]

    for i in range(1, n):
        denom = diag[i] - lower[i - 1] * u_prime[i - 1]
        if i < n - 1:
            u_prime.append(upper[i] / denom)
        d_prime.append((rhs_t[i] - lower[i - 1] * d_prime[i - 1]) / denom)

    x = [d_prime[n - 1]]
    for i in range(n - 2, -1, -1):
        x.append(d_prime[i] - u_prime[i] * x[-1])
    x.reverse()

    return torch.stack(x, dim=0).movedim(0, -1)
