from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class DerivativeCheck:
    """Analytic spline derivatives against central finite differences.

    Attributes
    ----------
    first : Tensor
        Analytic first derivative at the checked points.
    first_numerical : Tensor
        (f(c + eps) - f(c - eps)) / (2 eps).
    first_difference : Tensor
        |first - first_numerical|.
    second : Tensor
        Analytic second derivative at the checked points.
    second_numerical : Tensor
        (f(c + eps) - 2 f(c) + f(c - eps)) / eps^2.
    second_difference : Tensor
        |second - second_numerical|.
    """

    first: Tensor
    first_numerical: Tensor
    first_difference: Tensor
    second: Tensor
    second_numerical: Tensor
    second_difference: Tensor
