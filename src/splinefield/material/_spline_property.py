"""Property fields defined by cubic spline interpolation."""

from __future__ import annotations

import warnings
from typing import Dict, List, Union

import torch
from torch import Tensor

from splinefield.spline import (
    cubic_spline_derivative,
    cubic_spline_evaluate,
    cubic_spline_fit,
)

from ._derivative_check import DerivativeCheck
from ._derivative_property_name import derivative_property_name
from ._spline_property_config import SplinePropertyConfig
from ._warnings import SplineDomainWarning, SplineVariableMismatchWarning

_MAX_LISTED_KNOTS = 20


class SplineProperty:
    """A property and its derivatives interpolated from tabulated data.

    The spline is fitted once, at construction. Each call to :meth:`compute`
    evaluates the property and its derivatives up to
    ``config.derivative_order`` for a whole field of variable values, e.g.
    one value per quadrature point of a mesh.

    Field values outside the knot range are clamped to the nearest end. The
    first such field seen by an instance triggers one
    :class:`SplineDomainWarning`; :attr:`clamped_count` counts every clamped
    value seen by :meth:`compute` and :meth:`value`.

    Parameters
    ----------
    config : SplinePropertyConfig
        Knot data, names and options.

    Raises
    ------
    ConstructionError
        If the knot data cannot define a spline.

    Examples
    --------
    >>> import torch
    >>> config = SplinePropertyConfig(
    ...     x=[0.0, 0.25, 0.5, 0.75, 1.0],
    ...     y=[0.0, -0.1, -0.15, -0.1, 0.0],
    ...     property_name="F",
    ...     variable="c",
    ... )
    >>> free_energy = SplineProperty(config)
    >>> fields = free_energy.compute(torch.rand(8, dtype=torch.float64))
    >>> sorted(fields)
    ['F', 'd^2F/dc^2', 'dF/dc']
    """

    def __init__(self, config: SplinePropertyConfig):
        self.config = config

        if (
            config.spline_variable is not None
            and config.spline_variable != config.variable
        ):
            warnings.warn(
                f"spline_variable ('{config.spline_variable}') does not match "
                f"the coupled variable ('{config.variable}'). "
                f"Using the coupled variable.",
                SplineVariableMismatchWarning,
                stacklevel=2,
            )

        self.spline = cubic_spline_fit(
            config.x,
            config.y,
            boundary_left=config.boundary_left,
            boundary_right=config.boundary_right,
        )

        self.clamped_count = 0
        self._warned = False

    @property
    def property_names(self) -> List[str]:
        """Published names, from the property itself to its highest derivative."""
        return [
            derivative_property_name(
                self.config.property_name, self.config.variable, order
            )
            for order in range(self.config.derivative_order + 1)
        ]

    def _as_field(self, c: Union[Tensor, float]) -> Tensor:
        knots = self.spline.knots
        return torch.as_tensor(c, dtype=knots.dtype, device=knots.device)

    def _track_clamping(self, c: Tensor) -> None:
        lo = self.spline.domain_min
        hi = self.spline.domain_max

        outside = (c < lo) | (c > hi)
        n_outside = int(outside.sum())
        if n_outside == 0:
            return

        self.clamped_count += n_outside

        if self.config.warn_on_clamp and not self._warned:
            first = c[outside].reshape(-1)[0].item()
            warnings.warn(
                f"Value {first} of '{self.config.variable}' outside spline "
                f"domain [{lo.item()}, {hi.item()}] of "
                f"'{self.config.property_name}'. "
                f"Clamping to domain boundaries.",
                SplineDomainWarning,
                stacklevel=3,
            )
            self._warned = True

    def value(self, c: Union[Tensor, float]) -> Tensor:
        """Property value for a field (or a single value) of the variable."""
        c = self._as_field(c)
        self._track_clamping(c)
        return cubic_spline_evaluate(self.spline, c)

    def derivative(self, c: Union[Tensor, float], order: int = 1) -> Tensor:
        """Derivative of the given order; zero for orders of 3 and above."""
        return cubic_spline_derivative(self.spline, c, order)

    def compute(self, c: Union[Tensor, float]) -> Dict[str, Tensor]:
        """
        Evaluate the property and its derivatives on a field.

        Parameters
        ----------
        c : Tensor or float
            Variable values, any shape.

        Returns
        -------
        dict of str to Tensor
            One entry per name in :attr:`property_names`, each with the
            shape of ``c``.
        """
        c = self._as_field(c)
        self._track_clamping(c)

        return {
            name: cubic_spline_derivative(self.spline, c, order)
            for order, name in enumerate(self.property_names)
        }

    def check_derivatives(
        self,
        c: Union[Tensor, float],
        eps: float = 1e-6,
    ) -> DerivativeCheck:
        """
        Compare analytic derivatives with central finite differences.

        Parameters
        ----------
        c : Tensor or float
            Points to check.
        eps : float
            Finite difference step. Default is 1e-6.

        Returns
        -------
        DerivativeCheck
            Analytic and numerical first and second derivatives and their
            absolute differences.

        Notes
        -----
        Points closer than ``eps`` to a domain end, or to a knot, mix two
        clamped or two different cubic pieces in the difference quotient and
        show larger differences. The second difference loses roughly
        machine epsilon / eps^2 to rounding, so a larger ``eps`` (e.g. 1e-4)
        suits it better. Clamping is not tracked here.
        """
        c = self._as_field(c)

        f = cubic_spline_evaluate(self.spline, c)
        f_plus = cubic_spline_evaluate(self.spline, c + eps)
        f_minus = cubic_spline_evaluate(self.spline, c - eps)

        first = cubic_spline_derivative(self.spline, c, 1)
        second = cubic_spline_derivative(self.spline, c, 2)
        first_numerical = (f_plus - f_minus) / (2 * eps)
        second_numerical = (f_plus - 2 * f + f_minus) / (eps * eps)

        return DerivativeCheck(
            first=first,
            first_numerical=first_numerical,
            first_difference=torch.abs(first - first_numerical),
            second=second,
            second_numerical=second_numerical,
            second_difference=torch.abs(second - second_numerical),
            batch_size=[],
        )

    def summary(self) -> str:
        """Multi-line description of the property and its knot data."""
        knots = self.spline.knots
        lines = [
            f"SplineProperty '{self.config.property_name}':",
            f"  Variable: {self.config.variable}",
        ]
        if self.config.spline_variable is not None:
            lines.append(f"  Spline variable: {self.config.spline_variable}")
        lines += [
            f"  Domain: [{self.spline.domain_min.item()}, "
            f"{self.spline.domain_max.item()}]",
            f"  Number of data points: {knots.shape[0]}",
            f"  Derivative order: {self.config.derivative_order}",
            f"  Properties: {', '.join(self.property_names)}",
        ]
        if knots.shape[0] <= _MAX_LISTED_KNOTS:
            x_values = ", ".join(f"{v:g}" for v in knots.tolist())
            y_values = ", ".join(
                f"{v:g}" for v in self.spline.knot_values.tolist()
            )
            lines.append(f"  X values: {x_values}")
            lines.append(f"  Y values: {y_values}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SplineProperty(property_name={self.config.property_name!r}, "
            f"variable={self.config.variable!r}, "
            f"n_knots={self.spline.knots.shape[0]}, "
            f"derivative_order={self.config.derivative_order})"
        )
