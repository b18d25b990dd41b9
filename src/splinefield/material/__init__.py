"""Spline-backed property fields for host simulations.

A host owns one :class:`SplineProperty` per tabulated property and calls it
with the current field of its coupled variable. Configuration is a plain
:class:`SplinePropertyConfig`; diagnostics are issued through
:mod:`warnings`.
"""

from ._derivative_check import DerivativeCheck
from ._derivative_property_name import derivative_property_name
from ._spline_property import SplineProperty
from ._spline_property_config import SplinePropertyConfig
from ._warnings import SplineDomainWarning, SplineVariableMismatchWarning

__all__ = [
    "DerivativeCheck",
    "SplineDomainWarning",
    "SplineProperty",
    "SplinePropertyConfig",
    "SplineVariableMismatchWarning",
    "derivative_property_name",
]
