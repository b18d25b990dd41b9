"""Warnings emitted by spline-backed properties."""


class SplineDomainWarning(UserWarning):
    """Warning for field values outside the spline domain.

    The values are clamped to the nearest domain end before evaluation.
    """

    pass


class SplineVariableMismatchWarning(UserWarning):
    """Warning when the declared spline variable is not the coupled variable."""

    pass
