from ._spline_error import SplineError


class ConstructionError(SplineError, ValueError):
    """Raised when knot data cannot define a cubic spline.

    The spline is not built and must not be queried. Subclasses name the
    specific defect in the input data.
    """

    pass
