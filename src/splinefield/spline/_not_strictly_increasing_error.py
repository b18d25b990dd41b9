from ._construction_error import ConstructionError


class NotStrictlyIncreasingError(ConstructionError):
    """Raised when knots contain duplicates or inversions."""

    pass
