from ._construction_error import ConstructionError


class InsufficientPointsError(ConstructionError):
    """Raised when fewer than two knots are supplied."""

    pass
