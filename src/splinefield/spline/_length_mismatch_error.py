from ._construction_error import ConstructionError


class LengthMismatchError(ConstructionError):
    """Raised when abscissae and ordinates differ in length."""

    pass
