def derivative_property_name(base: str, variable: str, order: int) -> str:
    """Name of the order-th derivative of a property.

    >>> derivative_property_name("F", "c", 0)
    'F'
    >>> derivative_property_name("F", "c", 1)
    'dF/dc'
    >>> derivative_property_name("F", "c", 2)
    'd^2F/dc^2'
    """
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")
    if order == 0:
        return base
    if order == 1:
        return f"d{base}/d{variable}"
    return f"d^{order}{base}/d{variable}^{order}"
