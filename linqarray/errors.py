class NotFoundError(ValueError):
    """raised by first() when no element qualifies, including on an empty sequence."""
    pass
