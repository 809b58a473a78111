"""Error types for mandala generation."""


class InvalidArgument(ValueError):
    """A generation precondition was violated.

    Raised for empty palettes or choice sets, non-positive canvas sizes,
    inverted integer bounds and unknown tier, primitive or palette names.
    """
