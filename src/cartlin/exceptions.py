class CartLinError(Exception):
    r"""Base class for all errors raised by cartlin."""

    pass


class IndexOutOfBoundsError(CartLinError, IndexError):
    r"""A cartesian component or a linear index lies outside its valid range.

    The valid range is always `[0, bound)`.

    Attributes
    ----------
    axis : int or None
        Offending axis of a cartesian index, `None` for a linear index.
    value : int
        The offending value.
    bound : int
        Exclusive upper limit of the valid range.

    """

    def __init__(self, axis, value, bound):

        self.axis = axis
        self.value = value
        self.bound = bound

        if axis is None:
            msg = f"Linear index {value} out of range [0, {bound})."
        else:
            msg = f"Index {value} out of bounds [0, {bound}) along axis {axis}."

        super().__init__(msg)


class LengthMismatchError(CartLinError, ValueError):
    r"""Two sequences that must share the same rank do not."""

    def __init__(self, expected, actual):

        self.expected = expected
        self.actual = actual

        super().__init__(f"Expected a sequence of length {expected}, got length {actual}.")


class InvalidBoundsError(CartLinError, ValueError):
    r"""A `[lower, upper)` bounds pair is not strictly increasing."""

    def __init__(self, axis, lower, upper):

        self.axis = axis
        self.lower = lower
        self.upper = upper

        super().__init__(f"Bounds [{lower}, {upper}) along axis {axis} "
                         f"must be strictly increasing.")


class IndexOverflowError(CartLinError, OverflowError):
    r"""A coordinate cannot be represented in the dtype of an output buffer."""

    pass
