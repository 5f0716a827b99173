import operator

import numpy as np

from cartlin.exceptions import LengthMismatchError


def as_index_tuple(values, name="index"):
    r"""Normalizes an integer sequence to a tuple of Python integers.

    Scalars are promoted to length-1 sequences, as with `np.atleast_1d`.

    Parameters
    ----------
    values : iterable or int
        Candidate sequence (tuple, list, NumPy integer array, ...).
    name : str, optional
        Name used in error messages.

    Returns
    -------
    Tuple of `int`.

    """

    arr = np.atleast_1d(np.asarray(values))

    if arr.ndim != 1:
        raise ValueError(f"`{name}` must be convertible to a 1-dimensional array.")

    if arr.size == 0:
        return tuple()

    # Integers too wide for any NumPy dtype come through as objects
    if arr.dtype != np.dtype(object) and not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"`{name}` must contain integers, got dtype `{arr.dtype}`.")

    try:
        return tuple(operator.index(v) for v in arr.tolist())
    except TypeError:
        raise ValueError(f"`{name}` must contain integers.") from None


def as_sequence(values):
    r"""Promotes a scalar to a length-1 sequence, as with `np.atleast_1d`.

    Sequences are returned unchanged and nothing else is validated.

    """

    if np.ndim(values) == 0:
        return (values,)

    return values


def as_dim_size(dim_size):
    r"""Normalizes dimension sizes, rejecting negative extents."""

    dim_size = as_index_tuple(dim_size, "dim_size")

    for axis, size in enumerate(dim_size):
        if size < 0:
            raise ValueError(f"Size of axis {axis} must be non-negative, got {size}.")

    return dim_size


def as_bounds(bounds):
    r"""Normalizes bounds to a tuple of `(lower, upper)` integer pairs.

    Parameters
    ----------
    bounds : array_like
        Array-like of shape `(N, 2)`.

    Returns
    -------
    Tuple of N `(lower, upper)` tuples.

    """

    arr = np.asarray(bounds)

    # An empty list carries no rank-2 shape but is a valid rank-0 box
    if arr.size == 0 and arr.ndim == 1:
        return tuple()

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("`bounds` must be convertible to an array of shape (N, 2).")

    lower = as_index_tuple(arr[:, 0], "bounds")
    upper = as_index_tuple(arr[:, 1], "bounds")

    return tuple(zip(lower, upper))


def check_same_length(expected, actual):
    r"""Raises `LengthMismatchError` if two sequences differ in length."""

    if len(expected) != len(actual):
        raise LengthMismatchError(len(expected), len(actual))
