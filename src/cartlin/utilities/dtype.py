import copy

import numpy as np

from cartlin.exceptions import IndexOverflowError


def dtype_limits(dtype):
    r"""Returns the inclusive range of integers exactly representable in `dtype`.

    Integer dtypes are limited by their width, floating point dtypes by the
    width of their significand.  Object arrays hold Python integers and are
    unlimited, which is signalled by `(None, None)`.

    Parameters
    ----------
    dtype : numpy.dtype
        Data type of a candidate output buffer.

    Returns
    -------
    Tuple `(low, high)` of the representable range.

    """

    dtype = np.dtype(dtype)

    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return int(info.min), int(info.max)

    if np.issubdtype(dtype, np.floating):
        # Consecutive integers are exact up to 2**(nmant + 1)
        limit = 2**(np.finfo(dtype).nmant + 1)
        return -limit, limit

    if dtype == np.dtype(object):
        return None, None

    raise TypeError(f"Buffers of dtype `{dtype}` cannot hold indices.")


def check_representable(values, dtype):
    r"""Raises `IndexOverflowError` unless all `values` fit into `dtype`."""

    low, high = dtype_limits(dtype)
    if low is None:
        return

    for v in values:
        if v < low or v > high:
            raise IndexOverflowError(f"Index {v} does not fit into buffer "
                                     f"of dtype `{np.dtype(dtype)}`.")


def check_buffer(values, out):
    r"""Raises unless every value can be stored in the buffer `out`.

    Runs before anything is written, so a failing buffer is never left
    partially overwritten.

    Parameters
    ----------
    values : iterable
        Values to be stored, one per entry of `out`.
    out : mutable sequence
        Destination buffer.  NumPy arrays and objects exposing the buffer
        protocol (`array.array`, `bytearray`, `memoryview`, ...) are checked
        against their element type.  Any other object is checked by
        assigning into a shallow copy of it.

    Raises
    ------
    IndexOverflowError
        If a value does not fit into `out`.
    TypeError
        If `out` is read-only or its element type cannot hold integers.

    """

    if isinstance(out, np.ndarray):
        check_representable(values, out.dtype)
        return

    try:
        view = memoryview(out)
    except TypeError:
        view = None

    if view is not None:
        readonly, fmt = view.readonly, view.format
        view.release()

        if readonly:
            raise TypeError("Cannot write indices into a read-only buffer.")

        # Native struct codes are valid NumPy type strings
        check_representable(values, np.dtype(fmt.lstrip("@")))
        return

    scratch = copy.copy(out)
    try:
        for k, v in enumerate(values):
            scratch[k] = v
    except (OverflowError, TypeError, ValueError) as e:
        raise IndexOverflowError(f"Indices {tuple(values)} cannot be stored in "
                                 f"buffer of type `{type(out).__name__}`.") from e
