import math
import operator

import numpy as np

from cartlin.exceptions import IndexOutOfBoundsError
from cartlin.exceptions import LengthMismatchError
from cartlin.utilities.dtype import check_buffer
from cartlin.utilities.validation import as_dim_size
from cartlin.utilities.validation import as_index_tuple
from cartlin.utilities.validation import as_sequence
from cartlin.utilities.validation import check_same_length


def volume(dim_size):
    r"""Number of elements in an index space of shape `dim_size`.

    Computed with Python integers, so the product never overflows.

    Raises
    ------
    ValueError
        If `dim_size` contains non-integer or negative sizes.

    """

    return math.prod(as_dim_size(dim_size))


def cart_to_lin(index, dim_size):
    r"""Converts a cartesian index to a linear index (row-major).

    The last axis varies fastest.  For example, with `dim_size` `(2, 3)` the
    index `(1, 2)` maps to `5`.

    Parameters
    ----------
    index : iterable
        Cartesian index, one component per axis.
    dim_size : iterable
        Extent of each axis.

    Returns
    -------
    The linear index, as an `int`.

    Raises
    ------
    LengthMismatchError
        If `index` and `dim_size` differ in length.
    IndexOutOfBoundsError
        If any component violates `0 <= index[i] < dim_size[i]`.

    """

    dim_size = as_dim_size(dim_size)
    index = as_index_tuple(index)

    check_same_length(dim_size, index)

    for axis, (i, d) in enumerate(zip(index, dim_size)):
        if i < 0 or i >= d:
            raise IndexOutOfBoundsError(axis, i, d)

    return cart_to_lin_unchecked(index, dim_size)


def cart_to_lin_unchecked(index, dim_size):
    r"""Like `cart_to_lin`, but without any checks.

    Out-of-range components still go through the same arithmetic, so the
    result may alias another index or exceed `volume(dim_size)`.  If the
    lengths differ, the sequences are aligned at their last axis.

    """

    index = as_sequence(index)
    dim_size = as_sequence(dim_size)

    lin = 0
    stride = 1
    for i, d in zip(reversed(index), reversed(dim_size)):
        lin += stride*int(i)
        stride *= int(d)

    return lin


def _check_linear(lin, dim_size):

    n = volume(dim_size)
    if lin < 0 or lin >= n:
        raise IndexOutOfBoundsError(None, lin, n)


def _decompose(lin, dim_size):

    coords = [0]*len(dim_size)

    # Fill from the fastest axis to the slowest; axis 0 keeps any overflow
    for axis in range(len(dim_size) - 1, -1, -1):
        d = int(dim_size[axis])
        if axis == 0:
            coords[axis] = lin
        elif d == 0:
            coords[axis] = 0
        else:
            lin, coords[axis] = divmod(lin, d)

    return coords


def lin_to_cart(lin, dim_size):
    r"""Converts a linear index to a cartesian index (row-major).

    Inverse of `cart_to_lin`.  For example, with `dim_size` `(2, 3)` the
    linear index `5` maps to `(1, 2)`.

    Parameters
    ----------
    lin : int
        Linear index.
    dim_size : iterable
        Extent of each axis.

    Returns
    -------
    Tuple containing the cartesian index.

    Raises
    ------
    IndexOutOfBoundsError
        If `lin` is not in `[0, volume(dim_size))`.

    """

    dim_size = as_dim_size(dim_size)
    lin = operator.index(lin)

    _check_linear(lin, dim_size)

    return tuple(_decompose(lin, dim_size))


def lin_to_cart_unchecked(lin, dim_size):
    r"""Like `lin_to_cart`, but without the range check.

    An out-of-range `lin` overflows into axis 0, whose component may then
    exceed `dim_size[0] - 1`.  This is deliberate: axis 0 is not reduced
    modulo its size, so out-of-range indices do not wrap around.  For example,
    `lin_to_cart_unchecked(6, (2, 3))` is `(2, 0)`, not `(0, 0)`.

    """

    dim_size = as_sequence(dim_size)

    return tuple(_decompose(operator.index(lin), dim_size))


def _check_out(dim_size, out):

    if isinstance(out, np.ndarray) and out.ndim != 1:
        raise LengthMismatchError(len(dim_size), out.size)

    check_same_length(dim_size, out)


def _write(coords, out):

    check_buffer(coords, out)

    for k, c in enumerate(coords):
        out[k] = c


def lin_to_cart_dyn(lin, dim_size, out):
    r"""Like `lin_to_cart`, but writes the cartesian index into `out`.

    Allows one buffer to be reused across many conversions.  All checks run
    before `out` is touched, so on error it is left unmodified.

    Parameters
    ----------
    lin : int
        Linear index.
    dim_size : iterable
        Extent of each axis.
    out : mutable sequence
        Buffer of length `len(dim_size)`, e.g., a list or a 1D NumPy array.

    Raises
    ------
    LengthMismatchError
        If `out` does not have one entry per axis.
    IndexOutOfBoundsError
        If `lin` is not in `[0, volume(dim_size))`.
    IndexOverflowError
        If the element type of `out` cannot hold the index.

    """

    dim_size = as_dim_size(dim_size)
    lin = operator.index(lin)

    _check_out(dim_size, out)
    _check_linear(lin, dim_size)

    _write(_decompose(lin, dim_size), out)


def lin_to_cart_dyn_unchecked(lin, dim_size, out):
    r"""Like `lin_to_cart_dyn`, but without the range check.

    The length of `out` is still verified.

    """

    dim_size = as_sequence(dim_size)

    _check_out(dim_size, out)

    _write(_decompose(operator.index(lin), dim_size), out)
