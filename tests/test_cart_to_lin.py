import numpy as np
import pytest

from cartlin import IndexOutOfBoundsError
from cartlin import LengthMismatchError
from cartlin import cart_to_lin
from cartlin import cart_to_lin_unchecked


def test_cart_to_lin_1d():

    assert cart_to_lin([1], [5]) == 1
    assert cart_to_lin([4], [5]) == 4


def test_cart_to_lin_2d():

    # 3 x 3 matrix with the following linear indexing order
    # [0 1 2]
    # [3 4 5]
    # [6 7 8]
    for i in range(3):
        for j in range(3):
            assert cart_to_lin([i, j], [3, 3]) == 3*i + j

    # 2 x 5 matrix, two rows and five columns
    # [0 1 2 3 4]
    # [5 6 7 8 9]
    assert cart_to_lin([0, 0], [2, 5]) == 0
    assert cart_to_lin([1, 0], [2, 5]) == 5
    assert cart_to_lin([0, 4], [2, 5]) == 4
    assert cart_to_lin([1, 4], [2, 5]) == 9

    # Rows, columns
    assert cart_to_lin([1, 2], [2, 3]) == 5


def test_cart_to_lin_3d():

    # Rows, columns, pages
    dim_size = [4, 3, 2]
    assert cart_to_lin([0, 0, 0], dim_size) == 0
    assert cart_to_lin([0, 0, 1], dim_size) == 1
    assert cart_to_lin([0, 1, 0], dim_size) == 2
    assert cart_to_lin([0, 2, 1], dim_size) == 5
    assert cart_to_lin([1, 0, 0], dim_size) == 6

    dim_size = [2, 3, 4]
    assert cart_to_lin([0, 0, 3], dim_size) == 3
    assert cart_to_lin([0, 1, 2], dim_size) == 6
    assert cart_to_lin([1, 1, 2], dim_size) == 18
    assert cart_to_lin([1, 2, 3], dim_size) == 23


@pytest.mark.parametrize("index, axis, value, bound",
                         [([2, 1, 2], 0, 2, 2),
                          ([54, 1, 2], 0, 54, 2),
                          ([1, 3, 2], 1, 3, 3),
                          ([1, 0, 5], 2, 5, 4),
                          ([1, 0, -1], 2, -1, 4)])
def test_cart_to_lin_out_of_bounds(index, axis, value, bound):

    with pytest.raises(IndexOutOfBoundsError) as excinfo:
        cart_to_lin(index, [2, 3, 4])

    # The error identifies the offending axis and its valid range
    assert excinfo.value.axis == axis
    assert excinfo.value.value == value
    assert excinfo.value.bound == bound
    assert f"axis {axis}" in str(excinfo.value)

    # It is still an IndexError
    assert isinstance(excinfo.value, IndexError)


def test_cart_to_lin_checked_vs_unchecked():

    # Column 5 does not exist in a 2 x 3 matrix
    with pytest.raises(IndexOutOfBoundsError):
        cart_to_lin([0, 5], [2, 3])

    # The unchecked version returns a value anyway, aliasing [1, 2]
    assert cart_to_lin_unchecked([0, 5], [2, 3]) == 5

    # Nonsensical value, the matrix only has 10 entries
    assert cart_to_lin_unchecked([1, 4], [2, 5]) == 9
    assert cart_to_lin_unchecked([1, 5], [2, 5]) == 10


def test_cart_to_lin_length_mismatch():

    with pytest.raises(LengthMismatchError) as excinfo:
        cart_to_lin([0, 1], [2, 3, 4])

    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2

    # Unchecked aligns both at the last axis
    assert cart_to_lin_unchecked([0, 1], [2, 3, 4]) == 1
    assert cart_to_lin_unchecked([1, 2, 1], [3, 4]) == 2*4 + 1


def test_cart_to_lin_numpy_input():

    index = np.array([1, 2], dtype=np.int32)
    dim_size = np.array([2, 3], dtype=np.int64)

    lin = cart_to_lin(index, dim_size)

    assert lin == 5
    assert type(lin) is int


def test_cart_to_lin_large_dims_do_not_overflow():

    # The volume is 2**120, far beyond 64-bit integers
    dim_size = [2**40, 2**40, 2**40]
    index = [2**40 - 1]*3

    assert cart_to_lin(index, dim_size) == 2**120 - 1
    assert cart_to_lin_unchecked(index, dim_size) == 2**120 - 1


@pytest.mark.parametrize("index, dim_size",
                         [([0.5, 1], [2, 3]),
                          ([[0, 1]], [2, 3]),
                          ([0, 1], [2.0, 3.0]),
                          ([True, False], [2, 3])])
def test_cart_to_lin_rejects_non_integer_input(index, dim_size):

    with pytest.raises(ValueError):
        cart_to_lin(index, dim_size)


def test_cart_to_lin_rejects_negative_sizes():

    with pytest.raises(ValueError):
        cart_to_lin([0, 0], [2, -3])


def test_cart_to_lin_rank_0():

    assert cart_to_lin([], []) == 0
    assert cart_to_lin_unchecked([], []) == 0


def test_cart_to_lin_scalar_input():

    # Scalars are rank 1 in both versions
    assert cart_to_lin(3, 5) == 3
    assert cart_to_lin_unchecked(3, 5) == 3
    assert cart_to_lin_unchecked(7, 5) == 7


def test_cart_to_lin_unchecked_numpy_input():

    index = np.array([1, 2], dtype=np.int32)
    dim_size = np.array([2, 3], dtype=np.int64)

    lin = cart_to_lin_unchecked(index, dim_size)

    assert lin == 5
    assert type(lin) is int

    assert cart_to_lin_unchecked(np.int64(2), np.int64(3)) == 2
