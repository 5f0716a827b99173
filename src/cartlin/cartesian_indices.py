import logging
import operator

from cartlin.conversion import cart_to_lin_unchecked
from cartlin.conversion import lin_to_cart_unchecked
from cartlin.conversion import volume
from cartlin.exceptions import InvalidBoundsError
from cartlin.utilities.validation import as_bounds
from cartlin.utilities.validation import as_dim_size

logger = logging.getLogger(__name__)


class CartesianIndices:
    r"""An iterator over all Cartesian indices in a box.

    Yields all Cartesian indices `i` with `lower[k] <= i[k] < upper[k]` in
    row-major order: the first index varies slowest and the last index varies
    fastest.  For example, for the shape `(2, 3)` the iterator yields
    `(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)`.  This is the same order
    in which `lin_to_cart` maps the linear indices `0, 1, 2, ...`.

    The iterator is not restartable.  Once it is exhausted, every further
    call to `next` raises `StopIteration`.

    Parameters
    ----------
    dim_size : iterable
        Extent of each axis.  The lower bound of each axis is 0.

    Attributes
    ----------
    bounds : tuple
        Half-open `(lower, upper)` range of each axis.

    """

    def __init__(self, dim_size):

        dim_size = as_dim_size(dim_size)

        self._init_state(tuple((0, d) for d in dim_size))

    @classmethod
    def from_bounds(cls, bounds):
        r"""Creates an iterator from per-axis `[lower, upper)` bounds.

        Parameters
        ----------
        bounds : array_like
            Sequence of `(lower, upper)` pairs, one per axis.

        Returns
        -------
        A new `CartesianIndices`, starting at the lower bounds.

        Raises
        ------
        InvalidBoundsError
            If any pair does not satisfy `lower < upper`.

        """

        bounds = as_bounds(bounds)

        for axis, (lower, upper) in enumerate(bounds):
            if upper <= lower:
                logger.debug("Rejecting bounds %s: axis %d is empty.", bounds, axis)
                raise InvalidBoundsError(axis, lower, upper)

        return cls.from_bounds_unchecked(bounds)

    @classmethod
    def from_bounds_unchecked(cls, bounds):
        r"""Like `from_bounds`, but without the monotonicity check.

        An axis with `upper <= lower` is empty, so the resulting iterator is
        exhausted from the start.

        """

        obj = cls.__new__(cls)
        obj._init_state(as_bounds(bounds))

        return obj

    def _init_state(self, bounds):

        self._bounds = bounds

        # Cursor is the next index to be emitted
        self._cursor = [lower for lower, _ in bounds]
        self._exhausted = any(upper <= lower for lower, upper in bounds)

        logger.debug("Created %r.", self)

    @property
    def bounds(self):
        return self._bounds

    @property
    def shape(self):
        r"""Number of indices along each axis."""
        return tuple(max(upper - lower, 0) for lower, upper in self._bounds)

    @property
    def size(self):
        r"""Total number of indices in the box."""
        return volume(self.shape)

    @property
    def exhausted(self):
        return self._exhausted

    def _position(self):
        # Linear position of the cursor relative to the lower bounds
        offset = [c - lower for c, (lower, _) in zip(self._cursor, self._bounds)]
        return cart_to_lin_unchecked(offset, self.shape)

    @property
    def remaining(self):
        r"""Number of indices not yet produced."""

        if self._exhausted:
            return 0

        return self.size - self._position()

    def __length_hint__(self):
        return self.remaining

    def __iter__(self):
        return self

    def __next__(self):

        if self._exhausted:
            raise StopIteration

        value = tuple(self._cursor)

        # Odometer increment, starting at the fastest axis
        for axis in range(len(self._cursor) - 1, -1, -1):
            lower, upper = self._bounds[axis]
            self._cursor[axis] += 1
            if self._cursor[axis] < upper:
                break
            self._cursor[axis] = lower
        else:
            # Carried past axis 0
            self._exhausted = True

        return value

    def nth(self, n):
        r"""Skips `n` indices and returns the next one.

        The skip is relative to the current position, not an absolute position
        in the box.  After `k` calls to `next`, `nth(n)` returns the index at
        linear position `k + n`.

        `nth(0)` is equivalent to `next`.  The skip costs the same as a
        single conversion, regardless of `n`.

        Parameters
        ----------
        n : int
            Number of indices to skip.

        Returns
        -------
        The Cartesian index, or `None` if fewer than `n + 1` remain.  In that
        case the iterator is exhausted afterwards.

        """

        n = operator.index(n)
        if n < 0:
            raise ValueError(f"Cannot skip a negative number of indices, got {n}.")

        if n >= self.remaining:
            self._exhausted = True
            return None

        offset = lin_to_cart_unchecked(self._position() + n, self.shape)
        self._cursor = [c + lower for c, (lower, _) in zip(offset, self._bounds)]

        return next(self)

    def __repr__(self):

        state = "exhausted" if self._exhausted else "active"
        return f"{type(self).__name__}(bounds={self._bounds}, {state})"
