from . import cartesian_indices  # noqa: F401
from . import conversion  # noqa: F401
from . import exceptions  # noqa: F401
from . import utilities  # noqa: F401
#
# Expose the conversions
from .conversion import cart_to_lin  # noqa: F401
from .conversion import cart_to_lin_unchecked  # noqa: F401
from .conversion import lin_to_cart  # noqa: F401
from .conversion import lin_to_cart_dyn  # noqa: F401
from .conversion import lin_to_cart_dyn_unchecked  # noqa: F401
from .conversion import lin_to_cart_unchecked  # noqa: F401
from .conversion import volume  # noqa: F401
#
# Expose the iterator
from .cartesian_indices import CartesianIndices  # noqa: F401
#
# Expose the errors
from .exceptions import CartLinError  # noqa: F401
from .exceptions import IndexOutOfBoundsError  # noqa: F401
from .exceptions import IndexOverflowError  # noqa: F401
from .exceptions import InvalidBoundsError  # noqa: F401
from .exceptions import LengthMismatchError  # noqa: F401

__version__ = '0.1.0'
