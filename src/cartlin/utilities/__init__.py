from . import dtype  # noqa: F401
from . import validation  # noqa: F401
