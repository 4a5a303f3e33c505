"""Build (response, trial, stimulus) tensors from trial-based recordings."""

from respmatrix.api import *  # noqa: F401,F403
from respmatrix.api import __all__ as __all__

__version__ = "0.1.0"
