"""Response-matrix builder public API.

This subpackage is the canonical home for building (L, maxNt, Ns) response
tensors from trial-based stimulus/response arrays.
"""

from .api import ResponseMatrix, assemble_response_matrix, build_response_matrix
from .errors import EmptyStimulusError, LengthMismatchError, ResponseMatrixError, ShapeError

__all__ = [
    "ResponseMatrix",
    "assemble_response_matrix",
    "build_response_matrix",
    "ResponseMatrixError",
    "ShapeError",
    "LengthMismatchError",
    "EmptyStimulusError",
]
