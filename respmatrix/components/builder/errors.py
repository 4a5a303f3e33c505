"""Response-matrix builder exceptions.

These are intentionally lightweight so they can be raised from compute paths
without importing reporting modules.
"""


class ResponseMatrixError(ValueError):
    """Raised when a response matrix cannot be built from the given input."""


class ShapeError(ResponseMatrixError):
    """Raised when the stimulus array or a response array is not 1-D."""


class LengthMismatchError(ResponseMatrixError):
    """Raised when a response array and the stimulus array differ in length."""


class EmptyStimulusError(ResponseMatrixError):
    """Raised when a discovered stimulus has no corresponding trials."""
