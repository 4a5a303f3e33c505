"""Public API.

This module is the **stable public surface** for building response matrices.

Prefer importing from here instead of reaching into internal subpackages:

    from respmatrix.api import build_response_matrix

    R, nt = build_response_matrix(S, [R1, R2])

The underlying implementations live under :mod:`respmatrix.components.builder`
and :mod:`respmatrix.use_cases`.
"""

from __future__ import annotations

from respmatrix.components.builder import (
    EmptyStimulusError,
    LengthMismatchError,
    ResponseMatrix,
    ResponseMatrixError,
    ShapeError,
    assemble_response_matrix,
    build_response_matrix,
)
from respmatrix.use_cases.response_matrix import build_response_matrix_from_cfg

# Non-use-case helpers that are still part of the stable public surface.
from respmatrix.contracts.build_config import BuildConfig
from respmatrix.contracts.results.response_matrix import ResponseMatrixSummary
from respmatrix.core.progress import ProgressCallback

__all__ = [
    "build_response_matrix",
    "assemble_response_matrix",
    "build_response_matrix_from_cfg",
    "ResponseMatrix",
    "BuildConfig",
    "ResponseMatrixSummary",
    "ProgressCallback",
    "ResponseMatrixError",
    "ShapeError",
    "LengthMismatchError",
    "EmptyStimulusError",
]
