"""Use-cases (orchestration over components)."""

from .response_matrix import build_response_matrix_from_cfg

__all__ = ["build_response_matrix_from_cfg"]
