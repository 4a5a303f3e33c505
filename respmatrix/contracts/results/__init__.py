"""Result contracts."""

from .common import Label, ResultModel
from .response_matrix import ResponseMatrixSummary

__all__ = [
    "Label",
    "ResultModel",
    "ResponseMatrixSummary",
]
