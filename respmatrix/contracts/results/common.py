from __future__ import annotations

"""Result contracts.

These models represent *outputs* produced by the builder and are intended to
be stable, JSON-friendly descriptions of a build (the tensor itself stays a
numpy array on :class:`~respmatrix.components.builder.api.ResponseMatrix`).

Note: contracts should only depend on stdlib + pydantic.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict

# Stimulus labels are allowed to be numbers or strings.
Label = Union[int, float, str]


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")
