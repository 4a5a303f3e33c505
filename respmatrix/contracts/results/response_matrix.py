from __future__ import annotations

from typing import List

from pydantic import Field

from .common import Label, ResultModel


class ResponseMatrixSummary(ResultModel):
    """Compact description of a built response matrix."""

    n_stimuli: int = Field(ge=0)
    n_responses: int = Field(ge=0)
    n_trials_total: int = Field(ge=0)
    max_trials: int = Field(ge=0)
    min_trials: int = Field(ge=0)

    # Sorted unique stimulus values; position == stimulus index.
    stimuli: List[Label] = Field(default_factory=list)
    counts: List[int] = Field(default_factory=list)
