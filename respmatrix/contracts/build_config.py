from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .choices import MissingStimulusPolicy, ResponseDTypeName


class BuildConfig(BaseModel):
    """Options for building a response matrix."""

    model_config = ConfigDict(extra="forbid")

    # Element type of the output tensor; padding is the zero of this dtype.
    dtype: ResponseDTypeName = "float64"
    missing_stimuli: MissingStimulusPolicy = "raise"
    # Emit the "Building R and nt" summary through logging.
    log_summary: bool = True
