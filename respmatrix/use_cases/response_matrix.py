"""Config-driven response-matrix use-case.

Design goals
------------
- Script-friendly: callers hand over arrays plus a :class:`BuildConfig`.
- Returns the :class:`ResponseMatrix` so the stimulus index survives next to
  the tensor.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from respmatrix.components.builder import ResponseMatrix, assemble_response_matrix
from respmatrix.contracts.build_config import BuildConfig
from respmatrix.core.progress import ProgressCallback


def build_response_matrix_from_cfg(
    stimuli: Any,
    responses: Sequence[Any] = (),
    cfg: Optional[BuildConfig] = None,
    *,
    progress: Optional[ProgressCallback] = None,
) -> ResponseMatrix:
    cfg = cfg or BuildConfig()
    return assemble_response_matrix(
        stimuli,
        responses,
        dtype=np.dtype(cfg.dtype),
        missing_stimuli=cfg.missing_stimuli,
        progress=progress,
        log_summary=cfg.log_summary,
    )
