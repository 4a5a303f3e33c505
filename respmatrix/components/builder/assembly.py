from __future__ import annotations

"""Allocate and fill the padded (L, maxNt, Ns) response tensor.

The tensor shape is fixed up front from the trial counts; every real
observation is written by explicit indexed assignment, the rest stays zero.
"""

from typing import Any

import numpy as np


def allocate_tensor(n_responses: int, counts: np.ndarray, *, dtype: Any = float) -> np.ndarray:
    max_nt = int(counts.max()) if counts.size else 0
    return np.zeros((int(n_responses), max_nt, int(counts.shape[0])), dtype=dtype)


def fill_tensor(tensor: np.ndarray, stacked: np.ndarray, masks: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Write trials of each stimulus into tensor[:, :nt[s], s], in trial order.

    Args:
        tensor: Zeroed (L, maxNt, Ns) output.
        stacked: (L, n_trials) responses, columns in original trial order.
        masks: (n_trials, Ns) membership masks.
        counts: (Ns,) trials per stimulus.
    """

    for s in range(counts.shape[0]):
        nt = int(counts[s])
        tensor[:, :nt, s] = stacked[:, masks[:, s]]
    return tensor
