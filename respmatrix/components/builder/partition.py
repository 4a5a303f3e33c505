from __future__ import annotations

"""Stimulus discovery and trial partitioning.

Stimulus indices are positions in the ascending, de-duplicated list of
stimulus values, never first-occurrence order.
"""

from typing import Optional, Tuple

import numpy as np

from respmatrix.core.progress import ProgressCallback

from .errors import EmptyStimulusError


def unique_stimuli(stimuli: np.ndarray) -> np.ndarray:
    """Sorted distinct stimulus values; position defines the stimulus index."""

    try:
        return np.unique(stimuli)
    except TypeError as e:
        raise TypeError("stimulus values must be mutually orderable") from e


def membership_masks(
    stimuli: np.ndarray,
    uniques: np.ndarray,
    *,
    progress: Optional[ProgressCallback] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Per-stimulus trial membership and trial counts.

    Returns
    -------
    masks  : (n_trials, n_stimuli) bool, masks[i, s] iff stimuli[i] == uniques[s]
    counts : (n_stimuli,) int64
    """

    n_trials = stimuli.shape[0]
    n_stim = uniques.shape[0]

    masks = np.zeros((n_trials, n_stim), dtype=bool)
    counts = np.zeros(n_stim, dtype=np.int64)

    if progress is not None:
        progress.init(total=n_stim, label="Partitioning trials by stimulus")

    for s in range(n_stim):
        masks[:, s] = stimuli == uniques[s]
        counts[s] = int(masks[:, s].sum())
        if progress is not None:
            progress.update(current=s + 1)

    if progress is not None:
        progress.finalize(label="Partitioning done")

    return masks, counts


def check_counts(counts: np.ndarray) -> None:
    if np.any(counts <= 0):
        raise EmptyStimulusError("one or more stimuli have no corresponding response")
