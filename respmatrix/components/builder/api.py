from __future__ import annotations

"""Response Matrix Builder.

Turns a stimulus array S and L parallel response arrays R1..RL (one value per
trial each) into

- R  : (L, maxNt, Ns) tensor, R[l, t, s] = response l on the t-th trial
       (in recording order) of the s-th stimulus
- nt : (Ns,) trials per stimulus

Stimulus values never reach downstream estimators; only their index (position
in sorted order) and trial count matter. Entries with t >= nt[s] are padding
and hold zero; they are not observations.
"""

from dataclasses import dataclass
import warnings
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from respmatrix.contracts.choices import MissingStimulusPolicy
from respmatrix.contracts.results.response_matrix import ResponseMatrixSummary
from respmatrix.core.progress import ProgressCallback
from respmatrix.reporting.summaries import compute_summary, log_summary as _log_summary

from .assembly import allocate_tensor, fill_tensor
from .errors import EmptyStimulusError
from .inputs import coerce_stimuli, drop_missing_trials, missing_stimulus_mask, stack_responses
from .partition import check_counts, membership_masks, unique_stimuli


@dataclass(frozen=True)
class ResponseMatrix:
    """Padded response tensor plus the stimulus index it was built against."""

    tensor: np.ndarray
    counts: np.ndarray
    # Sorted unique stimulus values; stimuli[s] is the value of page s.
    stimuli: np.ndarray

    @property
    def n_responses(self) -> int:
        return int(self.tensor.shape[0])

    @property
    def max_trials(self) -> int:
        return int(self.tensor.shape[1])

    @property
    def n_stimuli(self) -> int:
        return int(self.tensor.shape[2])

    def valid_mask(self) -> np.ndarray:
        """(maxNt, Ns) bool, True where tensor[:, t, s] is a real trial."""
        return np.arange(self.max_trials)[:, None] < self.counts[None, :]

    def trials_for(self, stimulus_index: int) -> np.ndarray:
        """(L, nt[s]) responses of one stimulus, padding excluded."""
        s = int(stimulus_index)
        if not 0 <= s < self.n_stimuli:
            raise IndexError(f"stimulus index {s} out of range for {self.n_stimuli} stimuli")
        return self.tensor[:, : int(self.counts[s]), s]

    def index_of(self, value: Any) -> int:
        hits = np.flatnonzero(self.stimuli == value)
        if hits.size == 0:
            raise KeyError(value)
        return int(hits[0])

    def summary(self) -> ResponseMatrixSummary:
        return compute_summary(self.stimuli, self.counts, self.n_responses)

    def as_tuple(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.tensor, self.counts


def assemble_response_matrix(
    stimuli: Any,
    responses: Sequence[Any] = (),
    *,
    dtype: Any = float,
    missing_stimuli: MissingStimulusPolicy = "raise",
    progress: Optional[ProgressCallback] = None,
    log_summary: bool = True,
) -> ResponseMatrix:
    """Build the response tensor, trial counts and stimulus index.

    Args:
        stimuli: 1-D stimulus array, one orderable value per trial.
        responses: L response arrays, each 1-D and as long as ``stimuli``.
            May be empty, giving a tensor with first dimension 0.
        dtype: Element type of the output tensor.
        missing_stimuli: "raise" keeps NaN/None stimuli (they end up as
            stimuli without trials and raise EmptyStimulusError); "drop"
            removes those trials first and warns.
        progress: Optional per-stimulus progress reporting.
        log_summary: Log the number of stimuli/responses and trial range.

    Raises:
        ShapeError: stimuli or a response is not 1-D.
        LengthMismatchError: a response length differs from len(stimuli).
        EmptyStimulusError: a discovered stimulus has no trials.
    """

    S = coerce_stimuli(stimuli)
    n_trials = int(S.shape[0])
    stacked = stack_responses(list(responses), n_trials=n_trials, dtype=dtype)

    if missing_stimuli == "drop":
        S, stacked, n_dropped = drop_missing_trials(S, stacked)
        if n_dropped:
            warnings.warn(
                f"Dropped {n_dropped} of {n_trials} trials with a missing (NaN/None) stimulus.",
                UserWarning,
                stacklevel=2,
            )
    elif missing_stimuli == "raise":
        if S.dtype == object and missing_stimulus_mask(S).any():
            raise EmptyStimulusError(
                "one or more stimuli have no corresponding response (missing stimulus value)"
            )
    else:
        raise ValueError(f"Unknown missing_stimuli policy '{missing_stimuli}'")

    uniques = unique_stimuli(S)
    masks, counts = membership_masks(S, uniques, progress=progress)
    check_counts(counts)

    tensor = allocate_tensor(stacked.shape[0], counts, dtype=dtype)
    fill_tensor(tensor, stacked, masks, counts)

    out = ResponseMatrix(tensor=tensor, counts=counts, stimuli=uniques)
    if log_summary:
        _log_summary(out.summary())
    return out


def build_response_matrix(
    stimuli: Any,
    responses: Sequence[Any] = (),
    *,
    dtype: Any = float,
    missing_stimuli: MissingStimulusPolicy = "raise",
    progress: Optional[ProgressCallback] = None,
    log_summary: bool = True,
) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(R, nt)``: the (L, maxNt, Ns) response tensor and trials per stimulus."""

    return assemble_response_matrix(
        stimuli,
        responses,
        dtype=dtype,
        missing_stimuli=missing_stimuli,
        progress=progress,
        log_summary=log_summary,
    ).as_tuple()
