from __future__ import annotations

"""Input validation helpers for the response-matrix builder."""

from typing import Any, List, Sequence, Tuple

import numpy as np

from respmatrix.core.shapes import as_vector, is_vector, stack_rows

from .errors import LengthMismatchError, ShapeError


def coerce_stimuli(stimuli: Any) -> np.ndarray:
    try:
        arr = np.asarray(stimuli)
    except ValueError as e:
        # ragged nesting
        raise ShapeError("stimulus array must be 1-D; got a ragged nested sequence") from e
    if not is_vector(arr):
        raise ShapeError(f"stimulus array must be 1-D; got shape {arr.shape}")
    return as_vector(arr)


def check_castable(arr: np.ndarray, dtype: Any, *, index: int) -> None:
    """Reject responses the output dtype cannot hold without changing values.

    Complex data never goes into a real tensor; floats go into an integer
    tensor only when every value is finite and integral.
    """

    target = np.dtype(dtype)
    if arr.dtype.kind == "c" and target.kind != "c":
        raise ValueError(
            f"response array {index}: expected numeric data; complex values do not fit dtype={target}"
        )
    if np.can_cast(arr.dtype, target, casting="same_kind"):
        return
    if not np.all(np.isfinite(arr)) or not np.array_equal(arr.astype(target), arr):
        raise ValueError(
            f"response array {index}: values of dtype={arr.dtype} are not exactly "
            f"representable as dtype={target}"
        )


def coerce_response(response: Any, *, index: int, n_trials: int, dtype: Any = float) -> np.ndarray:
    """Validate one response array against the stimulus array length and output dtype."""

    try:
        arr = np.asarray(response)
    except ValueError as e:
        raise ShapeError(f"response arrays must be 1-D; response {index} is a ragged nested sequence") from e
    if not is_vector(arr):
        raise ShapeError(f"response arrays must be 1-D; response {index} has shape {arr.shape}")
    arr = as_vector(arr)

    if arr.dtype == object:
        try:
            arr = arr.astype(float)
        except (TypeError, ValueError) as e:
            raise ValueError(f"response array {index}: expected numeric data") from e
    if not (np.issubdtype(arr.dtype, np.number) or arr.dtype == bool):
        raise ValueError(f"response array {index}: expected numeric data; got dtype={arr.dtype}")

    if arr.shape[0] != n_trials:
        raise LengthMismatchError(
            "response array length must match stimulus array length: "
            f"response {index} has {arr.shape[0]} trials, stimuli have {n_trials}"
        )
    check_castable(arr, dtype, index=index)
    return arr


def stack_responses(
    responses: Sequence[Any],
    *,
    n_trials: int,
    dtype: Any = float,
) -> np.ndarray:
    """Validate and stack L responses into an (L, n_trials) matrix."""

    rows: List[np.ndarray] = [
        coerce_response(r, index=k, n_trials=n_trials, dtype=dtype) for k, r in enumerate(responses)
    ]
    return stack_rows(rows, n_cols=n_trials, dtype=dtype)


def missing_stimulus_mask(stimuli: np.ndarray) -> np.ndarray:
    """Boolean mask of trials whose stimulus is NaN, NaT or None."""

    if stimuli.dtype.kind in "fc":
        return np.isnan(stimuli)
    if stimuli.dtype.kind in "mM":
        return np.isnat(stimuli)
    if stimuli.dtype == object:
        # x != x only holds for NaN-like values
        return np.array([v is None or v != v for v in stimuli], dtype=bool)
    return np.zeros(stimuli.shape, dtype=bool)


def drop_missing_trials(
    stimuli: np.ndarray, stacked: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, int]:
    """Remove trials with a missing stimulus from stimuli and every response row."""

    missing = missing_stimulus_mask(stimuli)
    n_dropped = int(missing.sum())
    if n_dropped == 0:
        return stimuli, stacked, 0

    keep = ~missing
    return stimuli[keep], stacked[:, keep], n_dropped
