from __future__ import annotations

"""Public shape/orientation utilities.

Conventions
-----------
- A "vector" is any array with at most one non-singleton axis: scalars,
  (n,), (1, n), (n, 1), (1, n, 1), ...
- Vectors are flattened to (n,) before use; trial order is the order of the
  flattened array.
- Stacked responses are 2D: (n_responses, n_trials)
"""

from typing import Any, Sequence

import numpy as np


def is_vector(arr: Any) -> bool:
    """True if ``arr`` has at most one axis longer than 1."""

    a = np.asarray(arr)
    return sum(1 for n in a.shape if n != 1) <= 1


def as_vector(arr: Any) -> np.ndarray:
    """Flatten a vector-like input to 1D.

    Raises ``ValueError`` when the input has more than one non-singleton axis.
    """

    a = np.asarray(arr)
    if not is_vector(a):
        raise ValueError(f"expected a 1-D array; got shape {a.shape}")
    return a.reshape(-1)


def stack_rows(rows: Sequence[np.ndarray], *, n_cols: int, dtype: Any) -> np.ndarray:
    """Stack equal-length 1D rows into a preallocated (len(rows), n_cols) matrix."""

    out = np.zeros((len(rows), int(n_cols)), dtype=dtype)
    for k, row in enumerate(rows):
        out[k, :] = row
    return out
