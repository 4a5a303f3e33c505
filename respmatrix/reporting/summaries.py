from __future__ import annotations

"""Build summaries and diagnostic log lines.

The summary lines are advisory only; their wording is not part of the
builder's contract.
"""

import logging
from typing import Any, List

import numpy as np

from respmatrix.contracts.results.common import Label
from respmatrix.contracts.results.response_matrix import ResponseMatrixSummary

logger = logging.getLogger(__name__)


def _label(v: Any) -> Label:
    if isinstance(v, np.generic):
        v = v.item()
    if isinstance(v, bool):
        return int(v)
    if isinstance(v, (int, float, str)):
        return v
    return str(v)


def compute_summary(uniques: np.ndarray, counts: np.ndarray, n_responses: int) -> ResponseMatrixSummary:
    counts_list = [int(c) for c in counts]
    return ResponseMatrixSummary(
        n_stimuli=len(counts_list),
        n_responses=int(n_responses),
        n_trials_total=sum(counts_list),
        max_trials=max(counts_list, default=0),
        min_trials=min(counts_list, default=0),
        stimuli=[_label(v) for v in uniques.tolist()],
        counts=counts_list,
    )


def summary_lines(summary: ResponseMatrixSummary) -> List[str]:
    return [
        "Building R and nt:",
        f"- number of stimuli = {summary.n_stimuli}",
        f"- number of responses = {summary.n_responses}",
        f"- maximum number of trials = {summary.max_trials}",
        f"- minimum number of trials = {summary.min_trials}",
    ]


def log_summary(summary: ResponseMatrixSummary) -> None:
    for line in summary_lines(summary):
        logger.info(line)
