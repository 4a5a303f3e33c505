import numpy as np
import pytest


@pytest.fixture
def two_stimulus_trials():
    """Stimuli [1,1,2,2,2] with one response recorded per trial."""
    stimuli = np.array([1, 1, 2, 2, 2])
    response = np.array([10, 11, 20, 21, 22])
    return stimuli, response


@pytest.fixture
def shuffled_trials():
    """Interleaved stimuli with three response channels."""
    rng = np.random.default_rng(0)
    stimuli = rng.choice([3, 7, 5, 9], size=40)
    responses = [rng.normal(size=40) for _ in range(3)]
    return stimuli, responses


class RecordingProgress:
    def __init__(self):
        self.calls = []

    def init(self, *, total, label=None):
        self.calls.append(("init", total))

    def update(self, *, current, label=None):
        self.calls.append(("update", current))

    def finalize(self, *, label=None):
        self.calls.append(("finalize", None))


@pytest.fixture
def progress():
    return RecordingProgress()
