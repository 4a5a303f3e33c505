"""Tests for building the (L, maxNt, Ns) response tensor."""

import numpy as np
import pytest

from respmatrix.api import build_response_matrix


def test_two_stimulus_scenario(two_stimulus_trials):
    stimuli, response = two_stimulus_trials
    R, nt = build_response_matrix(stimuli, [response])

    assert R.shape == (1, 3, 2)
    np.testing.assert_array_equal(nt, [2, 3])
    np.testing.assert_array_equal(R[0, :, 0], [10, 11, 0])
    np.testing.assert_array_equal(R[0, :, 1], [20, 21, 22])


def test_shape_and_counts_invariants(shuffled_trials):
    stimuli, responses = shuffled_trials
    R, nt = build_response_matrix(stimuli, responses)

    n_stim = np.unique(stimuli).size
    assert nt.sum() == stimuli.size
    assert R.shape == (len(responses), nt.max(), n_stim)
    assert np.all(nt > 0)


def test_tensor_matches_direct_filtering(shuffled_trials):
    stimuli, responses = shuffled_trials
    R, nt = build_response_matrix(stimuli, responses)

    for s, value in enumerate(np.unique(stimuli)):
        for l, resp in enumerate(responses):
            np.testing.assert_array_equal(R[l, : nt[s], s], resp[stimuli == value])


def test_padding_is_zero(shuffled_trials):
    stimuli, responses = shuffled_trials
    R, nt = build_response_matrix(stimuli, responses)

    for s in range(nt.size):
        assert np.all(R[:, nt[s]:, s] == 0)


def test_stimulus_index_follows_sorted_order():
    # first occurrence order is 5, 1, 3 but pages follow 1, 3, 5
    stimuli = [5, 1, 3, 5, 1]
    response = [50, 10, 30, 51, 11]
    R, nt = build_response_matrix(stimuli, [response])

    np.testing.assert_array_equal(nt, [2, 1, 2])
    np.testing.assert_array_equal(R[0, :, 0], [10, 11])
    np.testing.assert_array_equal(R[0, :, 1], [30, 0])
    np.testing.assert_array_equal(R[0, :, 2], [50, 51])


def test_string_stimuli():
    stimuli = ["grating", "blank", "grating", "image"]
    R, nt = build_response_matrix(stimuli, [[1.0, 2.0, 3.0, 4.0]])

    np.testing.assert_array_equal(nt, [1, 2, 1])
    np.testing.assert_array_equal(R[0, :, 1], [1.0, 3.0])


def test_multiple_responses_keep_channel_order():
    stimuli = [0, 1, 0]
    r1 = [1, 2, 3]
    r2 = [-1, -2, -3]
    R, nt = build_response_matrix(stimuli, [r1, r2])

    np.testing.assert_array_equal(R[:, :, 0], [[1, 3], [-1, -3]])
    np.testing.assert_array_equal(R[:, :, 1], [[2, 0], [-2, 0]])


def test_no_responses_gives_empty_first_dimension():
    R, nt = build_response_matrix([1, 2, 2], [])

    assert R.shape == (0, 2, 2)
    np.testing.assert_array_equal(nt, [1, 2])


def test_single_trial():
    R, nt = build_response_matrix([4], [[7.5]])

    assert R.shape == (1, 1, 1)
    np.testing.assert_array_equal(nt, [1])
    assert R[0, 0, 0] == 7.5


def test_empty_stimulus_array():
    R, nt = build_response_matrix([], [[]])

    assert R.shape == (1, 0, 0)
    assert nt.shape == (0,)


def test_row_and_column_vectors_are_accepted():
    stimuli = np.array([[1, 2, 1]])
    response = np.array([[1.0], [2.0], [3.0]])
    R, nt = build_response_matrix(stimuli, [response])

    np.testing.assert_array_equal(nt, [2, 1])
    np.testing.assert_array_equal(R[0, :, 0], [1.0, 3.0])


def test_repeated_builds_are_identical(shuffled_trials):
    stimuli, responses = shuffled_trials
    R1, nt1 = build_response_matrix(stimuli, responses)
    R2, nt2 = build_response_matrix(stimuli, responses)

    np.testing.assert_array_equal(R1, R2)
    np.testing.assert_array_equal(nt1, nt2)
    assert R1 is not R2


def test_inputs_are_not_modified(two_stimulus_trials):
    stimuli, response = two_stimulus_trials
    s_before, r_before = stimuli.copy(), response.copy()
    R, _ = build_response_matrix(stimuli, [response])
    R[...] = -1

    np.testing.assert_array_equal(stimuli, s_before)
    np.testing.assert_array_equal(response, r_before)


@pytest.mark.parametrize("dtype", [np.float32, np.int64])
def test_output_dtype(two_stimulus_trials, dtype):
    stimuli, response = two_stimulus_trials
    R, nt = build_response_matrix(stimuli, [response], dtype=dtype)

    assert R.dtype == dtype
    assert nt.dtype.kind == "i"
