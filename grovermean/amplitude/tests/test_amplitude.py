import numpy as np
import pytest

from grovermean.amplitude.errors import (
    AmplificationError,
    InvalidIndex,
    InvalidIterationCount,
    InvalidSize,
    InvalidState,
)
from grovermean.amplitude.grover import optimal_iterations, reflect_about_mean
from grovermean.amplitude.loop import amplify, iterate
from grovermean.amplitude.oracle import flip_marked, phase_oracle_diagonal
from grovermean.amplitude.state import uniform_state


def test_uniform_state_entries():
    state = uniform_state(16)
    assert state.shape == (16,)
    assert np.all(state == 0.25)


@pytest.mark.parametrize("n", [0, -1, -16, 2.0, True])
def test_uniform_state_rejects_bad_size(n):
    with pytest.raises(InvalidSize):
        uniform_state(n)


def test_reflection_is_an_involution():
    rng = np.random.default_rng(0)
    original = rng.normal(size=10)
    state = original.copy()
    reflect_about_mean(reflect_about_mean(state))
    assert np.allclose(state, original)


def test_reflection_preserves_sum():
    rng = np.random.default_rng(1)
    state = rng.normal(size=7)
    total = state.sum()
    for _ in range(5):
        reflect_about_mean(state)
        assert state.sum() == pytest.approx(total)


def test_reflection_uses_pre_transform_mean():
    state = np.array([1.0, 0.0, 0.0, 0.0])
    out = reflect_about_mean(state)
    assert out is state
    assert state.tolist() == [-0.5, 0.5, 0.5, 0.5]


def test_reflection_rejects_integer_vector():
    state = np.array([1, 0, 0, 0])
    with pytest.raises(InvalidState, match="int"):
        reflect_about_mean(state)
    assert state.tolist() == [1, 0, 0, 0]


def test_reflection_rejects_matrix():
    state = np.array([[1.0, 0.0], [0.0, 0.0]])
    with pytest.raises(InvalidState, match="1-D"):
        reflect_about_mean(state)
    assert state.tolist() == [[1.0, 0.0], [0.0, 0.0]]


def test_reflection_rejects_plain_list():
    with pytest.raises(InvalidState):
        reflect_about_mean([1.0, 0.0])


def test_reflection_rejects_empty_vector():
    with pytest.raises(InvalidSize):
        reflect_about_mean(np.array([], dtype=float))


def test_reflection_accepts_float32():
    state = np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float32)
    reflect_about_mean(state)
    assert state.dtype == np.float32
    assert state.tolist() == [-0.5, 0.5, 0.5, 0.5]


def test_uniform_vector_is_a_fixed_point():
    state = uniform_state(8)
    assert np.allclose(reflect_about_mean(state.copy()), state)


def test_flip_marked_only_touches_one_entry():
    state = np.array([0.5, 0.5, 0.5, 0.5])
    flip_marked(state, 2)
    assert state.tolist() == [0.5, 0.5, -0.5, 0.5]


@pytest.mark.parametrize("idx", [-1, 4, 10])
def test_flip_marked_rejects_out_of_range(idx):
    state = np.array([0.5, 0.5, 0.5, 0.5])
    with pytest.raises(InvalidIndex):
        flip_marked(state, idx)
    assert state.tolist() == [0.5, 0.5, 0.5, 0.5]


def test_flip_marked_rejects_integer_vector():
    state = np.array([1, 1, 1, 1])
    with pytest.raises(InvalidState):
        flip_marked(state, 0)
    assert state.tolist() == [1, 1, 1, 1]


def test_phase_oracle_diagonal():
    diag = phase_oracle_diagonal(4, 1)
    assert diag.tolist() == [1.0 + 0j, -1.0 + 0j, 1.0 + 0j, 1.0 + 0j]


def test_single_iteration_flips_marked_entry():
    assert amplify(16, 1, 3) == pytest.approx([-0.25])


def test_three_iterations_on_four_entries():
    assert amplify(4, 3, 0) == pytest.approx([-0.5, -1.0, -0.5])


@pytest.mark.parametrize("n,k,idx", [(1, 0, 0), (1, 5, 0), (5, 3, 4), (16, 20, 3), (33, 7, 0)])
def test_trajectory_length(n, k, idx):
    trajectory = amplify(n, k, idx)
    assert len(trajectory) == k
    assert all(isinstance(v, float) for v in trajectory)


def test_trajectory_is_deterministic():
    assert amplify(16, 20, 3) == amplify(16, 20, 3)


def test_iterate_matches_amplify():
    assert list(iterate(8, 6, 5)) == amplify(8, 6, 5)


@pytest.mark.parametrize("idx", [-1, 16, 100])
@pytest.mark.parametrize("k", [0, 1, 5])
def test_out_of_range_index_rejected_for_any_count(idx, k):
    with pytest.raises(InvalidIndex):
        amplify(16, k, idx)


@pytest.mark.parametrize("n", [0, -4])
@pytest.mark.parametrize("k", [0, 3])
def test_non_positive_size_rejected_for_any_count(n, k):
    with pytest.raises(InvalidSize):
        amplify(n, k, 0)


def test_negative_iteration_count_rejected():
    with pytest.raises(InvalidIterationCount):
        amplify(4, -1, 0)


def test_iterate_validates_before_first_value():
    with pytest.raises(InvalidIndex):
        iterate(4, 2, 4)


def test_errors_are_value_errors():
    assert issubclass(InvalidSize, AmplificationError)
    assert issubclass(AmplificationError, ValueError)


def test_optimal_iterations_hits_first_peak():
    assert optimal_iterations(4) == 2
    assert optimal_iterations(16) == 4
    trajectory = np.abs(amplify(16, optimal_iterations(16) + 1, 3))
    assert int(np.argmax(trajectory)) + 1 == optimal_iterations(16)


def test_optimal_iterations_rejects_bad_size():
    with pytest.raises(InvalidSize):
        optimal_iterations(0)
