from __future__ import annotations

from numbers import Integral

import numpy as np


class AmplificationError(ValueError):
    """Base class for invalid amplification parameters."""


class InvalidSize(AmplificationError):
    pass


class InvalidIndex(AmplificationError):
    pass


class InvalidIterationCount(AmplificationError):
    pass


class InvalidState(AmplificationError):
    pass


def _is_int(value) -> bool:
    # bool is Integral but never a meaningful size or index
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_size(n) -> int:
    if not _is_int(n) or n <= 0:
        raise InvalidSize(f"size must be a positive integer, got {n!r}.")
    return int(n)


def check_index(marked_index, n: int) -> int:
    if not _is_int(marked_index) or not 0 <= marked_index < n:
        raise InvalidIndex(f"marked_index must be in [0, {n}), got {marked_index!r}.")
    return int(marked_index)


def check_iteration_count(iteration_count) -> int:
    if not _is_int(iteration_count) or iteration_count < 0:
        raise InvalidIterationCount(f"iteration_count must be >= 0, got {iteration_count!r}.")
    return int(iteration_count)


def check_state(state) -> int:
    """
    Accepts only a 1-D floating-point ndarray, since operators update it in place.
    """
    if not isinstance(state, np.ndarray):
        raise InvalidState(f"state must be a numpy array, got {type(state).__name__}.")
    if state.ndim != 1:
        raise InvalidState(f"state must be 1-D, got shape {state.shape}.")
    if not np.issubdtype(state.dtype, np.floating):
        raise InvalidState(f"state must have a floating-point dtype, got {state.dtype}.")
    return check_size(state.shape[0])
