from __future__ import annotations

import numpy as np

from .errors import check_index, check_size, check_state


def flip_marked(state: np.ndarray, marked_index: int) -> np.ndarray:
    marked_index = check_index(marked_index, check_state(state))
    state[marked_index] *= -1.0
    return state


def phase_oracle_diagonal(n: int, marked_index: int) -> np.ndarray:
    """
    Returns the diagonal entries for a phase oracle:
      diag[i] = -1 if i == marked_index else +1
    """
    n = check_size(n)
    marked_index = check_index(marked_index, n)
    diag = np.ones((n,), dtype=complex)
    diag[marked_index] = -1.0 + 0.0j
    return diag
