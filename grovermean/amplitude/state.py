from __future__ import annotations

import math

import numpy as np

from .errors import check_size


def uniform_state(n: int) -> np.ndarray:
    """
    Uniform starting vector: every entry equals 1 / sqrt(n).
    """
    n = check_size(n)
    return np.full((n,), 1.0 / math.sqrt(n), dtype=float)
