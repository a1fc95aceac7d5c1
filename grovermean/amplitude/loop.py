from __future__ import annotations

from dataclasses import dataclass, field
from timeit import default_timer as timer
from typing import Callable, Iterator, List, Literal, Optional

import numpy as np

from .errors import check_index, check_iteration_count, check_size
from .grover import reflect_about_mean
from .oracle import flip_marked
from .qiskit_backend import statevector_trajectory
from .reporter import report
from .state import uniform_state


BackendKind = Literal["classical", "statevector"]


@dataclass(frozen=True)
class AmplificationConfig:
    size: int = 16
    n_iterations: int = 20
    marked_index: int = 3
    backend: BackendKind = "classical"

    def __post_init__(self):
        n = check_size(self.size)
        check_index(self.marked_index, n)
        check_iteration_count(self.n_iterations)


@dataclass
class AmplificationResult:
    config: AmplificationConfig
    trajectory: List[float] = field(default_factory=list)
    seconds: float = 0.0

    @property
    def probabilities(self) -> List[float]:
        return [v * v for v in self.trajectory]

    @property
    def peak_iteration(self) -> Optional[int]:
        """1-based cycle with the largest marked magnitude."""
        if not self.trajectory:
            return None
        return int(np.argmax(np.abs(self.trajectory))) + 1


def _cycles(state: np.ndarray, iteration_count: int, marked_index: int) -> Iterator[float]:
    for _ in range(iteration_count):
        reflect_about_mean(state)
        flip_marked(state, marked_index)
        yield float(state[marked_index])


def iterate(n: int, iteration_count: int, marked_index: int) -> Iterator[float]:
    """
    Lazily runs the diffusion + oracle cycles, yielding the marked value after each one.

    Parameters are validated on call, before the first value is requested.
    """
    n = check_size(n)
    marked_index = check_index(marked_index, n)
    iteration_count = check_iteration_count(iteration_count)
    return _cycles(uniform_state(n), iteration_count, marked_index)


def amplify(n: int, iteration_count: int, marked_index: int) -> List[float]:
    """
    Runs `iteration_count` cycles of inversion about the mean followed by a sign
    flip at `marked_index`, starting from the uniform vector of size `n`.

    Returns the marked entry's value after every cycle (length `iteration_count`).
    Raises `InvalidSize`, `InvalidIndex` or `InvalidIterationCount` before any
    work is done.
    """
    return list(iterate(n, iteration_count, marked_index))


def run(
    config: AmplificationConfig = AmplificationConfig(),
    reporter: Optional[Callable[[int, float], None]] = None,
) -> AmplificationResult:
    if config.backend == "classical":
        t_start = timer()
        trajectory = amplify(config.size, config.n_iterations, config.marked_index)
        elapsed = timer() - t_start
    elif config.backend == "statevector":
        t_start = timer()
        trajectory = statevector_trajectory(config.size, config.n_iterations, config.marked_index)
        elapsed = timer() - t_start
    else:
        raise ValueError(f"Unknown backend: {config.backend}")

    if reporter is not None:
        report(trajectory, reporter)
    return AmplificationResult(config=config, trajectory=trajectory, seconds=elapsed)
