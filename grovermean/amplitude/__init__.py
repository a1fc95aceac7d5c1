from .errors import AmplificationError, InvalidIndex, InvalidIterationCount, InvalidSize, InvalidState
from .grover import diffusion_operator, optimal_iterations, reflect_about_mean
from .loop import AmplificationConfig, AmplificationResult, amplify, iterate, run
from .oracle import flip_marked, phase_oracle_diagonal
from .reporter import PrintReporter, TrajectoryRecorder, report
from .state import uniform_state

__all__ = [
    "AmplificationConfig",
    "AmplificationError",
    "AmplificationResult",
    "InvalidIndex",
    "InvalidIterationCount",
    "InvalidSize",
    "InvalidState",
    "PrintReporter",
    "TrajectoryRecorder",
    "amplify",
    "diffusion_operator",
    "flip_marked",
    "iterate",
    "optimal_iterations",
    "phase_oracle_diagonal",
    "reflect_about_mean",
    "report",
    "run",
    "uniform_state",
]
