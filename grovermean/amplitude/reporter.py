from __future__ import annotations

from typing import Callable, Iterable, List, Optional, TextIO


def report(trajectory: Iterable[float], sink: Callable[[int, float], None]) -> None:
    """Feeds every value to `sink` with its 1-based iteration number, in order."""
    for iteration, value in enumerate(trajectory, start=1):
        sink(iteration, value)


class PrintReporter:
    """
    Prints one value per line, like the console demo.
    """

    def __init__(self, show_iteration: bool = False, file: Optional[TextIO] = None):
        self.show_iteration = show_iteration
        self.file = file

    def __call__(self, iteration: int, value: float) -> None:
        if self.show_iteration:
            print(f"{iteration}: {value}", file=self.file)
        else:
            print(f"{value}", file=self.file)


class TrajectoryRecorder:
    def __init__(self):
        self.values: List[float] = []

    def __call__(self, iteration: int, value: float) -> None:
        self.values.append(value)
