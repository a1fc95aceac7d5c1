from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np

from .loop import AmplificationResult


def plot_trajectory(
    *,
    out_path: Path,
    result: AmplificationResult,
    show_probability: bool = False,
    title: Optional[str] = None,
) -> None:
    """
    Line plot of the marked value (or its square) per cycle, saved to `out_path`.
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except Exception as e:  # pragma: no cover
        raise RuntimeError("plot_trajectory requires `matplotlib` to be installed.") from e

    values = np.asarray(result.probabilities if show_probability else result.trajectory, dtype=float)
    x = np.arange(1, values.shape[0] + 1)
    cfg = result.config

    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.plot(x, values, marker="o", lw=2, color="tab:blue", label=f"index {cfg.marked_index}")
    ax.axhline(0.0, color="k", lw=0.8, alpha=0.5)

    if title is None:
        title = f"Inversion about the mean (N={cfg.size}, backend={cfg.backend})"
    ax.set_title(title)
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Probability" if show_probability else "Amplitude")
    ax.grid(True, alpha=0.25)
    ax.legend()

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
