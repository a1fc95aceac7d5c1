#!/usr/bin/env python3
"""
Save a plot of the marked-value trajectory.

Usage:
    python scripts/plot_trajectory.py                      # N=16, 20 iterations, index 3
    python scripts/plot_trajectory.py --size 64 --iterations 12 --probability
    python scripts/plot_trajectory.py --iterations optimal  # stop at the first peak
"""
import argparse
from pathlib import Path


def plot(size: int, iterations: str, marked: int, probability: bool, output: str = "trajectory.png"):
    """Run the classical loop and write the plot to `output`."""
    from grovermean.amplitude.grover import optimal_iterations
    from grovermean.amplitude.loop import AmplificationConfig, run
    from grovermean.amplitude.plotting import plot_trajectory

    n_iterations = optimal_iterations(size) if iterations == "optimal" else int(iterations)
    print(f"Running N={size}, iterations={n_iterations}, marked={marked}")

    result = run(AmplificationConfig(size=size, n_iterations=n_iterations, marked_index=marked))
    print(f"Peak at iteration {result.peak_iteration} ({result.seconds:.6f} s)")

    plot_trajectory(out_path=Path(output), result=result, show_probability=probability)
    print(f"Saved {output}")


def main():
    parser = argparse.ArgumentParser(description="Plot the inversion-about-the-mean trajectory")
    parser.add_argument("--size", type=int, default=16, help="Vector length N")
    parser.add_argument("--iterations", type=str, default="20", help="Cycle count, or 'optimal'")
    parser.add_argument("--marked", type=int, default=3, help="Marked index")
    parser.add_argument("--probability", action="store_true", help="Plot squared values")
    parser.add_argument("--output", type=str, default="trajectory.png", help="Output file")
    args = parser.parse_args()

    plot(
        size=args.size,
        iterations=args.iterations,
        marked=args.marked,
        probability=args.probability,
        output=args.output,
    )


if __name__ == "__main__":
    main()
