from __future__ import annotations

import argparse
from pathlib import Path

from grovermean.amplitude.errors import AmplificationError
from grovermean.amplitude.loop import AmplificationConfig, run
from grovermean.amplitude.reporter import PrintReporter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m grovermean.amplitude",
        description="Print the marked value after each inversion-about-the-mean cycle.",
    )
    parser.add_argument("--size", type=int, default=16)
    parser.add_argument("--iterations", type=int, default=20)
    parser.add_argument("--marked", type=int, default=3)
    parser.add_argument("--backend", choices=["classical", "statevector"], default="classical")
    parser.add_argument("--show-iteration", action="store_true", default=False)
    parser.add_argument("--probability", action="store_true", default=False,
                        help="with --plot, plot squared values instead of raw amplitudes")
    parser.add_argument("--plot", type=Path, default=None)
    args = parser.parse_args(argv)
    if args.probability and args.plot is None:
        parser.error("--probability only applies together with --plot.")

    try:
        cfg = AmplificationConfig(
            size=int(args.size),
            n_iterations=int(args.iterations),
            marked_index=int(args.marked),
            backend=args.backend,
        )
        result = run(cfg, reporter=PrintReporter(show_iteration=bool(args.show_iteration)))
    except AmplificationError as e:
        parser.error(str(e))

    if args.plot is not None:
        from grovermean.amplitude.plotting import plot_trajectory

        plot_trajectory(out_path=args.plot, result=result, show_probability=bool(args.probability))
        print(f"saved plot to {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
