#!/usr/bin/env python3
"""
Shortest-path experiment CLI - compare Dijkstra and Bellman-Ford.

Usage:
    python scripts/run_experiment.py --default
    python scripts/run_experiment.py --default --data-dir data --output results/default.json
    python scripts/run_experiment.py --custom -v 50 -d 3
    python scripts/run_experiment.py --custom -v 2000 -d 4 --seed 7 --export graph.txt --chart results/timing.html

Modes:
    --default   Run the experiments over 1k.txt, 2k.txt, 3k.txt, 5k.txt, 8k.txt, 13k.txt
                (generate them first with scripts/generate_graphs.py)
    --custom    Generate a graph with -v vertices and -d outgoing edges per vertex,
                export it (default out.txt) and run one experiment.
                Requires v >= 50 and 1 <= d <= 10.

Both algorithms search from vertex 0 to vertex 1 in parallel threads.
Times are reported in microseconds. Graphs are directed and weighted (1-10).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathbench.benchmark import (  # noqa: E402
    format_results_table,
    format_run,
    run_custom_experiment,
    run_default_experiments,
    save_results,
)
from pathbench.config import (  # noqa: E402
    DATA_DIR,
    DEFAULT_EXPERIMENT_DEGREE,
    DEFAULT_EXPORT_PATH,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    RANDOM_SEED,
    get_missing_experiment_files,
)
from pathbench.exceptions import PathbenchError  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Graph pathfinding experiment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "--default",
        action="store_true",
        help="Run the default set of experiments from graph files",
    )
    mode.add_argument(
        "--custom",
        action="store_true",
        help="Run a custom experiment on a generated graph",
    )

    parser.add_argument(
        "-v",
        "--vertices",
        type=int,
        default=None,
        help="Number of vertices for --custom (must be >= 50)",
    )
    parser.add_argument(
        "-d",
        "--degree",
        type=int,
        default=None,
        help="Outgoing edges per vertex for --custom (1-10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Random seed for graph generation (default: $PATHBENCH_SEED or random)",
    )
    parser.add_argument(
        "--export",
        type=str,
        default=str(DEFAULT_EXPORT_PATH),
        help=f"Where --custom writes the generated graph (default: {DEFAULT_EXPORT_PATH})",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=str(DATA_DIR),
        help="Directory holding the default experiment files",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Save results as JSON to this file",
    )
    parser.add_argument(
        "--chart",
        type=str,
        default=None,
        help="Save a timing chart as HTML to this file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        if args.default:
            missing = get_missing_experiment_files(Path(args.data_dir))
            if missing:
                print(f"Error: missing experiment files in {args.data_dir}: {', '.join(missing)}", file=sys.stderr)
                print("Generate them with: python scripts/generate_graphs.py", file=sys.stderr)
                return 1

            print("Running the default set of experiments:")
            print("." * 39 + "\n")
            results = run_default_experiments(Path(args.data_dir))
        else:
            if args.vertices is None or args.degree is None:
                print("Error: --custom requires -v and -d", file=sys.stderr)
                return 1

            print("Running your custom experiment:")
            print("." * 31 + "\n")
            results = [
                run_custom_experiment(
                    args.vertices,
                    args.degree,
                    seed=args.seed,
                    export_path=Path(args.export),
                )
            ]
    except PathbenchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Print results
    for r in results:
        print(f"\n{r.source} (v={r.vertex_count}, e={r.edge_count})")
        for run in r.runs:
            print(f"  {format_run(run)}")

    print("\nExperiment Results:")
    print(format_results_table(results))

    print("\nNotes:")
    print("1. Results for Dijkstra and Bellman-Ford are displayed in microseconds.")
    print("2. V := number of vertices, E := number of edges.")
    print("3. Graphs are directed and weighted (1-10).")
    if args.default:
        print(f"4. All vertices have {DEFAULT_EXPERIMENT_DEGREE} outgoing edges.")
    else:
        print(f"4. All vertices have {args.degree} outgoing edges.")
        print(f"\nCustom experiment completed. You can find the graph in {args.export}.")

    if args.output:
        output_path = save_results(results, Path(args.output))
        print(f"\nResults saved to {output_path}")

    if args.chart:
        from pathbench.benchmark.charts import create_timing_chart, save_chart

        chart_path = save_chart(create_timing_chart(results), Path(args.chart))
        print(f"Chart saved to {chart_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
