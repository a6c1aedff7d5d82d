"""
Benchmark runner comparing Dijkstra and Bellman-Ford on the same graph.

Each experiment runs both searches concurrently in two worker threads
against one graph. The graph is only read during a search, so the
workers share it without locking.

Usage:
    from pathbench.benchmark.runner import run_custom_experiment, format_results_table

    result = run_custom_experiment(vertex_count=500, degree=3, seed=1)
    print(format_results_table([result]))
"""

from __future__ import annotations

import json
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from pathlib import Path

from pathbench.config import (
    DATA_DIR,
    DEFAULT_END_VERTEX,
    DEFAULT_EXPERIMENT_DEGREE,
    DEFAULT_EXPERIMENT_SIZES,
    DEFAULT_EXPORT_PATH,
    DEFAULT_START_VERTEX,
    MAX_DEGREE,
    MIN_DEGREE,
    MIN_VERTICES,
)
from pathbench.exceptions import InvalidParameters, NoPathFound
from pathbench.graph.codec import read_graph, write_graph
from pathbench.graph.generator import generate_graph
from pathbench.graph.model import Graph
from pathbench.graph.search import Algorithm

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT TRACKING
# =============================================================================

@dataclass
class AlgorithmRun:
    """
    One timed search.

    Attributes:
        algorithm: Algorithm name ("Dijkstra" or "Bellman-Ford")
        start: Start vertex
        end: End vertex
        path: Path found (empty if unreachable)
        weight: Path weight
        elapsed_us: Wall time of the search in microseconds
        error: Failure message (Dijkstra's NoPathFound), empty on success
        thread_name: Worker thread that ran the search
    """

    algorithm: str
    start: int
    end: int
    path: list[int]
    weight: int
    elapsed_us: int
    error: str = ""
    thread_name: str = ""

    @property
    def found(self) -> bool:
        return bool(self.path)


@dataclass
class ExperimentResult:
    """
    Both algorithms run against one graph.

    Attributes:
        source: File name the graph came from, or "generated"
        vertex_count: Vertices in the graph
        edge_count: Edges in the graph
        dijkstra: Dijkstra run
        bellman_ford: Bellman-Ford run
    """

    source: str
    vertex_count: int
    edge_count: int
    dijkstra: AlgorithmRun
    bellman_ford: AlgorithmRun
    runs: list[AlgorithmRun] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.runs = [self.dijkstra, self.bellman_ford]

    @property
    def weights_agree(self) -> bool:
        """Whether both algorithms found paths of the same weight."""
        return self.dijkstra.found and self.bellman_ford.found and (
            self.dijkstra.weight == self.bellman_ford.weight
        )


# =============================================================================
# PARAMETER VALIDATION
# =============================================================================

def validate_parameters(vertex_count: int, degree: int) -> None:
    """
    Check custom experiment parameters.

    Raises:
        InvalidParameters: If vertex_count < MIN_VERTICES or degree is
            outside [MIN_DEGREE, MAX_DEGREE]
    """
    if vertex_count < MIN_VERTICES or not MIN_DEGREE <= degree <= MAX_DEGREE:
        raise InvalidParameters(
            f"Invalid arguments for custom experiment. "
            f"Ensure v >= {MIN_VERTICES} and {MIN_DEGREE} <= d <= {MAX_DEGREE} "
            f"(got v={vertex_count}, d={degree})."
        )


# =============================================================================
# RUNNING
# =============================================================================

def run_algorithm(graph: Graph, start: int, end: int, algorithm: Algorithm) -> AlgorithmRun:
    """
    Run and time one search.

    Dijkstra's NoPathFound is recorded in AlgorithmRun.error rather than
    raised; Bellman-Ford reports unreachability as an empty path.
    """
    thread_name = threading.current_thread().name
    logger.info(
        f"[{thread_name}] Shortest-path for graph (v={graph.vertex_count}, e={graph.edge_count}) "
        f"| Initial vertex: {start} | Destination vertex: {end}"
    )
    logger.info(f"[{thread_name}] Finding path using {algorithm}...")

    path: list[int] = []
    weight = 0
    error = ""

    start_ns = time.perf_counter_ns()
    try:
        if algorithm is Algorithm.DIJKSTRA:
            path, weight = graph.shortest_path_dijkstra(start, end)
        else:
            path, weight = graph.shortest_path_bellman_ford(start, end)
    except NoPathFound as e:
        error = str(e)
    elapsed_us = (time.perf_counter_ns() - start_ns) // 1000

    if error:
        logger.warning(f"[{thread_name}] {algorithm}: {error}")
    else:
        logger.info(f"[{thread_name}] Shortest path: {' -> '.join(map(str, path))}")
        logger.info(f"[{thread_name}] Path length: {weight}")
    logger.info(f"[{thread_name}] {algorithm} finished in {elapsed_us} microseconds")

    return AlgorithmRun(
        algorithm=str(algorithm),
        start=start,
        end=end,
        path=path,
        weight=weight,
        elapsed_us=elapsed_us,
        error=error,
        thread_name=thread_name,
    )


def run_experiment(
    graph: Graph,
    start: int = DEFAULT_START_VERTEX,
    end: int = DEFAULT_END_VERTEX,
    source: str = "generated",
) -> ExperimentResult:
    """Run Dijkstra and Bellman-Ford in parallel on graph and join both."""
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="search") as executor:
        dijkstra_future = executor.submit(run_algorithm, graph, start, end, Algorithm.DIJKSTRA)
        bellman_ford_future = executor.submit(run_algorithm, graph, start, end, Algorithm.BELLMAN_FORD)

        dijkstra = dijkstra_future.result()
        bellman_ford = bellman_ford_future.result()

    return ExperimentResult(
        source=source,
        vertex_count=graph.vertex_count,
        edge_count=graph.edge_count,
        dijkstra=dijkstra,
        bellman_ford=bellman_ford,
    )


def run_default_experiments(
    data_dir: Path = DATA_DIR,
    files: list[str] | None = None,
) -> list[ExperimentResult]:
    """
    Run one experiment per default graph file.

    Raises:
        MalformedInput: If a file is missing or cannot be parsed
    """
    files = files if files is not None else list(DEFAULT_EXPERIMENT_SIZES)
    results = []

    for filename in files:
        logger.info(f"Running experiment from file: {filename}")
        graph = read_graph(Path(data_dir) / filename)
        results.append(run_experiment(graph, source=filename))

    return results


def run_custom_experiment(
    vertex_count: int,
    degree: int,
    seed: int | None = None,
    export_path: Path | None = DEFAULT_EXPORT_PATH,
) -> ExperimentResult:
    """
    Generate a graph, export it as text, and run one experiment on it.

    Args:
        vertex_count: Vertices to generate (>= MIN_VERTICES)
        degree: Out-degree per vertex (MIN_DEGREE..MAX_DEGREE)
        seed: Seed for reproducible generation
        export_path: Where to write the generated graph (None to skip)

    Raises:
        InvalidParameters: If the parameters are out of range
    """
    validate_parameters(vertex_count, degree)

    graph = generate_graph(vertex_count, degree, seed=seed)
    if export_path is not None:
        write_graph(graph, export_path)

    return run_experiment(graph)


def generate_default_files(
    data_dir: Path = DATA_DIR,
    degree: int = DEFAULT_EXPERIMENT_DEGREE,
    seed: int | None = None,
) -> list[Path]:
    """Generate and write every default experiment graph file."""
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for offset, (filename, vertex_count) in enumerate(DEFAULT_EXPERIMENT_SIZES.items()):
        file_seed = None if seed is None else seed + offset
        graph = generate_graph(vertex_count, degree, seed=file_seed)
        written.append(write_graph(graph, data_dir / filename))

    return written


# =============================================================================
# REPORTING
# =============================================================================

def format_run(run: AlgorithmRun) -> str:
    """Human-readable one-line summary of a run."""
    if run.error:
        return f"{run.algorithm}: ERROR - {run.error}"
    if not run.found:
        return f"{run.algorithm}: no path found ({run.elapsed_us} us)"
    path = " -> ".join(map(str, run.path))
    return f"{run.algorithm}: {path} (length {run.weight}, {run.elapsed_us} us)"


def format_results_table(results: list[ExperimentResult]) -> str:
    """Fixed-width results table; times are in microseconds."""
    lines = [
        f"{'Experiment':<12} | {'File':<10} | {'V':<6} | {'E':<6} | {'Dijkstra':<12} | Bellman-Ford",
        "-------------|------------|--------|--------|--------------|-------------",
    ]
    for i, r in enumerate(results, 1):
        dijkstra = "ERROR" if r.dijkstra.error else str(r.dijkstra.elapsed_us)
        lines.append(
            f"{'#' + str(i):<12} | {r.source:<10} | {r.vertex_count:<6} | {r.edge_count:<6} | "
            f"{dijkstra:<12} | {r.bellman_ford.elapsed_us}"
        )
    return "\n".join(lines)


def save_results(results: list[ExperimentResult], output_path: Path) -> Path:
    """Save experiment results as JSON."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_data = {
        "experiments": [
            {
                "source": r.source,
                "vertex_count": r.vertex_count,
                "edge_count": r.edge_count,
                "weights_agree": r.weights_agree,
                "runs": [asdict(run) for run in r.runs],
            }
            for r in results
        ],
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2)

    logger.info(f"Results saved to {output_path}")
    return output_path
