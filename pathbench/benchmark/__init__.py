"""
Benchmark module.

Provides infrastructure for running and reporting experiments:
- run_experiment: Both algorithms in parallel threads on one graph
- run_default_experiments / run_custom_experiment: File and generated graphs
- ExperimentResult / AlgorithmRun: Stored results
- format_results_table / save_results: Reporting
"""

from pathbench.benchmark.runner import (
    AlgorithmRun,
    ExperimentResult,
    format_results_table,
    format_run,
    generate_default_files,
    run_algorithm,
    run_custom_experiment,
    run_default_experiments,
    run_experiment,
    save_results,
    validate_parameters,
)

__all__ = [
    "AlgorithmRun",
    "ExperimentResult",
    "format_results_table",
    "format_run",
    "generate_default_files",
    "run_algorithm",
    "run_custom_experiment",
    "run_default_experiments",
    "run_experiment",
    "save_results",
    "validate_parameters",
]
