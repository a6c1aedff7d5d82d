"""
Configuration constants for the pathbench project.

All paths, generation conventions and experiment settings are defined here.
Overrides come from environment variables (LOG_LEVEL, PATHBENCH_SEED,
PATHBENCH_DATA_DIR).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathbench/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains the default experiment graph files)
DATA_DIR = Path(os.environ.get("PATHBENCH_DATA_DIR", PROJECT_ROOT / "data"))

# Where a custom experiment exports its generated graph
DEFAULT_EXPORT_PATH = Path("out.txt")

# =============================================================================
# Graph Generation Configuration
# =============================================================================

# Candidate pool oversampling: pool size = vertices * degree * factor
EDGE_GENERATION_FACTOR = 4

# Generated edge weights cycle through [MIN_WEIGHT, MAX_WEIGHT]
MIN_WEIGHT = 1
MAX_WEIGHT = 10

# Optional fixed seed for reproducible generation (unset = fresh entropy)
_seed = os.environ.get("PATHBENCH_SEED")
RANDOM_SEED = int(_seed) if _seed else None

# =============================================================================
# Experiment Configuration
# =============================================================================

# Parameter bounds for custom experiments
MIN_VERTICES = 50
MIN_DEGREE = 1
MAX_DEGREE = 10

# Both algorithms search between these vertices
DEFAULT_START_VERTEX = 0
DEFAULT_END_VERTEX = 1

# Default experiment files and the vertex counts they hold
DEFAULT_EXPERIMENT_SIZES = {
    "1k.txt": 1000,
    "2k.txt": 2000,
    "3k.txt": 3000,
    "5k.txt": 5000,
    "8k.txt": 8000,
    "13k.txt": 13000,
}

# All vertices in the default experiment graphs have this out-degree
DEFAULT_EXPERIMENT_DEGREE = 2

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_experiment_files(data_dir: Path = DATA_DIR) -> dict[str, bool]:
    """Check which default experiment files exist."""
    return {name: (data_dir / name).exists() for name in DEFAULT_EXPERIMENT_SIZES}


def get_missing_experiment_files(data_dir: Path = DATA_DIR) -> list[str]:
    """Return list of missing experiment file names."""
    status = validate_experiment_files(data_dir)
    return [name for name, exists in status.items() if not exists]
