#!/usr/bin/env python3
"""
Generate the default experiment graph files (1k.txt ... 13k.txt).

Usage:
    python scripts/generate_graphs.py
    python scripts/generate_graphs.py --data-dir data --seed 42
    python scripts/generate_graphs.py --msgpack   # also write .msgpack snapshots
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathbench.benchmark import generate_default_files  # noqa: E402
from pathbench.config import (  # noqa: E402
    DATA_DIR,
    DEFAULT_EXPERIMENT_DEGREE,
    LOG_FORMAT,
    RANDOM_SEED,
)
from pathbench.exceptions import PathbenchError  # noqa: E402
from pathbench.graph import dump_msgpack, read_graph  # noqa: E402

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate default experiment graphs")
    parser.add_argument("--data-dir", type=str, default=str(DATA_DIR), help="Output directory")
    parser.add_argument("--degree", type=int, default=DEFAULT_EXPERIMENT_DEGREE, help="Out-degree per vertex")
    parser.add_argument("--seed", type=int, default=RANDOM_SEED, help="Base random seed")
    parser.add_argument("--msgpack", action="store_true", help="Also write msgpack snapshots")
    args = parser.parse_args()

    start_time = time.time()
    try:
        paths = generate_default_files(Path(args.data_dir), degree=args.degree, seed=args.seed)
    except PathbenchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for path in paths:
        size_kb = path.stat().st_size / 1024
        print(f"✓ {path.name}: {size_kb:,.1f} KB")
        if args.msgpack:
            dump_msgpack(read_graph(path), path.with_suffix(".msgpack"))

    print(f"\nGenerated {len(paths)} graphs in {time.time() - start_time:.1f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
