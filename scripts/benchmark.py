#!/usr/bin/env python3
"""Benchmark script for backup_exclude performance testing.

Builds a synthetic source tree and times matching runs over it.
Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import tempfile
import time
from pathlib import Path

_PATTERNS = ("*.log", "*.tmp", "cache/", "**/build", "dir0/file0.txt", "node_modules")


def build_tree(root: Path, width: int, depth: int) -> int:
    """Create a synthetic tree: width dirs per level, four files per dir.

    Returns:
        Number of files created
    """
    created = 0
    level = [root]
    for _ in range(depth):
        next_level = []
        for parent in level:
            for i in range(width):
                directory = parent / ("cache" if i == width - 1 else f"dir{i}")
                directory.mkdir()
                for j, suffix in enumerate((".txt", ".log", ".tmp", ".c")):
                    (directory / f"file{j}{suffix}").write_text("x")
                    created += 1
                next_level.append(directory)
        level = next_level
    return created


def benchmark_import_time() -> float:
    """Measure import time of backup_exclude package."""
    start = time.perf_counter()
    import backup_exclude  # noqa: F401

    return time.perf_counter() - start


def benchmark_classification() -> float:
    """Measure classification time of pattern strings."""
    from backup_exclude.application.classifier import make_pattern

    start = time.perf_counter()
    for _ in range(10000):
        for text in _PATTERNS:
            make_pattern(text)
    return time.perf_counter() - start


def benchmark_run(root: Path) -> float:
    """Measure one full matching run over root."""
    from backup_exclude.application.engine import ExclusionEngine

    start = time.perf_counter()
    ExclusionEngine().run(root, _PATTERNS)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run backup_exclude benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument("--width", type=int, default=4, help="Directories per level")
    parser.add_argument("--depth", type=int, default=4, help="Tree depth")
    args = parser.parse_args()

    results = []

    # Import time
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        }
    )

    # Pattern classification
    results.append(
        {
            "name": f"Classification ({10000 * len(_PATTERNS)} patterns)",
            "unit": "seconds",
            "value": benchmark_classification(),
        }
    )

    # Full run over a synthetic tree
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        files = build_tree(root, args.width, args.depth)
        results.append(
            {
                "name": f"Matching Run ({files} files, {len(_PATTERNS)} patterns)",
                "unit": "seconds",
                "value": benchmark_run(root),
            }
        )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
