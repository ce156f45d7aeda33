"""
Loop Hero Optimizer - Analysis

Runs the optimizer over a range of grid sizes and summarises how good the
best layouts are and how much searching it took to find them.
"""

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .core.landscape import LandscapeKind
from .core.search import optimize


@dataclass
class SurveyEntry:
    """One optimizer run."""

    rows: int
    cols: int
    landscape: LandscapeKind
    score: int
    nodes: int
    pruned: int
    elapsed: float

    @property
    def score_per_tile(self) -> float:
        return self.score / (self.rows * self.cols)

    @property
    def prune_ratio(self) -> float:
        return self.pruned / self.nodes if self.nodes else 0.0


def percentile_stats(values) -> dict:
    """Return min/25th/50th/75th/max statistics."""
    if not len(values):
        raise ValueError("values cannot be empty in percentile_stats call")
    arr = np.asarray(values, dtype=float)
    return {
        "min": float(np.min(arr)),
        "25th": float(np.percentile(arr, 25)),
        "50th": float(np.percentile(arr, 50)),
        "75th": float(np.percentile(arr, 75)),
        "max": float(np.max(arr)),
        "count": int(arr.size),
    }


def grid_sizes(max_rows: int, max_cols: int) -> list[tuple[int, int]]:
    """Every (rows, cols) from 1x1 up to max_rows x max_cols."""
    return [(r, c) for r in range(1, max_rows + 1) for c in range(1, max_cols + 1)]


def survey(
    sizes: Iterable[tuple[int, int]],
    landscapes: Iterable[LandscapeKind] = tuple(LandscapeKind),
    verbose: bool = False,
) -> list[SurveyEntry]:
    """
    Optimize every size for every landscape kind.

    Args:
        sizes: (rows, cols) pairs to run
        landscapes: Landscape kinds to run for each size
        verbose: If True, print one line per run

    Returns:
        One SurveyEntry per run, in landscape-major order
    """
    sizes = list(sizes)
    entries = []
    for landscape in landscapes:
        for rows, cols in sizes:
            result = optimize(rows, cols, landscape)
            entry = SurveyEntry(
                rows=rows,
                cols=cols,
                landscape=landscape,
                score=result.score,
                nodes=result.nodes,
                pruned=result.pruned,
                elapsed=result.elapsed,
            )
            entries.append(entry)
            if verbose:
                print(
                    f"  {landscape.name.lower():8s} {rows}x{cols}: score {result.score:4d}, "
                    f"{result.nodes} nodes, {result.elapsed:.2f}s"
                )
    return entries


def summarize(entries: list[SurveyEntry]) -> dict[LandscapeKind, dict[str, dict]]:
    """Percentile statistics per landscape kind."""
    summary = {}
    for landscape in LandscapeKind:
        runs = [e for e in entries if e.landscape is landscape]
        if not runs:
            continue
        summary[landscape] = {
            "score_per_tile": percentile_stats([e.score_per_tile for e in runs]),
            "nodes": percentile_stats([e.nodes for e in runs]),
            "prune_ratio": percentile_stats([e.prune_ratio for e in runs]),
        }
    return summary


def format_summary(summary: dict[LandscapeKind, dict[str, dict]]) -> list[str]:
    lines = []
    for landscape, metrics in summary.items():
        lines.append(f"{landscape.name.title()}:")
        for name, stats in metrics.items():
            lines.append(
                f"  {name:15s} min {stats['min']:.2f}  median {stats['50th']:.2f}  "
                f"max {stats['max']:.2f}  (n={stats['count']})"
            )
    return lines
