#!/usr/bin/env python3
"""
Loop Hero Optimizer - Size Survey

Optimizes every grid size up to a limit for each landscape kind and prints
percentile statistics of the results.

Usage: python tools/analyze.py [--max-rows 3] [--max-cols 3] [--landscape meadow]
"""

import argparse
import sys

from loophero.analysis import format_summary, grid_sizes, summarize, survey
from loophero.core.landscape import InvalidConfigurationError, LandscapeKind


def main():
    parser = argparse.ArgumentParser(
        description="Survey optimizer results over a range of grid sizes"
    )
    parser.add_argument("--max-rows", type=int, default=3, help="Largest row count (default: 3)")
    parser.add_argument("--max-cols", type=int, default=3, help="Largest column count (default: 3)")
    parser.add_argument(
        "--landscape",
        action="append",
        help="Landscape kind to survey (repeatable, default: all)",
    )
    args = parser.parse_args()

    try:
        if args.landscape:
            landscapes = [LandscapeKind.parse(v) for v in args.landscape]
        else:
            landscapes = list(LandscapeKind)
    except InvalidConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.max_rows < 1 or args.max_cols < 1:
        print("Error: --max-rows and --max-cols must be positive")
        sys.exit(1)

    sizes = grid_sizes(args.max_rows, args.max_cols)
    print(f"Surveying {len(sizes)} sizes for {len(landscapes)} landscape kind(s)\n")

    entries = survey(sizes, landscapes, verbose=True)

    print()
    for line in format_summary(summarize(entries)):
        print(line)


if __name__ == "__main__":
    main()
