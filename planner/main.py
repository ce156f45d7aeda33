"""
Loop Hero Optimizer - Planner Main

Command-line entry point for the planner application.

Usage:
    loophero-planner [ROWS COLS LANDSCAPE] [--debug]

Starts on an empty 3x3 meadow grid when no board is given.
"""

import sys

from loophero.core.grid import validate_dimensions
from loophero.core.landscape import InvalidConfigurationError, LandscapeKind

from .core.constants import DEFAULT_COLS, DEFAULT_LANDSCAPE, DEFAULT_ROWS


def parse_arguments(argv=None):
    """
    Parse command-line arguments with defaults.

    Returns:
        tuple[int, int, LandscapeKind, bool]: (rows, cols, landscape, debug)

    Usage patterns:
        loophero-planner                      # empty 3x3 meadow grid
        loophero-planner 4 4 mountain         # empty grid of that shape
    """
    args = list(sys.argv[1:] if argv is None else argv)

    debug = "--debug" in args
    args = [a for a in args if a != "--debug"]

    if len(args) == 0:
        return DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_LANDSCAPE, debug

    if len(args) != 3:
        print(f"Error: Expected 0 or 3 arguments ({len(args)} provided)")
        print("")
        show_usage()
        sys.exit(1)

    try:
        rows, cols = int(args[0]), int(args[1])
    except ValueError:
        print("Error: ROWS and COLS must be whole numbers")
        print("")
        show_usage()
        sys.exit(1)

    try:
        landscape = LandscapeKind.parse(args[2])
        validate_dimensions(rows, cols)
    except InvalidConfigurationError as e:
        print(f"Error: {e}")
        print("")
        show_usage()
        sys.exit(1)

    return rows, cols, landscape, debug


def show_usage():
    """Display usage information."""
    print("Usage: loophero-planner [ROWS COLS LANDSCAPE] [--debug]")
    print("")
    print("Arguments:")
    print("  ROWS COLS      Board size (default: 3 3)")
    print("  LANDSCAPE      meadow, thicket, mountain or suburb, or 0-3 (default: meadow)")
    print("  --debug        Print search progress when optimizing")
    print("")
    print("Examples:")
    print("  loophero-planner")
    print("  loophero-planner 4 4 mountain")


def main():
    """Main entry point for the planner."""
    rows, cols, landscape, debug = parse_arguments()

    # Import here so argument errors never initialize pygame
    from .application import PlannerApplication

    app = PlannerApplication(rows, cols, landscape, debug=debug)
    app.run()


if __name__ == "__main__":
    main()
