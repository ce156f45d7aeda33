"""
Loop Hero Optimizer - Command Line

Usage:
    loophero-optimize ROWS COLS LANDSCAPE [--png out.png]
    loophero-optimize                       # prompts for the grid

LANDSCAPE is a name (meadow, thicket, mountain, suburb) or its code 0-3.
"""

import argparse
import sys
from typing import Callable, Optional

from .core.grid import validate_dimensions
from .core.landscape import InvalidConfigurationError, LandscapeKind
from .core.search import SearchResult, optimize
from .rendering.text_renderer import render_text


def landscape_argument(value: str) -> LandscapeKind:
    """argparse type for landscape names and codes."""
    try:
        return LandscapeKind.parse(value)
    except InvalidConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loophero-optimize",
        description="Find the best river and landscape layout for a Loop Hero tile grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Optimize a 3x3 grid of meadows:
    loophero-optimize 3 3 meadow

  Same, using the landscape code and rendering the result to an image:
    loophero-optimize 3 3 0 --png meadow_3x3.png

  Answer the questions interactively:
    loophero-optimize
        """,
    )
    parser.add_argument("rows", nargs="?", type=int, help="Number of grid rows")
    parser.add_argument("cols", nargs="?", type=int, help="Number of grid columns")
    parser.add_argument(
        "landscape",
        nargs="?",
        type=landscape_argument,
        help="meadow, thicket, mountain or suburb (or 0-3)",
    )
    parser.add_argument("--png", dest="png_path", help="Render the result grid to PNG")
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Skip the zig-zag heuristic grid used to seed pruning",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search progress",
    )
    return parser


def prompt_configuration(
    ask: Optional[Callable[[str], str]] = None,
) -> tuple[int, int, LandscapeKind]:
    """
    Ask for the grid on stdin.

    Args:
        ask: Replacement for input(), mainly for tests

    Raises:
        InvalidConfigurationError: If an answer is not usable
    """
    if ask is None:
        ask = input
    print(" Enter information about the grid to optimize...\n")
    try:
        rows = int(ask(" How many rows?\n  "))
        cols = int(ask(" How many columns?\n  "))
    except ValueError:
        raise InvalidConfigurationError("Rows and columns must be whole numbers") from None
    landscape = LandscapeKind.parse(
        ask(
            " What type of landscape tile?\n"
            " (0 = meadow, 1 = thicket, 2 = mountain, 3 = suburb):\n  "
        )
    )
    return rows, cols, landscape


def print_result(result: SearchResult):
    """Print the grid table and its value."""
    print()
    print(render_text(result.grid, result.landscape))
    print()
    print(f" Value of grid: {result.score}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the optimizer."""
    parser = build_parser()
    args = parser.parse_args(argv)

    given = [args.rows, args.cols, args.landscape]
    try:
        if all(v is None for v in given):
            rows, cols, landscape = prompt_configuration()
        elif any(v is None for v in given):
            print("Error: ROWS, COLS and LANDSCAPE must be given together")
            print("")
            parser.print_usage()
            return 1
        else:
            rows, cols, landscape = args.rows, args.cols, args.landscape
        validate_dimensions(rows, cols)
    except InvalidConfigurationError as e:
        print(f"Error: {e}")
        return 1

    print(f"\n Optimizing {rows}x{cols} {landscape.name.lower()} grid...")
    result = optimize(rows, cols, landscape, debug=args.debug, use_seed=not args.no_seed)
    print_result(result)

    if args.debug:
        print(f" Searched {result.nodes} nodes in {result.elapsed:.2f}s")

    if args.png_path:
        from .rendering.pil_renderer import save_grid_png

        img = save_grid_png(result.grid, landscape, args.png_path)
        print(f"Saved: {args.png_path} ({img.width}x{img.height})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
