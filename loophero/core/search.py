"""
Loop Hero Optimizer - Branch and Bound Search

Depth-first search over every way of filling the remaining cells of a grid,
one river or landscape tile at a time. A branch is abandoned when even the
best possible value for every empty cell could not beat the best full grid
found so far.

The working grid is mutated in place and restored with remove_terrain after
each candidate; grids are only copied when one has to be kept as a result.
"""

import time
from dataclasses import dataclass, field

from .grid import Grid, validate_dimensions
from .heuristic import heuristic_grid
from .landscape import LandscapeKind
from .scoring import score_grid


@dataclass
class SearchState:
    """
    Best-so-far record shared by every level of one search run.

    best_value only ever increases; history lists each value it took.
    """

    best_value: int = -1
    best_grid: Grid | None = None
    history: list[int] = field(default_factory=list)
    nodes: int = 0
    pruned: int = 0
    revisits: int = 0
    explored: set = field(default_factory=set)

    def improve(self, value: int, grid: Grid) -> bool:
        """
        Record a copy of a full grid if it beats the incumbent.

        Returns:
            True if the grid became the new incumbent
        """
        if value <= self.best_value:
            return False
        self.best_value = value
        self.best_grid = grid.copy()
        self.history.append(value)
        return True


@dataclass
class SearchResult:
    """Outcome of an optimization run."""

    grid: Grid
    score: int
    landscape: LandscapeKind
    nodes: int = 0
    pruned: int = 0
    elapsed: float = 0.0


class BranchAndBound:
    """
    Exhaustive search with an upper-bound cut.

    The bound assumes every empty cell reaches landscape.max_tile_value.
    Positions (fill pattern plus river head) already searched are skipped
    when reached again through a different placement order: the best value
    has only grown since, so the repeat could not find anything better.
    With skip_revisits the state keeps one key per distinct position until
    optimize() finishes; that set grows roughly with 3 ** capacity and
    dominates memory beyond 4x4.
    """

    def __init__(
        self,
        landscape: LandscapeKind,
        state: SearchState | None = None,
        debug: bool = False,
        skip_revisits: bool = True,
    ):
        self.landscape = landscape
        self.state = state if state is not None else SearchState()
        self.debug = debug
        self.skip_revisits = skip_revisits

    def upper_bound(self, grid: Grid) -> int:
        """Highest value the grid could still reach."""
        current = score_grid(grid, self.landscape)
        return current + self.landscape.max_tile_value * grid.empty_count

    def search(self, grid: Grid) -> Grid:
        """
        Fill the rest of a grid as well as possible.

        The grid is used as the working grid and is back in its original
        state when this returns.

        Args:
            grid: Partially (or fully) filled grid

        Returns:
            Best full grid found below this position, or ``grid`` itself if
            it is full, was pruned, or nothing beat the incumbent. Any other
            grid returned is a copy owned by the caller.
        """
        state = self.state
        state.nodes += 1

        if grid.is_full:
            return grid

        if self.upper_bound(grid) <= state.best_value:
            state.pruned += 1
            return grid

        if self.skip_revisits:
            key = grid.position_key()
            if key in state.explored:
                state.revisits += 1
                return grid
            state.explored.add(key)

        best_grid = grid
        best_value = state.best_value
        placements = (grid.place_river, grid.place_landscape)

        for index in range(grid.capacity):
            for place in placements:
                if not place(index):
                    continue

                candidate = self.search(grid)
                if candidate.is_full:
                    value = score_grid(candidate, self.landscape)
                    if value > best_value:
                        best_value = value
                        # Copied here since the working grid is unwound below
                        best_grid = candidate.copy()
                        if state.improve(value, best_grid) and self.debug:
                            print(
                                f"  new best {value} after {state.nodes} nodes "
                                f"({state.pruned} pruned)"
                            )

                grid.remove_terrain(index)

        return best_grid


def optimize(
    rows: int,
    cols: int,
    landscape: LandscapeKind,
    debug: bool = False,
    use_seed: bool = True,
    state: SearchState | None = None,
) -> SearchResult:
    """
    Find the highest-value full grid for a landscape kind.

    Args:
        rows: Grid height
        cols: Grid width
        landscape: Landscape kind to optimize for
        debug: If True, print each improvement and a final summary
        use_seed: If True, start from the zig-zag heuristic grid's value
        state: Optional pre-populated search state (e.g. a known bound)

    Returns:
        SearchResult with the best grid and its score

    Raises:
        InvalidConfigurationError: If the dimensions are unusable
    """
    validate_dimensions(rows, cols)
    if state is None:
        state = SearchState()

    start = time.perf_counter()

    if use_seed:
        seed = heuristic_grid(rows, cols, landscape)
        seed_value = score_grid(seed, landscape)
        state.improve(seed_value, seed)
        if debug:
            print(f"  heuristic seed value {seed_value}")

    searcher = BranchAndBound(landscape, state, debug=debug)
    searcher.search(Grid.for_landscape(rows, cols, landscape))
    state.explored.clear()

    elapsed = time.perf_counter() - start
    if debug:
        print(
            f"  searched {state.nodes} nodes, pruned {state.pruned}, "
            f"skipped {state.revisits} repeats in {elapsed:.2f}s"
        )

    best = state.best_grid
    assert best is not None, "search finished without a full grid"
    return SearchResult(
        grid=best,
        score=state.best_value,
        landscape=landscape,
        nodes=state.nodes,
        pruned=state.pruned,
        elapsed=elapsed,
    )
