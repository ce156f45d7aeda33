"""
Loop Hero Optimizer - Landscape Kinds

The four landscape profiles a grid can be optimized for, with the constants
each one contributes to scoring and pruning.

Assumes the higher-valued variant of each card (blooming meadows, thickets,
mountains), since anyone optimizing a layout will also select for those.
"""

from enum import IntEnum


class InvalidConfigurationError(ValueError):
    """Raised when a grid size or landscape choice cannot be optimized."""


class LandscapeKind(IntEnum):
    """Landscape profile fixed for a whole optimization run.

    Values are the codes accepted at the interactive prompt.
    """

    MEADOW = 0
    THICKET = 1
    MOUNTAIN = 2
    SUBURB = 3

    @property
    def tile_value(self) -> int:
        """Value of a single landscape tile."""
        return TILE_VALUES[self]

    @property
    def max_tile_value(self) -> int:
        """Per-tile ceiling used by the search's pruning bound."""
        return MAX_VALUE_MULTIPLIERS[self] * TILE_VALUES[self]

    @property
    def label(self) -> str:
        """Single letter used when drawing the grid."""
        return LABELS[self]

    @property
    def counts_diagonals(self) -> bool:
        """Whether adjacency for this kind includes the four diagonals."""
        return self is LandscapeKind.MOUNTAIN

    @classmethod
    def parse(cls, text: str) -> "LandscapeKind":
        """
        Parse a landscape kind from a name or numeric code.

        Args:
            text: "meadow", "Thicket", "2", ...

        Returns:
            Matching LandscapeKind

        Raises:
            InvalidConfigurationError: If text names no landscape kind
        """
        value = str(text).strip()
        if value.isdigit():
            code = int(value)
            try:
                return cls(code)
            except ValueError:
                raise InvalidConfigurationError(
                    f"Unknown landscape code {code} (expected 0-{len(cls) - 1})"
                ) from None
        try:
            return cls[value.upper()]
        except KeyError:
            names = ", ".join(kind.name.lower() for kind in cls)
            raise InvalidConfigurationError(
                f"Unknown landscape '{text}' (expected one of: {names})"
            ) from None


TILE_VALUES = {
    LandscapeKind.MEADOW: 3,
    LandscapeKind.THICKET: 2,
    LandscapeKind.MOUNTAIN: 6,
    LandscapeKind.SUBURB: 1,
}

MAX_VALUE_MULTIPLIERS = {
    LandscapeKind.MEADOW: 3,
    LandscapeKind.THICKET: 3,
    LandscapeKind.MOUNTAIN: 4,
    LandscapeKind.SUBURB: 3,
}

# Meadows and mountains share a letter
LABELS = {
    LandscapeKind.MEADOW: "M",
    LandscapeKind.THICKET: "T",
    LandscapeKind.MOUNTAIN: "M",
    LandscapeKind.SUBURB: "S",
}
