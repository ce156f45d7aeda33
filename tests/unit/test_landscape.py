"""Unit tests for landscape kinds and their constants."""

import pytest

from loophero.core.landscape import InvalidConfigurationError, LandscapeKind


class TestConstants:
    @pytest.mark.parametrize(
        "kind, value, ceiling",
        [
            (LandscapeKind.MEADOW, 3, 9),
            (LandscapeKind.THICKET, 2, 6),
            (LandscapeKind.MOUNTAIN, 6, 24),
            (LandscapeKind.SUBURB, 1, 3),
        ],
    )
    def test_tile_and_max_values(self, kind, value, ceiling):
        assert kind.tile_value == value
        assert kind.max_tile_value == ceiling

    def test_only_mountain_counts_diagonals(self):
        assert LandscapeKind.MOUNTAIN.counts_diagonals
        assert not LandscapeKind.MEADOW.counts_diagonals
        assert not LandscapeKind.THICKET.counts_diagonals
        assert not LandscapeKind.SUBURB.counts_diagonals

    def test_labels(self):
        assert [k.label for k in LandscapeKind] == ["M", "T", "M", "S"]


class TestParse:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("meadow", LandscapeKind.MEADOW),
            ("Thicket", LandscapeKind.THICKET),
            ("  MOUNTAIN ", LandscapeKind.MOUNTAIN),
            ("3", LandscapeKind.SUBURB),
            ("0", LandscapeKind.MEADOW),
        ],
    )
    def test_names_and_codes(self, text, expected):
        assert LandscapeKind.parse(text) is expected

    def test_unknown_code_rejected(self):
        with pytest.raises(InvalidConfigurationError, match="code 4"):
            LandscapeKind.parse("4")

    def test_unknown_name_rejected(self):
        with pytest.raises(InvalidConfigurationError, match="swamp"):
            LandscapeKind.parse("swamp")

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            LandscapeKind.parse("")
