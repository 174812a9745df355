"""Tests for occupancy lookups and free-tile checks."""
import pytest
from taipei.core.occupancy import OccupancyResolver


class TestLocate:
    """Tests for OccupancyResolver.locate."""

    def test_exact_match(self, make_tile):
        """Exact lookup only finds the tile at its origin."""
        tile = make_tile(0, 4, 2)
        resolver = OccupancyResolver([tile])

        assert resolver.locate(4, 2, 0) is tile
        assert resolver.locate(5, 2, 0) is None
        assert resolver.locate(4, 2, 1) is None

    def test_exact_position_scans_down_layers(self, make_tile):
        """Without an exact layer the scan starts at z and moves down."""
        bottom = make_tile(0, 0, 0, z=0)
        top = make_tile(1, 0, 0, z=1)
        resolver = OccupancyResolver([bottom, top])

        assert resolver.locate(0, 0, 1, exact_position=True, exact_layer=False) is top
        assert resolver.locate(0, 0, 0, exact_position=True, exact_layer=False) is bottom
        assert resolver.locate(0, 0, 4, exact_position=True, exact_layer=False) is top

    def test_footprint_lookup(self, make_tile):
        """A non-exact lookup finds any tile whose 2x2 footprint covers the cell."""
        tile = make_tile(0, 2, 2)
        resolver = OccupancyResolver([tile])

        for x, y in [(2, 2), (3, 2), (2, 3), (3, 3)]:
            assert resolver.locate(x, y, 0, exact_position=False, exact_layer=True) is tile

        assert resolver.locate(4, 2, 0, exact_position=False, exact_layer=True) is None
        assert resolver.locate(1, 2, 0, exact_position=False, exact_layer=True) is None

    def test_footprint_lookup_other_layers(self, make_tile):
        """Footprint lookup scans down to layer 0 whatever exact_layer says."""
        tile = make_tile(0, 0, 0, z=0)
        resolver = OccupancyResolver([tile])

        assert resolver.locate(1, 1, 2, exact_position=False, exact_layer=True) is tile
        assert resolver.locate(1, 1, 2, exact_position=False, exact_layer=False) is tile

    def test_locate_ignores_visibility(self, make_tile):
        """Removed tiles are still found by lookups."""
        tile = make_tile(0, 0, 0)
        tile.visible = False
        resolver = OccupancyResolver([tile])

        assert resolver.locate(0, 0, 0) is tile


class TestIsFree:
    """Tests for OccupancyResolver.is_free."""

    def test_single_tile_is_free(self, make_tile):
        """A lone tile is free."""
        tile = make_tile(0, 0, 0)
        assert OccupancyResolver([tile]).is_free(tile)

    def test_boxed_in_row(self, make_tile):
        """The middle of three adjacent tiles is blocked, the ends are free."""
        left = make_tile(0, 0, 0)
        middle = make_tile(1, 2, 0)
        right = make_tile(2, 4, 0)
        resolver = OccupancyResolver([left, middle, right])

        assert resolver.is_free(left)
        assert not resolver.is_free(middle)
        assert resolver.is_free(right)

    def test_half_offset_neighbours_block(self, make_tile):
        """Neighbours shifted down by one row still count as side blockers."""
        middle = make_tile(0, 2, 0)
        left = make_tile(1, 0, 1)
        right = make_tile(2, 4, 1)
        resolver = OccupancyResolver([middle, left, right])

        assert not resolver.is_free(middle)

    def test_one_side_blocked_is_free(self, make_tile):
        """Blocking on one side only leaves the tile free."""
        tile = make_tile(0, 2, 0)
        right = make_tile(1, 4, 0)
        resolver = OccupancyResolver([tile, right])

        assert resolver.is_free(tile)

    def test_removed_neighbour_frees_tile(self, make_tile):
        """Invisible neighbours do not block."""
        left = make_tile(0, 0, 0)
        middle = make_tile(1, 2, 0)
        right = make_tile(2, 4, 0)
        resolver = OccupancyResolver([left, middle, right])

        left.visible = False
        assert resolver.is_free(middle)

    @pytest.mark.parametrize("dx,dy", [(0, 0), (1, 0), (0, 1), (1, 1), (-1, -1), (-1, 1)])
    def test_covered_from_above(self, make_tile, dx, dy):
        """Any visible tile on the next layer overlapping the footprint covers it."""
        bottom = make_tile(0, 2, 2, z=0)
        top = make_tile(1, 2 + dx, 2 + dy, z=1)
        resolver = OccupancyResolver([bottom, top])

        assert not resolver.is_free(bottom)
        assert resolver.is_free(top)

    def test_not_covered_by_non_overlapping_tile(self, make_tile):
        """A tile on the next layer that does not overlap leaves it free."""
        bottom = make_tile(0, 0, 0, z=0)
        top = make_tile(1, 2, 0, z=1)
        resolver = OccupancyResolver([bottom, top])

        assert resolver.is_free(bottom)

    def test_removed_cover_frees_tile(self, make_tile):
        """An invisible tile above does not cover."""
        bottom = make_tile(0, 0, 0, z=0)
        top = make_tile(1, 0, 0, z=1)
        resolver = OccupancyResolver([bottom, top])

        top.visible = False
        assert resolver.is_free(bottom)

    def test_boxed_in_regardless_of_stacking(self, make_tile):
        """Both sides blocked means not free even with nothing above."""
        left = make_tile(0, 0, 0)
        middle = make_tile(1, 2, 0)
        right = make_tile(2, 4, 0)
        resolver = OccupancyResolver([left, middle, right])

        assert resolver.locate(2, 0, 1) is None
        assert not resolver.is_free(middle)

    def test_lower_layer_neighbours_do_not_block(self, make_tile):
        """Side neighbours only count on the tile's own layer."""
        left = make_tile(0, 0, 0, z=0)
        right = make_tile(1, 4, 0, z=0)
        middle = make_tile(2, 2, 0, z=1)
        resolver = OccupancyResolver([left, right, middle])

        assert resolver.is_free(middle)
