"""Unit tests for tile geometry and matplotlib drawing."""

import matplotlib.pyplot as plt
import pytest

from dripsim.core.grid import Grid
from dripsim.core.injector import inject
from dripsim.core.kernel import step
from dripsim.viz.render import (
    WaterTile,
    clear_water,
    compute_tiles,
    draw_grid,
    prepare_axes,
    render_frame,
    save_snapshot,
    tile_offset,
)


@pytest.fixture
def axes():
    fig, ax = plt.subplots()
    prepare_axes(ax, 30, 30)
    yield ax
    plt.close(fig)


class TestTileOffset:
    """Tests for tile anchoring."""

    def test_bottom_anchored(self):
        assert tile_offset(10, 5, has_water_above=False) == 5

    def test_top_anchored_under_water(self):
        assert tile_offset(10, 5, has_water_above=True) == 0

    def test_full_tile(self):
        assert tile_offset(10, 10, has_water_above=False) == 0


class TestComputeTiles:
    """Tests for compute_tiles."""

    def test_empty_grid_draws_nothing(self):
        assert compute_tiles(Grid.create(4, 4, tile_size=10)) == []

    def test_single_half_cell(self):
        grid = Grid.create(3, 3, tile_size=10)
        grid.set_volume(1, 2, 0.5)
        assert compute_tiles(grid) == [WaterTile(x=10, y=25, width=10, height=5)]

    def test_height_truncates(self):
        grid = Grid.create(1, 1, tile_size=10)
        grid.set_volume(0, 0, 0.37)
        (tile,) = compute_tiles(grid)
        assert tile.height == 3
        assert tile.y == 7

    def test_stacked_water_is_top_anchored(self):
        grid = Grid.from_volumes([[1.0], [0.5]], tile_size=10)
        top, lower = compute_tiles(grid)
        assert top == WaterTile(x=0, y=0, width=10, height=10)
        # Cell above is wet, so the lower cell hangs from its tile top
        assert lower == WaterTile(x=0, y=10, width=10, height=5)

    def test_dry_gap_resets_anchor(self):
        grid = Grid.from_volumes([[0.5], [0.0], [0.5]], tile_size=10)
        first, second = compute_tiles(grid)
        assert first.y == 5
        assert second.y == 25

    def test_negative_volume_draws_nothing(self):
        grid = Grid.from_volumes([[-0.3]], tile_size=10)
        assert compute_tiles(grid) == []

    def test_continuity_after_step(self):
        # After a step the droplet spans rows 0 and 1; the lower half
        # joins the upper half into one continuous column
        grid = Grid.create(3, 3, tile_size=10)
        inject(1, 0, grid)
        grid = step(grid)

        upper, lower = compute_tiles(grid)
        assert upper == WaterTile(x=10, y=5, width=10, height=5)
        assert lower == WaterTile(x=10, y=10, width=10, height=5)
        assert upper.y + upper.height == lower.y

    def test_does_not_modify_grid(self):
        grid = Grid.from_volumes([[1.0, 0.5], [0.5, 0.0]], tile_size=4)
        before = grid.copy()
        compute_tiles(grid)
        assert grid == before


class TestDrawing:
    """Tests for drawing onto an Axes."""

    def test_prepare_axes_flips_y(self, axes):
        assert axes.get_ylim() == (30, 0)
        assert axes.get_xlim() == (0, 30)

    def test_draw_grid_adds_patches(self, axes):
        grid = Grid.from_volumes([[1.0, 0.0, 0.5]], tile_size=10)
        patches = draw_grid(grid, axes, color="blue")
        assert len(patches) == 2
        assert len(axes.patches) == 2
        assert patches[1].get_xy() == (20, 5)
        assert patches[1].get_height() == 5
        assert patches[1].get_width() == 10

    def test_render_frame_replaces_water(self, axes):
        grid = Grid.from_volumes([[1.0, 1.0, 1.0]], tile_size=10)
        render_frame(grid, axes)
        assert len(axes.patches) == 3

        grid = Grid.from_volumes([[0.0, 1.0, 0.0]], tile_size=10)
        render_frame(grid, axes)
        assert len(axes.patches) == 1

    def test_clear_water_keeps_other_patches(self, axes):
        other = plt.Rectangle((0, 0), 1, 1)
        axes.add_patch(other)
        draw_grid(Grid.from_volumes([[1.0]], tile_size=10), axes)

        assert clear_water(axes) == 1
        assert list(axes.patches) == [other]

    def test_save_snapshot(self, tmp_path):
        grid = Grid.from_volumes([[1.0, 0.0], [0.5, 0.5]], tile_size=10)
        path = tmp_path / "snapshot.png"
        save_snapshot(grid, path)
        assert path.exists()
        assert path.stat().st_size > 0
