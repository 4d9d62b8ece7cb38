"""
Drawing the water grid onto a matplotlib Axes.

Each wet cell becomes one filled rectangle:
- width is the tile size, height is tile_size * volume (truncated)
- anchored to the bottom of its tile, like water resting on a floor
- anchored to the TOP of its tile when the cell above is also wet,
  so vertically stacked water reads as one continuous column

Geometry (`compute_tiles`) is kept separate from drawing (`draw_grid`)
so it can be checked without a display.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Rectangle

if TYPE_CHECKING:
    from dripsim.core.grid import Grid


WATER_COLOR = "blue"
BACKGROUND_COLOR = "black"

# Marks patches created here so a redraw only removes water
_WATER_GID = "dripsim-water"


@dataclass(frozen=True)
class WaterTile:
    """A water rectangle in surface pixels (y grows downwards)."""

    x: int
    y: int
    width: int
    height: int


def tile_offset(tile_size: int, height: int, has_water_above: bool) -> int:
    """Vertical offset of the water inside its tile."""
    if has_water_above:
        return 0
    return tile_size - height


def compute_tiles(grid: "Grid") -> list[WaterTile]:
    """
    Rectangles for every cell with volume > 0, in row order.

    Reads the grid only.
    """
    tile_size = grid.tile_size
    volumes = grid.volumes
    tiles = []

    for y in range(grid.height):
        for x in range(grid.width):
            volume = volumes[y, x]
            if volume <= 0:
                continue
            has_water_above = y > 0 and volumes[y - 1, x] > 0
            height = int(tile_size * volume)
            offset = tile_offset(tile_size, height, has_water_above)
            tiles.append(WaterTile(
                x=x * tile_size,
                y=y * tile_size + offset,
                width=tile_size,
                height=height,
            ))

    return tiles


def prepare_axes(
    ax: Axes,
    width_px: int,
    height_px: int,
    background: str = BACKGROUND_COLOR,
) -> Axes:
    """Set up an Axes as a pixel surface with y=0 at the top."""
    ax.set_xlim(0, width_px)
    ax.set_ylim(height_px, 0)
    ax.set_aspect("equal")
    ax.set_facecolor(background)
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)
    return ax


def draw_grid(
    grid: "Grid",
    ax: Axes,
    color: str = WATER_COLOR,
) -> list[Rectangle]:
    """
    Add one filled rectangle per water tile to the axes.

    Args:
        grid: Grid to draw
        ax: Axes prepared with `prepare_axes`
        color: Water color

    Returns:
        The patches that were added
    """
    patches = []
    for tile in compute_tiles(grid):
        patch = Rectangle(
            (tile.x, tile.y),
            tile.width,
            tile.height,
            facecolor=color,
            edgecolor="none",
            linewidth=0,
        )
        patch.set_gid(_WATER_GID)
        ax.add_patch(patch)
        patches.append(patch)
    return patches


def clear_water(ax: Axes) -> int:
    """Remove previously drawn water patches. Returns how many."""
    old = [p for p in ax.patches if p.get_gid() == _WATER_GID]
    for patch in old:
        patch.remove()
    return len(old)


def render_frame(
    grid: "Grid",
    ax: Axes,
    color: str = WATER_COLOR,
) -> list[Rectangle]:
    """Replace the water on the axes with the current grid."""
    clear_water(ax)
    return draw_grid(grid, ax, color=color)


def save_snapshot(
    grid: "Grid",
    path: str | Path,
    background: str = BACKGROUND_COLOR,
    color: str = WATER_COLOR,
    dpi: int = 100,
):
    """Render a grid into a PNG file the size of its surface."""
    width_px = grid.width * grid.tile_size
    height_px = grid.height * grid.tile_size
    fig = plt.figure(figsize=(width_px / dpi, height_px / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    prepare_axes(ax, width_px, height_px, background)
    draw_grid(grid, ax, color=color)
    fig.savefig(path, dpi=dpi, facecolor=background)
    plt.close(fig)
