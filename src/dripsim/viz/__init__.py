"""
Visualization.

- Tile geometry for the water grid
- Drawing onto a matplotlib Axes
- Interactive window that drives the simulation
"""

from dripsim.viz.render import (
    WaterTile,
    tile_offset,
    compute_tiles,
    prepare_axes,
    draw_grid,
    clear_water,
    render_frame,
    save_snapshot,
)

from dripsim.viz.window import (
    WindowConfig,
    create_window,
    build_animation,
    run_window,
)

__all__ = [
    "WaterTile",
    "tile_offset",
    "compute_tiles",
    "prepare_axes",
    "draw_grid",
    "clear_water",
    "render_frame",
    "save_snapshot",
    "WindowConfig",
    "create_window",
    "build_animation",
    "run_window",
]
