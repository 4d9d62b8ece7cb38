"""
Interactive host loop: a matplotlib window that drives the simulation.

The window is a thin collaborator. It owns the figure and the frame
timer; the simulation owns the grid. FuncAnimation calls one frame per
timer tick, and each frame is `simulation.advance(renderer)`.

Keys: q or escape closes the window. Closing discards all state.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import matplotlib.pyplot as plt
from matplotlib import animation

from dripsim.viz.render import (
    BACKGROUND_COLOR,
    WATER_COLOR,
    prepare_axes,
    render_frame,
)

if TYPE_CHECKING:
    from dripsim.core.simulation import WaterSimulation

logger = logging.getLogger(__name__)

CLOSE_KEYS = ("q", "escape")


@dataclass
class WindowConfig:
    """Configuration for the interactive window."""

    title: str = "Water simulation"
    fps: int = 20  # Target frames per second
    background: str = BACKGROUND_COLOR
    water_color: str = WATER_COLOR
    dpi: int = 100

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @property
    def interval_ms(self) -> float:
        """Delay between frames in milliseconds."""
        return 1000.0 / self.fps


def create_window(simulation: "WaterSimulation", window: WindowConfig):
    """Create a figure the size of the simulation surface."""
    grid_config = simulation.config.grid
    width_px = grid_config.surface_width
    height_px = grid_config.surface_height

    fig = plt.figure(
        figsize=(width_px / window.dpi, height_px / window.dpi),
        dpi=window.dpi,
        facecolor=window.background,
    )
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title(window.title)
    ax = fig.add_axes([0, 0, 1, 1])
    prepare_axes(ax, width_px, height_px, window.background)
    return fig, ax


def build_animation(
    simulation: "WaterSimulation",
    window: Optional[WindowConfig] = None,
    max_frames: Optional[int] = None,
):
    """
    Wire a simulation to a figure and a frame timer.

    Args:
        simulation: Simulation to drive
        window: Window settings (defaults if None)
        max_frames: Stop after this many frames (run until closed if None)

    Returns:
        (fig, ax, anim) tuple
    """
    window = window or WindowConfig()
    fig, ax = create_window(simulation, window)

    def renderer(grid):
        render_frame(grid, ax, color=window.water_color)

    def init():
        # Drawn on the first canvas draw and on resizes; must not advance
        renderer(simulation.grid)
        return ax.patches

    def frame(_index):
        simulation.advance(renderer)
        return ax.patches

    def on_key(event):
        if event.key in CLOSE_KEYS:
            logger.info("Close key %r pressed", event.key)
            plt.close(fig)

    def on_close(_event):
        anim.event_source.stop()
        logger.info("Window closed after %d frames", simulation.frame_count)

    fig.canvas.mpl_connect("key_press_event", on_key)
    fig.canvas.mpl_connect("close_event", on_close)

    anim = animation.FuncAnimation(
        fig,
        frame,
        frames=max_frames,
        init_func=init,
        interval=window.interval_ms,
        repeat=False,
        cache_frame_data=False,
    )
    return fig, ax, anim


def run_window(
    simulation: "WaterSimulation",
    window: Optional[WindowConfig] = None,
    max_frames: Optional[int] = None,
) -> int:
    """Open the window and block until it is closed. Returns frames run."""
    window = window or WindowConfig()
    logger.info("Opening %r at %d fps", window.title, window.fps)
    # anim must stay referenced while the window is open
    _fig, _ax, anim = build_animation(simulation, window, max_frames)
    plt.show()
    return simulation.frame_count
