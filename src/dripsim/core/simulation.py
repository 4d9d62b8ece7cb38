"""
WaterSimulation: owns the live grid and drives one frame at a time.

A host loop calls `advance` at a fixed rate. Each frame runs, in order:
    inject (every period-th frame) → draw → step

Drawing happens BEFORE the step, so a frame shows the state the step is
about to consume. Swapping the two would add a frame of visible latency.

The grid is owned exclusively by this object. Renderers get the grid for
the duration of a draw call and must not modify it.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from dripsim.core.grid import Grid, GridConfig
from dripsim.core.injector import InjectorConfig, SourceInjector
from dripsim.core.kernel import GravityKernel, KernelConfig

logger = logging.getLogger(__name__)

Renderer = Callable[[Grid], None]


@dataclass
class SimulationConfig:
    """Everything needed to build a simulation run."""

    grid: GridConfig = field(default_factory=GridConfig)
    kernel: KernelConfig = field(default_factory=KernelConfig)
    injector: InjectorConfig = field(default_factory=InjectorConfig)
    seed_on_start: bool = True  # Drop one droplet at the source before frame 1


@dataclass
class WaterSimulation:
    """
    The simulation object a host loop talks to.

    Usage:
        sim = WaterSimulation()
        for _ in range(100):
            sim.advance(renderer)
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)

    # Simulation state
    frame_count: int = field(default=0, init=False)
    kernel: GravityKernel = field(default=None, init=False)
    injector: SourceInjector = field(default=None, init=False)
    _grid: Grid = field(default=None, init=False, repr=False)

    def __post_init__(self):
        """Build the kernel, the injector and the empty grid."""
        self.kernel = GravityKernel(self.config.kernel)
        self.injector = SourceInjector(
            self.config.injector, tile_size=self.config.grid.tile_size
        )
        self.reset()

    @property
    def grid(self) -> Grid:
        """The live grid (read-only for callers)."""
        return self._grid

    def reset(self):
        """Discard all water and restart the frame counter."""
        self._grid = Grid.from_config(self.config.grid)
        self.frame_count = 0
        if self.config.seed_on_start:
            self.injector.seed(self._grid)
        logger.info(
            "Simulation reset: source cell %s, injecting every %d frames",
            self.injector.source, self.config.injector.period,
        )

    def inject_sources(self) -> int:
        """Write the source stream into the live grid."""
        return self.injector.inject_all(self._grid)

    def update(self):
        """Replace the live grid with the next step."""
        self._grid = self.kernel.step(self._grid)

    def draw(self, renderer: Renderer):
        """Hand the live grid to a renderer."""
        renderer(self._grid)

    def advance(self, renderer: Optional[Renderer] = None):
        """Run one host-loop frame: inject on cadence, draw, step."""
        self.frame_count += 1

        if self.injector.should_inject(self.frame_count):
            self.inject_sources()

        if renderer is not None:
            self.draw(renderer)

        self.update()
        logger.debug(
            "Frame %d: total volume %.2f", self.frame_count, self._grid.total_volume()
        )

    def run(self, n_frames: int, renderer: Optional[Renderer] = None) -> dict:
        """
        Run n frames.

        Args:
            n_frames: Number of frames to run
            renderer: Optional callable given the grid each frame

        Returns:
            Statistics dictionary
        """
        for _ in range(n_frames):
            self.advance(renderer)

        return self.statistics(n_frames)

    def statistics(self, n_frames: int = 0) -> dict:
        return {
            "n_frames": n_frames,
            "frame_count": self.frame_count,
            "total_volume": self._grid.total_volume(),
            "wet_cells": self._grid.wet_cells(),
            "max_volume": self._grid.max_volume(),
        }
