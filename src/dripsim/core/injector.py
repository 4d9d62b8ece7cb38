"""
Injector: seeds new water into the live grid.

This is how the simulation gets continuous inflow:
- A source point (in surface pixels) marks where the stream starts
- Every `period` frames, full droplets are written at the source row
- `spread` widens the stream to neighbouring columns (1 = three columns)

Injection is a SET, not an add: a cell that is already full stays at
exactly 1.0, no matter how often it is injected.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from dripsim.core.errors import OutOfBoundsError
from dripsim.core.grid import Droplet, Grid

logger = logging.getLogger(__name__)


def inject(x: int, y: int, grid: Grid, volume: float = 1.0) -> None:
    """Overwrite the cell at (x, y) with a full droplet."""
    grid.set(x, y, Droplet(volume=volume, size=grid.tile_size))


@dataclass
class InjectorConfig:
    """Configuration for the water source."""

    source_x: int = 100  # Source point, surface pixels
    source_y: int = 100
    period: int = 5  # Inject every N frames
    spread: int = 1  # Extra columns on each side of the source
    volume: float = 1.0  # Volume written per droplet

    def __post_init__(self):
        if self.period < 1:
            raise ValueError(f"period must be at least 1, got {self.period}")
        if self.spread < 0:
            raise ValueError(f"spread must be non-negative, got {self.spread}")
        if not 0.0 < self.volume <= 1.0:
            raise ValueError(f"volume must be in (0, 1], got {self.volume}")


class SourceInjector:
    """
    Writes droplets at the source point on a fixed frame cadence.

    The source point is given in surface pixels and converted to tile
    coordinates by integer division, the same way the grid is sized.
    """

    def __init__(self, config: InjectorConfig | None = None, tile_size: int = 1):
        self.config = config or InjectorConfig()
        self.tile_size = tile_size
        self.x = self.config.source_x // tile_size
        self.y = self.config.source_y // tile_size

    @property
    def source(self) -> tuple[int, int]:
        """Source cell (x, y) in tile coordinates."""
        return self.x, self.y

    def should_inject(self, frame: int) -> bool:
        """True on every period-th frame of a 1-based frame counter."""
        return frame % self.config.period == 0

    def columns(self, grid: Grid) -> list[tuple[int, int]]:
        """
        Cells written by one injection.

        The centre cell must lie inside the grid. Side columns that fall
        off the edge are skipped.
        """
        if not grid.in_bounds(self.x, self.y):
            raise OutOfBoundsError(self.x, self.y, grid.width, grid.height)

        cells = []
        for dx in range(-self.config.spread, self.config.spread + 1):
            x = self.x + dx
            if grid.in_bounds(x, self.y):
                cells.append((x, self.y))
            else:
                logger.debug("Skipping source column %d outside grid", x)
        return cells

    def seed(self, grid: Grid) -> None:
        """Prime the stream with a single droplet at the source cell."""
        inject(self.x, self.y, grid, self.config.volume)

    def inject_all(self, grid: Grid) -> int:
        """Write the full stream into the grid. Returns cells written."""
        cells = self.columns(grid)
        for x, y in cells:
            inject(x, y, grid, self.config.volume)
        return len(cells)
