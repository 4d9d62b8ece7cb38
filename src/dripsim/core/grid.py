"""
Grid: the 2D array of water cells that the simulation advances.

The grid stores ONLY the water state:
- One volume per cell, the filled fraction of the cell in [0, 1]
- The tile edge length in pixels (carried for rendering, not physics)

It has no behavior beyond construction and checked cell access.
Gravity lives in the kernel, inflow in the injector.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

import numpy as np

from dripsim.core.errors import InvalidDimensionsError, OutOfBoundsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Droplet:
    """A single cell value: how much water it holds and its tile size."""

    volume: float = 0.0  # Fraction of capacity, 0.0 (dry) to 1.0 (full)
    size: int = 0  # Tile edge length in pixels


@dataclass
class GridConfig:
    """Rendering surface dimensions that the grid is derived from."""

    surface_width: int = 800  # Pixels
    surface_height: int = 400  # Pixels
    tile_size: int = 10  # Pixel edge length of one cell

    def __post_init__(self):
        if self.surface_width <= 0 or self.surface_height <= 0:
            raise InvalidDimensionsError(
                f"Surface must be positive, got "
                f"{self.surface_width}x{self.surface_height}"
            )
        if self.tile_size <= 0:
            raise InvalidDimensionsError(
                f"Tile size must be positive, got {self.tile_size}"
            )

    @property
    def nx(self) -> int:
        """Grid width in cells (remainder pixels are unused margin)."""
        return self.surface_width // self.tile_size

    @property
    def ny(self) -> int:
        """Grid height in cells."""
        return self.surface_height // self.tile_size


class Grid:
    """
    Rectangular array of water volumes, indexed as (x, y).

    Row 0 is the top of the picture, row height-1 the bottom.
    The backing array is volumes[y, x] with dtype float64.
    """

    def __init__(self, nx: int, ny: int, tile_size: int = 1):
        if nx <= 0 or ny <= 0:
            raise InvalidDimensionsError(
                f"Grid must be at least 1x1 cells, got {nx}x{ny}"
            )
        if tile_size <= 0:
            raise InvalidDimensionsError(
                f"Tile size must be positive, got {tile_size}"
            )
        self.tile_size = tile_size
        self.volumes = np.zeros((ny, nx), dtype=np.float64)

    @classmethod
    def create(cls, width: int, height: int, tile_size: int = 1) -> Grid:
        """Create an empty grid of width x height cells."""
        return cls(width, height, tile_size)

    @classmethod
    def from_config(cls, config: GridConfig) -> Grid:
        """Size a grid by dividing the surface pixels by the tile size."""
        grid = cls(config.nx, config.ny, config.tile_size)
        logger.info(
            "Created %dx%d grid from %dx%d px surface (tile %d px)",
            config.nx, config.ny,
            config.surface_width, config.surface_height, config.tile_size,
        )
        return grid

    @classmethod
    def from_volumes(cls, volumes, tile_size: int = 1) -> Grid:
        """Build a grid from an explicit (height, width) array of volumes."""
        array = np.array(volumes, dtype=np.float64)
        if array.ndim != 2:
            raise InvalidDimensionsError(
                f"Volumes must be a 2D array, got {array.ndim}D"
            )
        ny, nx = array.shape
        grid = cls(nx, ny, tile_size)
        grid.volumes[:] = array
        return grid

    @property
    def width(self) -> int:
        return self.volumes.shape[1]

    @property
    def height(self) -> int:
        return self.volumes.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        """Return (height, width) grid dimensions."""
        return self.volumes.shape

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int):
        # numpy would silently wrap negative indices
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> Droplet:
        """Get the cell at (x, y)."""
        self._check(x, y)
        return Droplet(volume=float(self.volumes[y, x]), size=self.tile_size)

    def set(self, x: int, y: int, droplet: Droplet) -> None:
        """Overwrite the cell at (x, y)."""
        self._check(x, y)
        if droplet.size != self.tile_size:
            raise InvalidDimensionsError(
                f"Droplet size {droplet.size} does not match tile size {self.tile_size}"
            )
        self.volumes[y, x] = droplet.volume

    def volume_at(self, x: int, y: int) -> float:
        self._check(x, y)
        return float(self.volumes[y, x])

    def set_volume(self, x: int, y: int, volume: float) -> None:
        self._check(x, y)
        self.volumes[y, x] = volume

    def copy(self) -> Grid:
        """Create an independent copy of this grid."""
        result = Grid(self.width, self.height, self.tile_size)
        np.copyto(result.volumes, self.volumes)
        return result

    def total_volume(self) -> float:
        """Total water held by the grid, in cell capacities."""
        return float(self.volumes.sum())

    def wet_cells(self) -> int:
        """Number of cells holding any water."""
        return int(np.count_nonzero(self.volumes > 0))

    def max_volume(self) -> float:
        return float(self.volumes.max())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.tile_size == other.tile_size
            and self.shape == other.shape
            and bool(np.array_equal(self.volumes, other.volumes))
        )

    def __repr__(self) -> str:
        return (
            f"Grid(width={self.width}, height={self.height}, "
            f"tile_size={self.tile_size}, total_volume={self.total_volume():.2f})"
        )
