"""
Kernel: advances the grid by one discrete step of gravity.

Each step:
- Allocates a fresh output grid and copies the current volumes into it
- Visits every water-bearing cell that is not in the bottom row
- Moves up to flow_rate of water into the cell directly below

The source test reads the PRE-step grid, but the transfer itself reads
and writes the NEW grid for both cells. Cells visited later in a pass
therefore see volumes already changed earlier in that pass, which makes
the result depend on the traversal order. The order is fixed per kernel
and defaults to top-to-bottom.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from dripsim.core.grid import Grid

Traversal = Literal["top_down", "bottom_up"]


def transfer_amount(target_volume, max_volume: float = 1.0, flow_rate: float = 0.5):
    """
    How much water moves into a target in one transfer.

    The target's headroom, capped at the flow rate so water never
    crosses a whole column in one step. Accepts scalars or arrays.
    """
    return np.minimum(max_volume - target_volume, flow_rate)


def fill(source, target, max_volume: float = 1.0, flow_rate: float = 0.5):
    """
    Move water from source into target at a controlled rate.

    No floor is applied to the source and no ceiling re-check to the
    target; callers clamp afterwards if they need [0, max_volume].

    Args:
        source, target: Volumes (scalars or equally shaped arrays)
        max_volume: Capacity of the target
        flow_rate: Largest amount moved per transfer

    Returns:
        (new_source, new_target)
    """
    transfer = transfer_amount(target, max_volume, flow_rate)
    return source - transfer, target + transfer


@dataclass
class KernelConfig:
    """Configuration for the gravity kernel."""

    max_volume: float = 1.0  # Cell capacity
    flow_rate: float = 0.5  # Max volume moved between two cells per step
    traversal: Traversal = "top_down"  # Row visit order within a step
    clamp: bool = True  # Clip volumes to [0, max_volume] after each step

    def __post_init__(self):
        if self.max_volume <= 0:
            raise ValueError(f"max_volume must be positive, got {self.max_volume}")
        if self.flow_rate <= 0:
            raise ValueError(f"flow_rate must be positive, got {self.flow_rate}")
        if self.traversal not in ("top_down", "bottom_up"):
            raise ValueError(f"Unknown traversal: {self.traversal}")


@dataclass
class GravityKernel:
    """
    Pure step function: step(grid) -> new grid.

    Flow is strictly vertical, so cells in the same row never touch each
    other. A whole row is applied as one vectorized fill, which gives the
    same result as visiting its columns left to right.
    """

    config: KernelConfig = field(default_factory=KernelConfig)

    def rows(self, height: int) -> range:
        """Source rows in visit order. The bottom row never flows."""
        if self.config.traversal == "bottom_up":
            return range(height - 2, -1, -1)
        return range(height - 1)

    def step(self, grid: Grid) -> Grid:
        """Advance the grid by one step. The input grid is not modified."""
        new_grid = grid.copy()
        old = grid.volumes
        new = new_grid.volumes
        max_volume = self.config.max_volume
        flow_rate = self.config.flow_rate

        for y in self.rows(grid.height):
            wet = old[y] > 0
            if not wet.any():
                continue
            new[y, wet], new[y + 1, wet] = fill(
                new[y, wet], new[y + 1, wet], max_volume, flow_rate
            )

        if self.config.clamp:
            np.clip(new, 0.0, max_volume, out=new)

        return new_grid


def step(grid: Grid, config: KernelConfig | None = None) -> Grid:
    """Advance a grid by one step with the given (or default) kernel config."""
    return GravityKernel(config or KernelConfig()).step(grid)
