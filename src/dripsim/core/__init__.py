"""
Core simulation primitives.

This layer knows NOTHING about windows, colors or frame pacing.
It only knows:
- Cells holding a water volume in [0, 1]
- A pure step function that moves water one row down
- A source that overwrites cells with full droplets on a cadence
- The simulation object that owns the grid and orders a frame
"""

from dripsim.core.errors import GridError, OutOfBoundsError, InvalidDimensionsError
from dripsim.core.grid import Droplet, Grid, GridConfig
from dripsim.core.kernel import GravityKernel, KernelConfig, fill, step, transfer_amount
from dripsim.core.injector import InjectorConfig, SourceInjector, inject
from dripsim.core.simulation import SimulationConfig, WaterSimulation

__all__ = [
    "GridError",
    "OutOfBoundsError",
    "InvalidDimensionsError",
    "Droplet",
    "Grid",
    "GridConfig",
    "GravityKernel",
    "KernelConfig",
    "fill",
    "step",
    "transfer_amount",
    "InjectorConfig",
    "SourceInjector",
    "inject",
    "SimulationConfig",
    "WaterSimulation",
]
