"""
Pytest configuration and shared fixtures.
"""

import matplotlib
matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def small_grid():
    """An empty 3x3 grid with 1 px tiles."""
    from dripsim.core import Grid
    return Grid.create(3, 3, tile_size=1)


@pytest.fixture
def reference_config():
    """The reference 800x400 px surface with 10 px tiles."""
    from dripsim.core import SimulationConfig
    return SimulationConfig()


@pytest.fixture
def small_config():
    """A 10x6 cell surface with the source in the top row, column 5."""
    from dripsim.core import GridConfig, InjectorConfig, SimulationConfig
    return SimulationConfig(
        grid=GridConfig(surface_width=100, surface_height=60, tile_size=10),
        injector=InjectorConfig(source_x=50, source_y=0, period=5, spread=1),
    )


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
