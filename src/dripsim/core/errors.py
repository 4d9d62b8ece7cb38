"""
Errors raised by the grid and the components that read or write it.

Both kinds are configuration errors: they point at an integration bug
between the kernel, the injector and the renderer, so they are raised
immediately and never clamped away.
"""


class GridError(Exception):
    """Base class for grid errors."""


class OutOfBoundsError(GridError, IndexError):
    """A cell coordinate falls outside [0, width) x [0, height)."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Cell ({x}, {y}) is outside the {width}x{height} grid"
        )


class InvalidDimensionsError(GridError, ValueError):
    """Zero or negative width, height or tile size at construction."""
