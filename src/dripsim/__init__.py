"""
dripsim: grid-based falling water simulator

A discrete-time simulation that approximates gravity-driven water flow
for visualization.

Core concepts:
- Water is stored as fractional fill levels in cells of a 2D grid
- Each step moves a bounded amount of water into the cell below
- A source overwrites cells with full droplets every few frames
- The renderer draws each cell as a rectangle, merging stacked water
  into one continuous column
"""

__version__ = "0.1.0"
