"""Open the water simulation window with the reference settings."""

from dripsim.core import SimulationConfig, WaterSimulation
from dripsim.logging_config import setup_logging
from dripsim.viz.window import WindowConfig, run_window


def main() -> None:
    setup_logging()
    simulation = WaterSimulation(SimulationConfig())
    run_window(simulation, WindowConfig())


if __name__ == "__main__":
    main()
