"""
GridRace - A line-protocol client for a grid racing game.

This package provides:
- A square grid of bonus/malus cells and objective selection inside server areas
- A two-phase accelerate/decelerate velocity controller
- A race session that exchanges positions and acknowledgments with the server
"""

__version__ = "0.1.0"

from gridrace.simulation.session import RaceSession
from gridrace.car.controller import MotionController
from gridrace.track.grid import Grid

__all__ = ["RaceSession", "MotionController", "Grid", "__version__"]
