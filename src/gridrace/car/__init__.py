"""
Car module - The player and how it is steered.

This module contains:
- PlayerState: Integer position and velocity
- MotionController: Accelerate/decelerate velocity control
"""

from gridrace.car.player import PlayerState
from gridrace.car.controller import MotionController

__all__ = [
    "PlayerState",
    "MotionController",
]
