"""
Track module - The board and the objectives placed on it.

This module contains:
- Grid: Square board of bonus/malus cell values
- ObjectiveArea: Rectangle announced by the server
- ObjectivePoint: Selected target coordinate
- choose_objective_point: Best-value selection inside an area
"""

from gridrace.track.grid import Grid
from gridrace.track.objective import (
    ObjectiveArea,
    ObjectivePoint,
    choose_objective_point,
)

__all__ = [
    "Grid",
    "ObjectiveArea",
    "ObjectivePoint",
    "choose_objective_point",
]
