"""
Player - Kinematic state of the racing player.

Position and velocity are integer grid units; velocity is a per-tick
delta with no magnitude cap.
"""

from dataclasses import dataclass, replace
from typing import Dict, Any, Tuple
import numpy as np


@dataclass(frozen=True)
class PlayerState:
    """Player position and velocity on the grid."""
    # Position (grid coordinates)
    x: int = 0
    y: int = 0

    # Velocity (cells per tick, signed)
    vx: int = 0
    vy: int = 0

    @classmethod
    def start(cls, x: int, y: int) -> "PlayerState":
        """Create a stationary player at (x, y)."""
        return cls(x=x, y=y)

    @property
    def position(self) -> np.ndarray:
        """Get position as an [x, y] array."""
        return np.array([self.x, self.y])

    @property
    def velocity(self) -> Tuple[int, int]:
        """Get velocity as a (vx, vy) tuple."""
        return (self.vx, self.vy)

    def advanced(self, vx: int, vy: int) -> "PlayerState":
        """Apply a new velocity and integrate one tick.

        Args:
            vx: New velocity on the x axis
            vy: New velocity on the y axis

        Returns:
            State after position += velocity
        """
        return replace(self, x=self.x + vx, y=self.y + vy, vx=vx, vy=vy)

    def get_state(self) -> Dict[str, Any]:
        """Get player state for serialization."""
        return {"x": self.x, "y": self.y, "vx": self.vx, "vy": self.vy}
