"""
Motion controller - Two-phase velocity control toward an objective.

Provides:
- Distance comparison between current and previous objectives
- Accelerate / decelerate steps of one unit per axis
"""

import logging
from typing import Tuple
import numpy as np

from gridrace.car.player import PlayerState
from gridrace.track.objective import ObjectivePoint

logger = logging.getLogger(__name__)


def _axis_direction(current: int, target: int) -> int:
    """Get +1, -1 or 0 depending on where target lies from current."""
    return int(np.sign(target - current))


class MotionController:
    """Bang-bang velocity controller.

    While the player is still closer to the objective it last visited
    than to the current one it accelerates toward the current objective;
    otherwise it eases off. Every call changes each velocity component by
    at most one, and velocity is never clamped.

    The controller holds no state between calls.

    Usage:
        controller = MotionController()
        vx, vy = controller.step(player, objective, previous_objective)
    """

    @staticmethod
    def distance(player: PlayerState, point: ObjectivePoint) -> float:
        """Euclidean distance from the player to a point."""
        return float(np.linalg.norm(player.position - point.position))

    def step(
        self,
        player: PlayerState,
        objective: ObjectivePoint,
        previous_objective: ObjectivePoint,
    ) -> Tuple[int, int]:
        """Compute the velocity for the next tick.

        Args:
            player: Current player state
            objective: Point currently targeted
            previous_objective: Point targeted before the last checkpoint

        Returns:
            New (vx, vy)
        """
        to_objective = self.distance(player, objective)
        to_previous = self.distance(player, previous_objective)

        if to_previous < to_objective:
            logger.debug(
                "accelerate: %.2f to previous < %.2f to objective",
                to_previous, to_objective,
            )
            return self.accelerate(player, objective)

        logger.debug(
            "decelerate: %.2f to previous >= %.2f to objective",
            to_previous, to_objective,
        )
        return self.decelerate(player, objective)

    def accelerate(
        self,
        player: PlayerState,
        objective: ObjectivePoint,
    ) -> Tuple[int, int]:
        """Push velocity one unit toward the objective on each axis."""
        return (
            player.vx + _axis_direction(player.x, objective.x),
            player.vy + _axis_direction(player.y, objective.y),
        )

    def decelerate(
        self,
        player: PlayerState,
        objective: ObjectivePoint,
    ) -> Tuple[int, int]:
        """Pull velocity one unit away from the objective on each axis."""
        return (
            player.vx - _axis_direction(player.x, objective.x),
            player.vy - _axis_direction(player.y, objective.y),
        )
