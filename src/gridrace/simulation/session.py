"""
Race session - Per-tick race loop and session state machine.

Provides:
- Setup from the server's initial records
- Tick stepping: velocity update, integration, emission, acknowledgment
- Checkpoint handling and objective re-selection
- Terminal state tracking
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional
import logging

from gridrace.car.controller import MotionController
from gridrace.car.player import PlayerState
from gridrace.simulation.protocol import Acknowledgment, LineTransport
from gridrace.track.grid import Grid
from gridrace.track.objective import (
    ObjectiveArea,
    ObjectivePoint,
    choose_objective_point,
)

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Race session lifecycle."""
    RUNNING = "running"
    FINISHED = "finished"
    FAILED = "failed"


class FailureReason(Enum):
    """Why a session ended in FAILED."""
    INVALID_MOVE = "invalid_move"                # Server answered ERROR
    UNEXPECTED_RESPONSE = "unexpected_response"  # Unknown acknowledgment line
    END_OF_INPUT = "end_of_input"                # Stream closed mid-race
    NO_OBJECTIVE = "no_objective"                # Area has no in-bounds cell
    TICK_LIMIT = "tick_limit"                    # SessionConfig.max_ticks hit


@dataclass
class SessionConfig:
    """Race session configuration."""
    max_ticks: int = 0              # 0 = unlimited


class RaceSession:
    """Single race against the server.

    Owns the grid, the player and the current/previous objectives, and
    advances them one tick at a time. Every computed position is sent to
    the server, even when it lies outside the grid; the server decides
    whether the move is legal.

    Usage:
        session = RaceSession.from_transport(LineTransport())
        state = session.run()
    """

    def __init__(
        self,
        grid: Grid,
        player: PlayerState,
        objective_area: ObjectiveArea,
        transport: LineTransport,
        config: SessionConfig | None = None,
        controller: MotionController | None = None,
    ):
        """Initialize session in the RUNNING state.

        Args:
            grid: Frozen race grid
            player: Starting player state
            objective_area: First objective area
            transport: Server transport
            config: Session configuration. Uses defaults if None.
            controller: Velocity controller. Uses MotionController if None.
        """
        self.config = config or SessionConfig()
        self.transport = transport
        self.controller = controller or MotionController()

        self._grid = grid
        self._player = player

        # The start position is the momentum reference until the first checkpoint
        self._previous_objective: Optional[ObjectivePoint] = ObjectivePoint(player.x, player.y)
        self._objective: Optional[ObjectivePoint] = None
        self._objective_area: Optional[ObjectiveArea] = None

        self._state = SessionState.RUNNING
        self._failure_reason: Optional[FailureReason] = None
        self._tick: int = 0
        self._checkpoints: int = 0

        self._accept_objective_area(objective_area)

    @classmethod
    def from_transport(
        cls,
        transport: LineTransport,
        config: SessionConfig | None = None,
    ) -> "RaceSession":
        """Read the setup records and start a session.

        Args:
            transport: Server transport positioned at the start of input
            config: Session configuration

        Returns:
            New session
        """
        grid = transport.read_grid()
        player = transport.read_player()
        objective_area = transport.read_objective_area()
        logger.debug(
            "Setup complete: grid %d, player at (%d, %d), area %s",
            grid.size, player.x, player.y, objective_area,
        )
        return cls(grid, player, objective_area, transport, config)

    @property
    def state(self) -> SessionState:
        """Current session state."""
        return self._state

    @property
    def is_running(self) -> bool:
        """Check if the race is still in progress."""
        return self._state is SessionState.RUNNING

    @property
    def failure_reason(self) -> Optional[FailureReason]:
        """Reason for FAILED, None otherwise."""
        return self._failure_reason

    @property
    def tick(self) -> int:
        """Number of ticks played."""
        return self._tick

    @property
    def grid(self) -> Grid:
        """Race grid."""
        return self._grid

    @property
    def player(self) -> PlayerState:
        """Current player state."""
        return self._player

    @property
    def objective(self) -> Optional[ObjectivePoint]:
        """Point currently targeted."""
        return self._objective

    @property
    def previous_objective(self) -> Optional[ObjectivePoint]:
        """Point targeted before the last checkpoint."""
        return self._previous_objective

    @property
    def objective_area(self) -> Optional[ObjectiveArea]:
        """Current objective area."""
        return self._objective_area

    def step(self) -> SessionState:
        """Play one tick.

        Returns:
            Session state after the tick
        """
        if not self.is_running:
            return self._state

        vx, vy = self.controller.step(
            self._player, self._objective, self._previous_objective
        )
        self._player = self._player.advanced(vx, vy)
        self._tick += 1

        x, y = self._player.x, self._player.y
        if not self._grid.contains(x, y):
            logger.warning("Move to (%d, %d) is out of bounds", x, y)
        logger.debug("Tick %d: position (%d, %d), velocity (%d, %d)", self._tick, x, y, vx, vy)

        self.transport.write_position(x, y)

        line = self.transport.read_acknowledgment()
        if line is None:
            logger.error("End of input while awaiting acknowledgment")
            self._fail(FailureReason.END_OF_INPUT)
            return self._state

        ack = Acknowledgment.parse(line)
        if ack is Acknowledgment.OK:
            pass
        elif ack is Acknowledgment.ERROR:
            logger.error("Invalid move to (%d, %d)", x, y)
            self._fail(FailureReason.INVALID_MOVE)
        elif ack is Acknowledgment.FINISH:
            logger.info("Race finished after %d ticks", self._tick)
            self._finish()
        elif ack is Acknowledgment.CHECKPOINT:
            self._handle_checkpoint()
        else:
            logger.error("Unexpected server response: %r", line)
            self._fail(FailureReason.UNEXPECTED_RESPONSE)

        return self._state

    def run(self) -> SessionState:
        """Play ticks until the race ends.

        Returns:
            Terminal session state
        """
        while self.is_running:
            if self.config.max_ticks and self._tick >= self.config.max_ticks:
                logger.error("Tick limit of %d reached", self.config.max_ticks)
                self._fail(FailureReason.TICK_LIMIT)
                break
            self.step()
        return self._state

    def _handle_checkpoint(self) -> None:
        """Promote the current objective and read the next area."""
        self._checkpoints += 1
        self._previous_objective = self._objective
        self._objective_area = None

        try:
            area = self.transport.read_objective_area()
        except EOFError:
            logger.error("End of input while reading checkpoint area")
            self._fail(FailureReason.END_OF_INPUT)
            return

        logger.debug("Checkpoint %d reached, next area %s", self._checkpoints, area)
        self._accept_objective_area(area)

    def _accept_objective_area(self, area: ObjectiveArea) -> None:
        self._objective_area = area
        self._objective = choose_objective_point(self._grid, area)
        if self._objective is None:
            logger.error("Objective area %s has no cell inside the grid", area)
            self._fail(FailureReason.NO_OBJECTIVE)
            return
        logger.debug("Objective point (%d, %d)", self._objective.x, self._objective.y)

    def _finish(self) -> None:
        self._state = SessionState.FINISHED
        self._release()

    def _fail(self, reason: FailureReason) -> None:
        self._state = SessionState.FAILED
        self._failure_reason = reason
        self._release()

    def _release(self) -> None:
        self._objective_area = None
        self._objective = None
        self._previous_objective = None

    def get_state(self) -> Dict[str, Any]:
        """Get complete session state.

        Returns:
            Dictionary containing session state
        """
        return {
            "state": self._state.value,
            "failure_reason": self._failure_reason.value if self._failure_reason else None,
            "tick": self._tick,
            "checkpoints": self._checkpoints,
            "player": self._player.get_state(),
            "grid": self._grid.get_state(),
            "objective": (self._objective.x, self._objective.y) if self._objective else None,
            "previous_objective": (
                (self._previous_objective.x, self._previous_objective.y)
                if self._previous_objective else None
            ),
            "objective_area": self._objective_area.get_state() if self._objective_area else None,
        }
