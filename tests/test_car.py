"""Tests for the player state and motion controller."""

import itertools

import numpy as np
import pytest

from gridrace.car.controller import MotionController
from gridrace.car.player import PlayerState
from gridrace.track.objective import ObjectivePoint


class TestPlayerState:
    """Test player state integration."""

    def test_start_is_stationary(self):
        """Test a new player has zero velocity."""
        player = PlayerState.start(3, 4)

        assert (player.x, player.y) == (3, 4)
        assert player.velocity == (0, 0)

    def test_advanced_integrates_position(self):
        """Test the new velocity is applied to the position."""
        player = PlayerState(x=2, y=2, vx=1, vy=0)

        moved = player.advanced(2, -1)

        assert (moved.x, moved.y) == (4, 1)
        assert moved.velocity == (2, -1)
        # Original state untouched
        assert (player.x, player.y) == (2, 2)


class TestMotionController:
    """Test accelerate/decelerate velocity control."""

    def test_first_step_accelerates(self):
        """Test a player on its previous objective accelerates toward the next."""
        controller = MotionController()
        player = PlayerState.start(0, 0)

        velocity = controller.step(player, ObjectivePoint(2, 2), ObjectivePoint(0, 0))

        assert velocity == (1, 1)

    def test_equal_distances_decelerate(self):
        """Test a tie in distances takes the decelerate branch."""
        controller = MotionController()
        player = PlayerState(x=1, y=1, vx=1, vy=1)

        velocity = controller.step(player, ObjectivePoint(2, 2), ObjectivePoint(0, 0))

        assert velocity == (0, 0)

    def test_closer_to_objective_decelerates(self):
        """Test a player past the midpoint eases off."""
        controller = MotionController()
        player = PlayerState(x=8, y=0, vx=3, vy=0)

        velocity = controller.step(player, ObjectivePoint(10, 0), ObjectivePoint(0, 0))

        assert velocity == (2, 0)

    def test_accelerate_per_axis(self):
        """Test accelerate moves each axis toward the objective."""
        controller = MotionController()
        player = PlayerState(x=5, y=5, vx=0, vy=2)

        assert controller.accelerate(player, ObjectivePoint(7, 1)) == (1, 1)
        assert controller.accelerate(player, ObjectivePoint(5, 9)) == (0, 3)

    def test_decelerate_per_axis(self):
        """Test decelerate is the mirror of accelerate."""
        controller = MotionController()
        player = PlayerState(x=5, y=5, vx=0, vy=2)

        assert controller.decelerate(player, ObjectivePoint(7, 1)) == (-1, 3)
        assert controller.decelerate(player, ObjectivePoint(5, 9)) == (0, 1)

    @pytest.mark.parametrize("method", ["accelerate", "decelerate", "step"])
    def test_deltas_bounded(self, method):
        """Test every axis changes by -1, 0 or +1, and not at all when aligned."""
        controller = MotionController()
        coords = range(-2, 3)

        for px, py, ox, oy in itertools.product(coords, repeat=4):
            player = PlayerState(x=px, y=py, vx=4, vy=-4)
            objective = ObjectivePoint(ox, oy)
            if method == "step":
                vx, vy = controller.step(player, objective, ObjectivePoint(0, 0))
            else:
                vx, vy = getattr(controller, method)(player, objective)

            assert vx - player.vx in (-1, 0, 1)
            assert vy - player.vy in (-1, 0, 1)
            if px == ox:
                assert vx == player.vx
            if py == oy:
                assert vy == player.vy

    def test_deterministic(self):
        """Test identical inputs produce identical velocities."""
        controller = MotionController()
        player = PlayerState(x=3, y=-1, vx=2, vy=5)
        objective = ObjectivePoint(0, 4)
        previous = ObjectivePoint(6, 6)

        results = {controller.step(player, objective, previous) for _ in range(10)}
        other = MotionController().step(player, objective, previous)

        assert results == {other}

    def test_step_does_not_mutate_player(self):
        """Test the controller is a pure function of its inputs."""
        controller = MotionController()
        player = PlayerState(x=0, y=0, vx=0, vy=0)

        controller.step(player, ObjectivePoint(4, 4), ObjectivePoint(0, 0))

        assert player == PlayerState(x=0, y=0, vx=0, vy=0)

    def test_velocity_not_clamped(self):
        """Test repeated acceleration grows velocity without a cap."""
        controller = MotionController()
        player = PlayerState(x=0, y=0, vx=0, vy=0)
        objective = ObjectivePoint(10**6, 0)

        for _ in range(20):
            player = player.advanced(*controller.accelerate(player, objective))

        assert player.vx == 20
        assert player.x == sum(range(1, 21))

    def test_distance(self):
        """Test Euclidean distance."""
        player = PlayerState.start(0, 0)

        assert MotionController.distance(player, ObjectivePoint(3, 4)) == 5.0

    def test_distance_from_offset_position(self):
        """Test distance uses the player and point coordinate arrays."""
        player = PlayerState(x=-2, y=5, vx=9, vy=9)
        point = ObjectivePoint(1, 1)

        assert np.array_equal(player.position, np.array([-2, 5]))
        assert np.array_equal(point.position, np.array([1, 1]))
        assert MotionController.distance(player, point) == 5.0
