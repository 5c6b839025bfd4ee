#!/usr/bin/env python3
"""
Scripted Race Example

This example demonstrates how to:
1. Feed a canned server transcript to a race session
2. Step the session tick by tick
3. Inspect the trajectory and final state

Run with: python run_scripted_race.py
"""

import io

from gridrace import RaceSession
from gridrace.simulation import LineTransport

# 4x4 grid with a bonus in the bottom-right corner
SETUP = [4] + [0] * 15 + [9]
START = [0, 0]
AREA = [0, 0, 4, 4]
NEXT_AREA = [0, 0, 1, 1]
ACKS = ["OK", "CHECKPOINT", *map(str, NEXT_AREA), "OK", "OK", "FINISH"]


def main():
    print("=" * 60)
    print("GridRace Scripted Race Example")
    print("=" * 60)

    lines = [*map(str, SETUP + START + AREA), *ACKS]
    server_output = io.StringIO("\n".join(lines) + "\n")
    client_output = io.StringIO()

    # Step 1: Read setup
    print("\n1. Reading setup...")
    session = RaceSession.from_transport(LineTransport(server_output, client_output))
    print(f"   Grid size: {session.grid.size}")
    print(f"   Player: ({session.player.x}, {session.player.y})")
    print(f"   Objective: ({session.objective.x}, {session.objective.y})")

    # Step 2: Race
    print("\n2. Racing...")
    while session.is_running:
        session.step()
        player = session.player
        print(f"   Tick {session.tick}: position = ({player.x}, {player.y}), "
              f"velocity = ({player.vx}, {player.vy})")

    # Step 3: Result
    print("\n3. Result:")
    print(f"   State: {session.state.value}")
    print(f"   Moves sent: {client_output.getvalue().split()}")

    print("\n" + "=" * 60)
    print("Race complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
