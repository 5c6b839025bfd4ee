"""
Simulation module - Race loop against the server.

This module contains:
- RaceSession: Per-tick race loop and state machine
- LineTransport: Line-based server protocol
- Acknowledgment: Server verdict markers
"""

from gridrace.simulation.protocol import Acknowledgment, LineTransport
from gridrace.simulation.session import (
    FailureReason,
    RaceSession,
    SessionConfig,
    SessionState,
)

__all__ = [
    "Acknowledgment",
    "LineTransport",
    "FailureReason",
    "RaceSession",
    "SessionConfig",
    "SessionState",
]
