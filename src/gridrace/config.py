"""
Client Configuration

Process-level settings for the gridrace client.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from gridrace.simulation.session import SessionConfig


@dataclass
class ClientConfig:
    """Configuration for the race client."""

    # Diagnostics
    debug: bool = False

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    # Session limits
    max_ticks: int = 0  # 0 = unlimited

    def __post_init__(self):
        """Validate and normalize configuration."""
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

        self.log_level = self.log_level.upper()
        if self.debug:
            self.log_level = "DEBUG"

        if self.max_ticks < 0:
            raise ValueError(f"max_ticks must be >= 0, got {self.max_ticks}")

    def session_config(self) -> SessionConfig:
        """Get the session configuration derived from these settings."""
        return SessionConfig(
            max_ticks=self.max_ticks,
        )
