"""
Protocol - Line-based text exchange with the race server.

Handles:
- Setup records (grid, player start, objective area)
- Position emission, one integer per line
- Acknowledgment markers
- Lenient parse-or-zero integer decoding
"""

from enum import Enum
from typing import Optional, TextIO
import logging
import re
import sys

from gridrace.car.player import PlayerState
from gridrace.track.grid import Grid
from gridrace.track.objective import ObjectiveArea

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# 32-bit C int range
INT_MIN = -2**31
INT_MAX = 2**31 - 1


class Acknowledgment(Enum):
    """Server verdict after each emitted position."""
    OK = "OK"
    ERROR = "ERROR"
    FINISH = "FINISH"
    CHECKPOINT = "CHECKPOINT"

    @classmethod
    def parse(cls, line: str) -> Optional["Acknowledgment"]:
        """Decode an acknowledgment line.

        Args:
            line: Raw line, with or without its terminator

        Returns:
            Matching marker, or None if the line is not a known marker
        """
        try:
            return cls(line.rstrip("\r\n"))
        except ValueError:
            return None


def parse_int(text: str) -> int:
    """Parse a leading integer, falling back to zero.

    Mirrors C ``atoi``: leading whitespace and an optional sign are
    accepted, trailing garbage is ignored, and text with no leading
    digits yields 0. Values outside the C int range saturate at its
    bounds, as ``strtol`` does.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return min(max(int(match.group(1)), INT_MIN), INT_MAX)


class LineTransport:
    """Text-stream transport to the race server.

    Reads one record per line from ``reader`` and writes position
    records to ``writer``. Nothing but protocol lines is ever written
    to ``writer``.
    """

    def __init__(
        self,
        reader: TextIO | None = None,
        writer: TextIO | None = None,
    ):
        """Initialize transport.

        Args:
            reader: Stream the server writes to. Uses stdin if None.
            writer: Stream the server reads from. Uses stdout if None.
        """
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout

    def read_line(self) -> Optional[str]:
        """Read one line without its terminator.

        Returns:
            Line content, or None at end of input
        """
        line = self.reader.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def read_int(self, what: str = "value") -> int:
        """Read one integer record with parse-or-zero leniency.

        Args:
            what: Record name, for logs and errors

        Returns:
            Parsed integer
        """
        line = self.read_line()
        if line is None:
            raise EOFError(f"End of input while reading {what}")

        if _LEADING_INT.match(line) is None:
            logger.debug("Unparsable %s %r read as 0", what, line)
        value = parse_int(line)
        logger.debug("%s = %d", what, value)
        return value

    def read_grid(self) -> Grid:
        """Read the grid size followed by size * size row-major values."""
        size = self.read_int("grid size")
        if size <= 0:
            raise ValueError(f"Invalid grid size {size}")

        grid = Grid(size)
        for r in range(size):
            for c in range(size):
                grid.set_value(r, c, self.read_int(f"cell ({r}, {c})"))
        grid.freeze()

        logger.debug("Grid of size %d created", size)
        return grid

    def read_player(self) -> PlayerState:
        """Read the player start position."""
        x = self.read_int("player x")
        y = self.read_int("player y")
        return PlayerState.start(x, y)

    def read_objective_area(self) -> ObjectiveArea:
        """Read an objective area as x, y, w, h."""
        return ObjectiveArea(
            x=self.read_int("objective x"),
            y=self.read_int("objective y"),
            w=self.read_int("objective w"),
            h=self.read_int("objective h"),
        )

    def read_acknowledgment(self) -> Optional[str]:
        """Read the raw acknowledgment line (None at end of input)."""
        return self.read_line()

    def write_position(self, x: int, y: int) -> None:
        """Emit a position as two lines and flush."""
        self.writer.write(f"{x}\n{y}\n")
        self.writer.flush()
