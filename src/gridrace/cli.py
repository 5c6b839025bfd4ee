"""
Command line entry point for the gridrace client.

Usage:
    gridrace                     # Play a race on stdin/stdout
    gridrace --debug             # Progress logging on stderr
    gridrace --log-file race.log # Also log to a file
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from gridrace.config import ClientConfig
from gridrace.simulation.protocol import LineTransport
from gridrace.simulation.session import RaceSession, SessionState

logger = logging.getLogger("gridrace")

EXIT_FINISHED = 0
EXIT_FAILED = 1
EXIT_SETUP_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Grid race client: reads the race from stdin, writes moves to stdout",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug progress logging on stderr"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write logs to this file"
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=0,
        help="Give up after this many ticks (default: 0, unlimited)"
    )
    return parser.parse_args(argv)


def setup_logging(config: ClientConfig) -> None:
    """Configure logging.

    Handlers never write to stdout, which carries protocol lines.
    """
    log_format = "%(asctime)s [%(levelname)s] %(message)s"
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=log_format,
        handlers=handlers,
        force=True,
    )


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run one race.

    Args:
        argv: Command line arguments. Uses sys.argv if None.
        stdin: Server-to-client stream. Uses sys.stdin if None.
        stdout: Client-to-server stream. Uses sys.stdout if None.

    Returns:
        Process exit code
    """
    args = parse_args(argv)
    config = ClientConfig(
        debug=args.debug,
        log_level=args.log_level,
        log_file=args.log_file,
        max_ticks=args.max_ticks,
    )
    setup_logging(config)
    logger.debug("Debug mode activated")

    transport = LineTransport(stdin, stdout)
    try:
        session = RaceSession.from_transport(transport, config.session_config())
    except EOFError as e:
        logger.error("Setup failed: %s", e)
        return EXIT_SETUP_ERROR
    except ValueError as e:
        logger.error("Setup failed: %s", e)
        return EXIT_SETUP_ERROR

    state = session.run()
    if state is SessionState.FINISHED:
        logger.info("Game finished successfully")
        return EXIT_FINISHED

    logger.error(
        "Race failed after %d ticks: %s",
        session.tick, session.failure_reason.value,
    )
    return EXIT_FAILED


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
