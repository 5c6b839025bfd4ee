"""Tests for the command line client."""

import io
import logging

import pytest

from gridrace.cli import EXIT_FAILED, EXIT_FINISHED, EXIT_SETUP_ERROR, main, parse_args
from gridrace.config import ClientConfig


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging's root handlers after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _race_input(*acks) -> io.StringIO:
    lines = [3, 0, 0, 0, 0, 0, 0, 0, 0, 5, 0, 0, 0, 0, 3, 3, *acks]
    return io.StringIO("".join(f"{line}\n" for line in lines))


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        """Test default arguments."""
        args = parse_args([])

        assert not args.debug
        assert args.log_level == "WARNING"
        assert args.max_ticks == 0

    def test_debug_flags(self):
        """Test short and long debug flags."""
        assert parse_args(["-d"]).debug
        assert parse_args(["--debug"]).debug


class TestClientConfig:
    """Test client configuration."""

    def test_debug_forces_debug_level(self):
        """Test debug mode overrides the log level."""
        config = ClientConfig(debug=True, log_level="ERROR")

        assert config.log_level == "DEBUG"

    def test_log_file_normalized(self, tmp_path):
        """Test string log paths become Path objects."""
        config = ClientConfig(log_file=str(tmp_path / "race.log"))

        assert config.log_file == tmp_path / "race.log"

    def test_negative_max_ticks_rejected(self):
        """Test max_ticks must not be negative."""
        with pytest.raises(ValueError):
            ClientConfig(max_ticks=-1)

    def test_session_config(self):
        """Test session settings are carried over."""
        session_config = ClientConfig(max_ticks=7).session_config()

        assert session_config.max_ticks == 7


class TestMain:
    """Test full client runs."""

    def test_finish_exit_code(self):
        """Test a finished race exits with success."""
        stdout = io.StringIO()

        code = main([], _race_input("OK", "FINISH"), stdout)

        assert code == EXIT_FINISHED
        assert stdout.getvalue() == "1\n1\n1\n1\n"

    def test_failure_exit_code(self):
        """Test a failed race exits with failure."""
        code = main([], _race_input("ERROR"), io.StringIO())

        assert code == EXIT_FAILED

    def test_setup_error_exit_code(self):
        """Test truncated setup input is reported separately."""
        code = main([], io.StringIO("3\n0\n"), io.StringIO())

        assert code == EXIT_SETUP_ERROR

    def test_oversized_cell_value(self):
        """Test a cell value too large for the board still plays the race."""
        lines = "1\n99999999999999999999\n0\n0\n0\n0\n1\n1\nFINISH\n"
        stdout = io.StringIO()

        code = main([], io.StringIO(lines), stdout)

        assert code == EXIT_FINISHED
        assert stdout.getvalue() == "0\n0\n"

    def test_invalid_grid_size_exit_code(self):
        """Test an unparsable grid size aborts setup."""
        code = main([], io.StringIO("garbage\n"), io.StringIO())

        assert code == EXIT_SETUP_ERROR

    def test_debug_output_stays_off_protocol_stream(self, capsys):
        """Test debug logging never reaches the protocol output."""
        stdout = io.StringIO()

        code = main(["--debug"], _race_input("OK", "FINISH"), stdout)

        assert code == EXIT_FINISHED
        assert stdout.getvalue() == "1\n1\n1\n1\n"
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Debug mode activated" in captured.err

    def test_log_file(self, tmp_path):
        """Test logs are also written to a file."""
        log_file = tmp_path / "race.log"

        main(["--log-level", "INFO", "--log-file", str(log_file)], _race_input("FINISH"), io.StringIO())

        assert "Game finished successfully" in log_file.read_text()
