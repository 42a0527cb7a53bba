"""
Integration tests for the name case service.

These tests verify that the components work together correctly
without mocking, using real configuration and CLI interfaces.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Get the project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent


def run_cli(*args, input_text=None, **env_overrides):
    """Run the CLI as a module in a subprocess."""
    env = {
        key: value for key, value in os.environ.items()
        if key.upper() not in {"LOG_LEVEL", "LOG_FORMAT", "MAX_LENGTH", "INPUT_ENCODING", "ENVIRONMENT"}
    }
    env.update(env_overrides)
    env["PYTHONIOENCODING"] = "utf-8"

    return subprocess.run(
        [sys.executable, "-m", "services.name_case", *args],
        cwd=PROJECT_ROOT,
        input=input_text,
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        timeout=30
    )


class TestCLIIntegration:
    """Test CLI interface with real subprocess calls."""

    def test_cli_help_command(self):
        """Test that CLI help command works."""
        result = run_cli("--help")

        assert result.returncode == 0
        assert "Name Case Converter" in result.stdout
        assert "--input" in result.stdout
        assert "--max-length" in result.stdout

    def test_cli_version_command(self):
        """Test that CLI version command works."""
        result = run_cli("--version")

        assert result.returncode == 0
        assert "Name Case Converter" in result.stdout

    def test_cli_converts_arguments(self):
        """Test converting names given as arguments."""
        result = run_cli("JOHN DOE", "BJÖRK GUÐMUNDSDÓTTIR", "LOUIS XVI")

        assert result.returncode == 0
        assert result.stdout.splitlines() == ["John Doe", "Björk Guðmundsdóttir", "Louis XVI"]

    def test_cli_converts_stdin(self):
        """Test converting names piped through stdin."""
        result = run_cli(input_text="van der sar\nJUAN Y MARIA\n")

        assert result.returncode == 0
        assert result.stdout.splitlines() == ["van der Sar", "Juan y Maria"]

    def test_cli_logs_to_stderr(self):
        """Test that structured logs do not mix with converted names."""
        result = run_cli("JOHN DOE", "--log-format", "json")

        assert result.returncode == 0
        assert result.stdout == "John Doe\n"
        assert "Batch processing completed successfully" in result.stderr

    def test_cli_missing_input_file(self, tmp_path):
        """Test that a missing input file fails with exit code 1."""
        result = run_cli("--input", str(tmp_path / "missing.txt"))

        assert result.returncode == 1
        assert result.stdout == ""
        assert "Failed to read names" in result.stderr

    def test_cli_invalid_max_length(self):
        """Test that CLI rejects a non-positive maximum length."""
        result = run_cli("--max-length", "0", "JOHN DOE")

        assert result.returncode == 2
        assert "must be greater than 0" in result.stderr

    def test_cli_log_level_override(self):
        """Test that CLI log level override works."""
        result = run_cli("JOHN DOE", "--log-level", "DEBUG", "--log-format", "text")

        assert result.returncode == 0
        assert result.stdout == "John Doe\n"
        assert "Name converted" in result.stderr


class TestLoggingIntegration:
    """Test that logging configuration works correctly."""

    def test_logging_configuration(self):
        """Test that logging configuration can be set up."""
        from services.name_case.log_config import configure_logging

        # Should not raise any exceptions
        configure_logging(log_level="INFO", log_format="json")
        configure_logging(log_level="DEBUG", log_format="text")

    def test_structured_logging_functions(self):
        """Test that structured logging helper functions work."""
        from services.name_case.log_config import get_logger, log_processing_batch

        logger = get_logger(__name__)

        # These should not raise exceptions
        log_processing_batch(logger, "test_batch", items_processed=100, items_failed=0, duration_ms=5000.0)
        log_processing_batch(logger, "test_batch", items_processed=0, items_failed=0)
        log_processing_batch(logger, "test_batch", items_processed=9, items_failed=1)


class TestEndToEndWorkflow:
    """Test complete workflow without external dependencies."""

    def test_full_import_chain(self):
        """Test that all modules can be imported together without conflicts."""
        from services.name_case import __version__
        from services.name_case.helpers import MaxLengthFormatter, to_name_case
        from services.name_case.main import convert_names

        assert __version__ is not None
        converted, _ = convert_names(["MACQUARIE"], MaxLengthFormatter.of(40))
        assert converted == [to_name_case("MACQUARIE")] == ["Macquarie"]


# Mark integration tests
pytestmark = pytest.mark.integration
