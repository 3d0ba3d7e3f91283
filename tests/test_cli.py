"""
Tests for the command-line entry point.

Tests cover:
- Argument parsing and defaults
- Single command mode
- Interactive mode exit status
"""

import io
import logging
from unittest.mock import patch

import pytest

from pathshell import __version__
from pathshell.cli import build_cli_parser, main


class TestParser:
    """Test CLI argument parsing."""

    def test_defaults(self, monkeypatch):
        """Test default values without arguments."""
        monkeypatch.delenv('PATHSHELL_LOG_LEVEL', raising=False)
        args = build_cli_parser().parse_args([])

        assert args.command is None
        assert args.log_level == 'ERROR'

    def test_log_level_from_environment(self, monkeypatch):
        """Test PATHSHELL_LOG_LEVEL sets the default level."""
        monkeypatch.setenv('PATHSHELL_LOG_LEVEL', 'debug')
        args = build_cli_parser().parse_args([])

        assert args.log_level == 'DEBUG'

    def test_log_level_flag_is_case_insensitive(self):
        """Test --log-level accepts lower case names."""
        args = build_cli_parser().parse_args(['--log-level', 'info'])
        assert args.log_level == 'INFO'

    def test_invalid_log_level(self):
        """Test unknown levels are rejected."""
        with pytest.raises(SystemExit):
            build_cli_parser().parse_args(['--log-level', 'LOUD'])

    def test_version(self, capsys):
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            build_cli_parser().parse_args(['--version'])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    """Test main()."""

    def test_single_command_status(self):
        """Test -c returns the command's status."""
        with patch('pathshell.cli.configure_logging'):
            assert main(['-c', 'no_such_command_xyz']) == 127

    def test_single_command_exit(self):
        """Test -c 'exit 9' returns 9."""
        with patch('pathshell.cli.configure_logging'):
            assert main(['-c', 'exit 9']) == 9

    def test_interactive_exit(self, monkeypatch):
        """Test the read loop's exit status is returned."""
        monkeypatch.setattr('sys.stdin', io.StringIO('exit 42\n'))
        with patch('pathshell.cli.configure_logging'):
            assert main([]) == 42

    def test_logging_configured(self):
        """Test the chosen level is applied to logging."""
        with patch('pathshell.cli.logging.basicConfig') as basic_config:
            main(['--log-level', 'DEBUG', '-c', 'echo'])

        assert basic_config.call_args.kwargs['level'] == logging.DEBUG
