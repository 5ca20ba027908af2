"""Tests for CLI."""

from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import EndpointConnectionError, ReadTimeoutError

from tf_lock_checker.cli import _handle_error, build_parser, main, run_unlock
from tf_lock_checker.domain.exceptions import (
    BackendConnectionError,
    InvalidSelectionError,
    LockListError,
)
from tests.builders import ScriptedPrompter


class TestHandleError:
    """Tests for _handle_error function."""

    def test_handle_invalid_selection(self, capsys):
        """Test handling InvalidSelectionError."""
        result = _handle_error(InvalidSelectionError("gcp"))

        assert result == 1
        assert "Invalid cloud provider specified" in capsys.readouterr().err

    def test_handle_connection_error(self):
        """Test handling BackendConnectionError."""
        assert _handle_error(BackendConnectionError("Failed to connect to AWS")) == 1

    def test_handle_list_error(self):
        """Test handling LockListError."""
        assert _handle_error(LockListError("Failed to scan DynamoDB table locks")) == 1

    def test_handle_value_error(self):
        """Test handling ValueError."""
        assert _handle_error(ValueError("DynamoDB backend requires a table name")) == 1

    def test_handle_keyboard_interrupt(self):
        """Test handling KeyboardInterrupt."""
        assert _handle_error(KeyboardInterrupt()) == 130

    def test_handle_unexpected_error(self):
        """Test handling unexpected error type."""
        assert _handle_error(AttributeError("Unexpected error")) == 1


class TestRunUnlock:
    """Tests for run_unlock function."""

    def test_invalid_selection_exits_non_zero(self):
        """Test that an unknown provider ends the run without more prompts."""
        prompter = ScriptedPrompter(["gcp"])

        with patch("tf_lock_checker.infrastructure.backends.dynamodb_backend.boto3") as mock_boto3:
            result = run_unlock(prompter, defaults={})

        assert result == 1
        assert len(prompter.questions) == 1
        mock_boto3.client.assert_not_called()

    @patch("tf_lock_checker.infrastructure.backends.dynamodb_backend.boto3")
    def test_scan_failure_exits_before_any_unlock_prompt(self, mock_boto3, capsys):
        """Test that a transport error during scan is fatal."""
        client = Mock()
        client.get_paginator.return_value.paginate.side_effect = ReadTimeoutError(
            endpoint_url="https://dynamodb.us-east-1.amazonaws.com"
        )
        mock_boto3.client.return_value = client
        prompter = ScriptedPrompter(["aws", "us-east-1", "locks"])

        result = run_unlock(prompter, defaults={})

        assert result == 1
        assert not any("unlock" in question for question in prompter.questions)
        client.delete_item.assert_not_called()
        assert "Failed to scan DynamoDB table locks" in capsys.readouterr().err

    @patch("tf_lock_checker.infrastructure.backends.dynamodb_backend.boto3")
    def test_unreachable_endpoint_is_connection_failure(self, mock_boto3, capsys):
        """Test that an unreachable endpoint ends the run as a connection error."""
        client = Mock()
        client.get_paginator.return_value.paginate.side_effect = EndpointConnectionError(
            endpoint_url="https://dynamodb.us-east-1.amazonaws.com"
        )
        mock_boto3.client.return_value = client
        prompter = ScriptedPrompter(["aws", "us-east-1", "locks"])

        result = run_unlock(prompter, defaults={})

        assert result == 1
        assert len(prompter.questions) == 3
        assert "Failed to connect to AWS" in capsys.readouterr().err

    @patch("tf_lock_checker.infrastructure.backends.dynamodb_backend.boto3")
    def test_no_locks_exits_zero(self, mock_boto3, capsys):
        """Test that an empty table is a normal completion."""
        client = Mock()
        client.get_paginator.return_value.paginate.return_value = [{"Items": []}]
        mock_boto3.client.return_value = client

        result = run_unlock(ScriptedPrompter(["aws", "us-east-1", "locks"]), defaults={})

        assert result == 0
        assert "No locks found in DynamoDB table." in capsys.readouterr().out

    @patch("tf_lock_checker.cli._execute_unlock_session")
    def test_keyboard_interrupt(self, mock_execute):
        """Test KeyboardInterrupt handling."""
        mock_execute.side_effect = KeyboardInterrupt()

        assert run_unlock(ScriptedPrompter(), defaults={}) == 130

    @patch("tf_lock_checker.cli.load_prompt_defaults")
    @patch("tf_lock_checker.cli._execute_unlock_session")
    def test_defaults_loaded_from_environment(self, mock_execute, mock_defaults):
        """Test that environment defaults are used when none are passed."""
        mock_execute.return_value = 0
        mock_defaults.return_value = {"region_name": "us-east-1"}
        prompter = ScriptedPrompter()

        run_unlock(prompter)

        mock_execute.assert_called_once_with(prompter, {"region_name": "us-east-1"})


class TestMain:
    """Tests for main and argument parsing."""

    def test_version_flag(self, capsys):
        """Test --version prints and exits."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "terraform-lock-checker" in capsys.readouterr().out

    @patch("tf_lock_checker.cli.run_unlock")
    @patch("tf_lock_checker.cli.configure_logging")
    def test_main_uses_log_level_override(self, mock_configure, mock_run):
        """Test that --log-level reaches logging configuration."""
        mock_run.return_value = 0

        assert main(["--log-level", "debug"]) == 0
        mock_configure.assert_called_once_with("DEBUG")
