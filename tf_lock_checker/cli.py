"""Command line entry for the lock checker."""

import argparse
import logging
import sys
from typing import List, Optional

from tf_lock_checker import __version__
from tf_lock_checker.application.backend_selector import BackendSelector
from tf_lock_checker.application.unlock_session_use_case import UnlockSessionUseCase
from tf_lock_checker.domain.exceptions import LockCheckerError
from tf_lock_checker.domain.interfaces import Prompter
from tf_lock_checker.infrastructure.config import get_log_level, load_prompt_defaults
from tf_lock_checker.infrastructure.prompts import ConsolePrompter

logger = logging.getLogger(__name__)

NOISY_LOGGERS = ("urllib3", "botocore", "boto3", "s3transfer", "azure")


def configure_logging(level: str) -> None:
    """Configure root logging on stderr and quiet SDK loggers."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _execute_unlock_session(prompter: Prompter, defaults: dict) -> int:
    """Select a backend, list its locks and run the unlock pass."""
    backend = BackendSelector(prompter, defaults).select()
    summary = UnlockSessionUseCase(backend, prompter).execute()
    logger.info(
        "Session finished: %d deleted, %d declined, %d failed",
        summary.deleted,
        summary.declined,
        summary.failed,
    )
    return 0


def _handle_error(error: BaseException) -> int:
    """Report a fatal error and return the process exit code."""
    if isinstance(error, KeyboardInterrupt):
        print("\nInterrupted by user.", file=sys.stderr)
        return 130

    if isinstance(error, LockCheckerError):
        logger.debug("Fatal error", exc_info=error)
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if isinstance(error, ValueError):
        print(f"Invalid input: {error}", file=sys.stderr)
        return 1

    logger.error("Unexpected error: %s", error, exc_info=error)
    print(f"Unexpected error: {error}", file=sys.stderr)
    return 1


def run_unlock(prompter: Optional[Prompter] = None, defaults: Optional[dict] = None) -> int:
    """Run one interactive unlock session.

    Args:
        prompter: Source of operator answers (defaults to stdin).
        defaults: Prompt defaults (defaults to values read from the environment).

    Returns:
        Process exit code: 0 on a completed session, non-zero on a fatal error.
    """
    prompter = prompter or ConsolePrompter()
    defaults = load_prompt_defaults() if defaults is None else defaults

    try:
        return _execute_unlock_session(prompter, defaults)
    except (Exception, KeyboardInterrupt) as e:
        return _handle_error(e)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terraform-lock-checker",
        description="Inspect and remove Terraform/Terragrunt state locks "
        "stored in DynamoDB or Azure Blob Storage.",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Overrides LOG_LEVEL.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_log_level(args.log_level))
    return run_unlock()
