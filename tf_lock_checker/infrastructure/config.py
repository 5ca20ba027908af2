"""Environment-derived settings."""

import logging
import os
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_prompt_defaults(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect prompt defaults from environment variables.

    Only variables that are set and non-empty are returned. Keys are the
    connection parameter names the selector asks for.

    Args:
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        Dictionary of parameter name to default value.
    """
    environ = os.environ if environ is None else environ
    sources = {
        "region_name": environ.get("AWS_REGION") or environ.get("AWS_DEFAULT_REGION"),
        "account_name": environ.get("AZURE_STORAGE_ACCOUNT_NAME"),
        "account_key": environ.get("AZURE_STORAGE_ACCOUNT_KEY"),
    }
    return {name: value.strip() for name, value in sources.items() if value and value.strip()}


def get_log_level(
    override: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Resolve the log level from an explicit override or LOG_LEVEL.

    Invalid values fall back to WARNING.
    """
    environ = os.environ if environ is None else environ
    level = (override or environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

    if level not in VALID_LOG_LEVELS:
        logger.warning(
            "Invalid log level '%s', must be one of %s. Defaulting to '%s'",
            level,
            VALID_LOG_LEVELS,
            DEFAULT_LOG_LEVEL,
        )
        level = DEFAULT_LOG_LEVEL

    return level
