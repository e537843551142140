"""Load environment variables for the training API client.

For local dev, loads a .env file based on ENV ("dev" by default).
In staging/prod the variables are injected by the deployment, so no .env file
is loaded.
"""

import logging
import os
from typing import Literal

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

EnvironmentName = Literal["dev", "staging", "prod"]

# Variables that must be set before a client can be built from the environment.
REQUIRED_ENV_VARS = [
    "TRAINING_API_URL",
]

DEFAULT_API_TIMEOUT = 30.0


class MissingEnvironmentError(RuntimeError):
    """Raised when required environment variables are not set."""


def get_current_environment() -> EnvironmentName:
    """Get the current environment (dev, staging, or prod)."""
    env = os.getenv("ENV", "dev")
    if env in ("dev", "staging", "prod"):
        return env  # type: ignore[return-value]
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")


def load_environment() -> EnvironmentName:
    """Load the .env file for local development and return the environment name."""
    env = get_current_environment()
    if env == "dev":
        logger.info("Loading environment variables from .env.dev")
        load_dotenv(".env.dev")
    else:
        logger.info(f"Running in {env} environment (env vars from deployment)")
    return env


def validate_required_env_vars() -> None:
    """Validate that all required environment variables are set.

    Raises:
        MissingEnvironmentError: If any required environment variables are missing.
    """
    missing = [var for var in REQUIRED_ENV_VARS if not os.getenv(var)]
    if missing:
        raise MissingEnvironmentError(
            f"Missing required environment variables: {', '.join(missing)}. "
            "Please set these variables in your .env file or environment."
        )


def api_timeout() -> float:
    """Request timeout in seconds, from TRAINING_API_TIMEOUT."""
    raw = os.getenv("TRAINING_API_TIMEOUT")
    if not raw:
        return DEFAULT_API_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            f"Ignoring invalid TRAINING_API_TIMEOUT={raw!r}, using {DEFAULT_API_TIMEOUT}s"
        )
        return DEFAULT_API_TIMEOUT
