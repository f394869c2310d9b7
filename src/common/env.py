"""Environment configuration interface for rush.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import (
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_HOST,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PORT,
    LARGE_REPO_THRESHOLD,
)

# Load environment variables from .env file if it exists
load_dotenv()

_FALSE_VALUES = {"0", "false", "no", "off"}


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def output_path() -> Path:
        """Get the path the commit data document is written to.

        Returns:
            Output path, defaults to ./commits-data.json
        """
        return Path(os.getenv("RUSH_OUTPUT_PATH", str(DEFAULT_OUTPUT_PATH)))

    @staticmethod
    def host() -> str:
        """Get the interface the HTTP server binds to.

        Returns:
            Host, defaults to '127.0.0.1'
        """
        return os.getenv("RUSH_HOST", DEFAULT_HOST)

    @staticmethod
    def port() -> int:
        """Get the HTTP server port.

        Returns:
            Port, defaults to 3000
        """
        return int(os.getenv("RUSH_PORT", str(DEFAULT_PORT)))

    @staticmethod
    def large_repo_threshold() -> int:
        """Get the commit count above which name-only mode is used.

        Returns:
            Commit count threshold, defaults to 100000
        """
        return int(os.getenv("RUSH_LARGE_REPO_THRESHOLD", str(LARGE_REPO_THRESHOLD)))

    @staticmethod
    def git_timeout() -> float:
        """Get the timeout for a single git invocation.

        Returns:
            Timeout in seconds, defaults to 300
        """
        return float(os.getenv("RUSH_GIT_TIMEOUT", str(DEFAULT_GIT_TIMEOUT)))

    @staticmethod
    def open_browser() -> bool:
        """Check whether `rush serve` should open a browser.

        Returns:
            False when RUSH_OPEN_BROWSER is 0/false/no/off, otherwise True
        """
        value = os.getenv("RUSH_OPEN_BROWSER", "true")
        return value.strip().lower() not in _FALSE_VALUES


# Singleton instance for convenient access
env = Environment()
