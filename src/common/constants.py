"""Shared constants for rush.

For environment-based configuration (port, output path, etc.), use the env module:
    from common.env import env
    port = env.port()
"""

from pathlib import Path

# Output
DATA_FILE_NAME = "commits-data.json"
DEFAULT_OUTPUT_PATH = Path(".") / DATA_FILE_NAME

# Server
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000

# Repositories with more commits than this are read in name-only mode
LARGE_REPO_THRESHOLD = 100_000

# Seconds to wait for a single git invocation
DEFAULT_GIT_TIMEOUT = 300

# Header format shared by every log invocation: HASH|AUTHOR|EPOCH|SUBJECT
HEADER_SEPARATOR = "|"
LOG_HEADER_FORMAT = HEADER_SEPARATOR.join(["%H", "%an", "%at", "%s"])

# Lines git may emit in name-only output that are not file paths
RESERVED_LINE_PREFIXES: tuple[str, ...] = (
    "commit ",
    "Merge:",
    "Author:",
    "Date:",
)
