"""
Application-wide settings for Apiary.

Defaults live here as module constants; deployment overrides are read
from environment variables when the application starts.
"""

import os

APP_NAME = "Apiary"
APP_VERSION = "1.0.0"

# Request settings applied when a request does not carry its own
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_FOLLOW_REDIRECTS = True
DEFAULT_MAX_REDIRECTS = 10

# Logging
LOG_LEVEL_ENV = "APIARY_LOG_LEVEL"
LOG_FILE_ENV = "APIARY_LOG_FILE"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_log_level() -> str:
    """Return the configured log level name, upper-cased."""
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def get_log_file() -> str | None:
    """Return the configured log file path, or None when file logging is off."""
    value = os.environ.get(LOG_FILE_ENV, "").strip()
    return value or None
