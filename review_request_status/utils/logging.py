import logging
import sys
from typing import Optional

from review_request_status.constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Level names accepted in the log environment variable, including the
# "warn", "trace" and "off" spellings common to other status-bar plugins.
LOG_LEVELS = {
    'trace': logging.DEBUG,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
    'off': logging.CRITICAL + 10,
}


def parse_log_level(log_level: Optional[str]) -> int:
    """Convert a level name to a logging level, falling back to the default."""
    name = (log_level or DEFAULT_LOG_LEVEL).strip().lower()
    return LOG_LEVELS.get(name, LOG_LEVELS[DEFAULT_LOG_LEVEL])


def setup_logging(log_level: Optional[str] = None) -> None:
    """Setup logging configuration.

    Logs go to stderr because stdout is read by the status bar.
    """
    logging.basicConfig(
        level=parse_log_level(log_level),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
