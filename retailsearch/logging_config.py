# Logging configuration - rotating log file plus optional stderr console
# Only the CLI configures logging; library modules just emit records

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "retailsearch.log"
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def default_log_file() -> Path:
    """logs/retailsearch.log under the current working directory."""
    return Path.cwd() / LOG_DIR_NAME / LOG_FILE_NAME


def parse_level(level: Union[int, str]) -> int:
    """Accept 'debug', 'INFO', 20, ... and return a logging level."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    log_path: Optional[Path] = None,
    max_bytes: int = LOG_MAX_BYTES,
    backup_count: int = LOG_BACKUP_COUNT,
    console: bool = True,
    level: Union[int, str] = logging.INFO,
) -> Path:
    """
    Send every record to a rotating log file and, if ``console`` is set,
    to stderr. Returns the log file path in use.

    Without ``log_path`` the file goes to ``default_log_file()``, so an
    installed package never writes next to its own sources.
    """
    log_path = Path(log_path) if log_path else default_log_file()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(parse_level(level))
    # Calling twice must not duplicate output
    for h in list(root.handlers):
        root.removeHandler(h)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    return log_path
