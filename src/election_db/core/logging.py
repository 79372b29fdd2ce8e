"""Loguru logging configuration.

Human-readable progress output on stderr, plus an optional rotating log file
when a ``log_dir`` is provided.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Configure Loguru sinks, replacing any existing ones.

    Args:
        log_level: Minimum log level to emit.
        log_dir: Optional directory for log files.  When set, a file sink
            named ``election-db.log`` is added (rotated every 24 hours,
            retained 7 days).
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper(), format=_LOG_FORMAT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "election-db.log",
            level=log_level.upper(),
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )
