"""MuleSearch logging utilities.

One package-wide logger with a compact ``mm-dd HH:MM:SS [LVL] message``
layout. Console output goes to stderr so that command results printed on
stdout stay pipeable.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "CRIT",
}

_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib override
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("MuleSearch")


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Install handlers on the MuleSearch logger.

    Args:
        level: Console logging level name (e.g. ``INFO``, ``DEBUG``).
        action: CLI action name; used as sub-directory and file prefix.
        log_to_file: Mirror every record (DEBUG and up) to a file.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file when one was created, otherwise ``None``.
    """
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    log.handlers.clear()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(resolved_level)
    stream_handler.setFormatter(formatter)
    log.addHandler(stream_handler)

    log_path: Path | None = None
    if log_to_file and action:
        action_dir = Path(log_dir or "log") / action
        action_dir.mkdir(parents=True, exist_ok=True)
        log_path = action_dir / f"{action}_{datetime.now().strftime('%m%d%H%M%S')}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    log.setLevel(logging.DEBUG if log_path else resolved_level)
    log.propagate = False
    return log_path
