# src/taskboard/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskboard.log"

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Libraries that log every HTTP request at INFO.
_CHATTY_LIBRARIES = ("httpx", "httpcore")


def _is_own_logger(name: str) -> bool:
    return name == "taskboard" or name.startswith("taskboard.")


class _ConsoleNoiseFilter(logging.Filter):
    """
    The console shares the terminal with the board and the prompt, so only
    taskboard's own records pass at the configured level. Everything else
    (httpx, asyncio, captured warnings) reaches the console only at ERROR+;
    the log file still receives all of it.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_own_logger(record.name):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskboard",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route logs to stderr (filtered, console_level) and to <log_dir>/taskboard.log
    (unfiltered, file_level). Remote failures from the store end up in both.

    Existing root handlers are replaced, so repeated calls do not duplicate
    output. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)

    for name in _CHATTY_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_file
