import logging
import sys
from pathlib import Path

from . import config


class _ConsoleNoiseFilter(logging.Filter):
    """Keep todo_app logs on the console; other libraries only at WARNING+."""

    def filter(self, record):
        if record.name.startswith("todo_app"):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(log_dir=config.LOG_DIR, console_level=logging.INFO, file_level=logging.DEBUG):
    """Configure the root logger.

    Console output goes to stderr. When ``log_dir`` is set, everything at
    ``file_level`` and above is also written to a log file there.
    Call once, before the first log line.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_dir / config.LOG_FILE_NAME), encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    logging.captureWarnings(True)
