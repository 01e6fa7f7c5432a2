"""Process-wide logging setup for the viewer and tools."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGER_CONFIGURED = False


def setup_logging(level: int = logging.INFO, log_dir: Optional[str | os.PathLike] = None) -> None:
    """Configure console logging once, plus a file log when ``log_dir`` is given.

    A file handler that cannot be opened is reported and skipped; console
    logging stays active.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    root = logging.getLogger()
    root.setLevel(level)
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    if log_dir is not None:
        try:
            directory = Path(log_dir)
            directory.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(directory / "viewer.log", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(fmt)
            root.addHandler(file_handler)
        except OSError as exc:
            logging.getLogger(__name__).warning("Could not open log file in %s: %s", log_dir, exc)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["setup_logging", "get_logger", "LOG_FORMAT"]
