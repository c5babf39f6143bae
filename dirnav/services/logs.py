from __future__ import annotations

import logging
from pathlib import Path

from result import Err, Ok, Result

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_file: str, level: str = "INFO") -> Result[Path, str]:
    """Send the ``dirnav`` loggers to *log_file*, creating its directory."""
    path = Path(log_file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path)
    except OSError as exc:
        return Err(f"Cannot open log file {path}: {exc}")

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("dirnav")
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return Ok(path)
