"""Logging configuration for timeboard.

Logs to both:
- ~/.config/timeboard/timeboard.log (persistent, for debugging — 5 MB cap, 2 backups)
- stderr (only warnings and above, to not interfere with TUI)

Calling setup_logging again (the config subcommand, repeated CLI invocations
in one process) reuses the installed handlers and only updates their levels.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path.home() / ".config" / "timeboard"
LOG_FILE = LOG_DIR / "timeboard.log"

_LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_LOG_BACKUP_COUNT = 2

FILE_HANDLER_NAME = "timeboard-file"
STREAM_HANDLER_NAME = "timeboard-stderr"


def _file_handler(log_file: Path) -> RotatingFileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    fh = RotatingFileHandler(
        str(log_file),
        maxBytes=_LOG_MAX_BYTES,
        backupCount=_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    fh.set_name(FILE_HANDLER_NAME)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    return fh


def _stream_handler() -> logging.StreamHandler:
    sh = logging.StreamHandler()
    sh.set_name(STREAM_HANDLER_NAME)
    sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    return sh


def setup_logging(debug: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Configure the ``timeboard`` logger and return it."""
    root = logging.getLogger("timeboard")
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    installed = {h.get_name(): h for h in root.handlers}
    if FILE_HANDLER_NAME not in installed:
        root.addHandler(_file_handler(log_file or LOG_FILE))

    sh = installed.get(STREAM_HANDLER_NAME)
    if sh is None:
        sh = _stream_handler()
        root.addHandler(sh)
    sh.setLevel(logging.DEBUG if debug else logging.WARNING)
    return root
