"""Structured JSON logging for lin.

Writes JSONL to ``lin.log`` in the config directory with rotation (5MB,
3 backups). ``--verbose`` adds a plain stderr handler on top.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

_LOG_FILENAME = "lin.log"
_setup_lock = threading.Lock()
_MAX_BYTES = 5 * 1024 * 1024  # 5MB
_BACKUP_COUNT = 3

# Attributes copied from ``extra=`` into the JSON line when present.
_EXTRA_FIELDS = ("operation", "operation_type", "duration_ms", "status", "error")


class _JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "msg": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = str(record.exc_info[1])
        return json.dumps(entry, default=str)


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker subclass so verbose setup can find its own handler."""


def setup_logging(log_dir: Path, *, verbose: bool = False) -> logging.Logger:
    """Set up structured JSON logging to ``<log_dir>/lin.log``.

    Safe to call more than once: a handler already pointing at the same
    file is reused, one pointing elsewhere is replaced.
    """
    logger = logging.getLogger("lin")
    log_path = log_dir / _LOG_FILENAME
    target_filename = os.path.abspath(str(log_path))

    with _setup_lock:
        have_file = False
        for h in logger.handlers[:]:
            if not isinstance(h, RotatingFileHandler):
                continue
            if h.baseFilename == target_filename:
                have_file = True
                continue
            logger.removeHandler(h)
            h.close()

        if not have_file:
            try:
                log_dir.mkdir(parents=True, exist_ok=True)
                handler = RotatingFileHandler(
                    str(log_path),
                    maxBytes=_MAX_BYTES,
                    backupCount=_BACKUP_COUNT,
                )
            except OSError as exc:
                # Read-only home or similar: keep working without a log file.
                print(f"Warning: cannot open log file {log_path}: {exc}", file=sys.stderr)
            else:
                handler.setFormatter(_JsonFormatter())
                logger.addHandler(handler)

        # Rebound on every call: sys.stderr may have been swapped since.
        for h in logger.handlers[:]:
            if isinstance(h, _StderrHandler):
                logger.removeHandler(h)
        if verbose:
            stderr_handler = _StderrHandler(sys.stderr)
            stderr_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
            stderr_handler.setLevel(logging.DEBUG)
            logger.addHandler(stderr_handler)

        logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
