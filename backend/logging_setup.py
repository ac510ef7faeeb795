# backend/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logging(level: str | int = logging.INFO, log_file: str | Path | None = None) -> None:
    """
    Configure logging with:
    - Console handler on stderr
    - Optional file handler (same format) when log_file is given

    Call this ONCE, before the app starts serving.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    # werkzeug logs every request line itself; we log requests ourselves.
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
