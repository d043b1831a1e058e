from __future__ import annotations

import logging
import sys

_THIRD_PARTY = ("uvicorn", "uvicorn.access", "uvicorn.error", "fastapi", "httpx")


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a single stderr handler.

    Third-party loggers stay at WARNING unless the app runs at DEBUG.
    Call this once, before the server starts.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    root.addHandler(handler)

    third_party_level = logging.DEBUG if numeric <= logging.DEBUG else logging.WARNING
    for name in _THIRD_PARTY:
        logging.getLogger(name).setLevel(third_party_level)
