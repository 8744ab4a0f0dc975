"""
Logging configuration for the gateway.

``setup_logging`` configures the root logger from ``Settings``: a
console handler plus an optional file handler (``LOG_FILE``), with the
level taken from ``LOG_LEVEL``.  Root handlers are installed once even
if ``create_app`` is called repeatedly (as the test suite does).

The ledger client issues one httpx request per transaction page, and
httpx logs every request at INFO.  Unless the gateway runs at DEBUG,
the ``httpx`` and ``httpcore`` loggers are held at WARNING so a long
``/dag-data`` walk does not flood the log.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(settings: Settings) -> None:
    """Configure root and transport loggers from ``settings``."""
    numeric_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    transport_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
