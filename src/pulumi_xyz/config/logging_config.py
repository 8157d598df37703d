"""Logging setup for the pulumi-xyz command line tools.

The SDK modules only ask for named loggers. Handlers, format and level are
installed by :func:`configure_logging`, which entry points such as the
``pulumi-sdkgen-xyz`` CLI call explicitly. A Pulumi program importing
``pulumi_xyz`` keeps whatever logging setup it already has.
"""

import logging
import os
import sys
from typing import Optional

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
COLOR_FORMAT = "\x1b[90m%(asctime)s\x1b[0m | %(levelname)s | \x1b[36m%(name)s\x1b[0m | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers of the HTTP stack, and the level they are held at
QUIET_LOGGERS = {"httpx": logging.WARNING, "httpcore": logging.INFO}

LEVEL_COLORS = {
    logging.DEBUG: "\x1b[37m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[41m",
}


def use_color(stream=None) -> bool:
    """Whether ANSI colours should be written to ``stream``."""
    stream = stream if stream is not None else sys.stderr
    if os.getenv("NO_COLOR") is not None:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class XyzFormatter(logging.Formatter):
    """Formatter that can paint the level name of each record."""

    def __init__(self, fmt: str, datefmt: str, color: bool = False):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.color = color

    def formatMessage(self, record: logging.LogRecord) -> str:
        prefix = LEVEL_COLORS.get(record.levelno, "") if self.color else ""
        if not prefix:
            return super().formatMessage(record)
        plain = record.levelname
        record.levelname = f"{prefix}{plain}\x1b[0m"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = plain


def resolve_level(level: Optional[str | int] = None) -> int:
    """Turn a level name, number or ``None`` (environment) into a number."""
    if level is None:
        from pulumi_xyz.config.environment import Environment

        level = Environment.get_log_level()
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level!r}")
    return resolved


def configure_logging(
    level: Optional[str | int] = None,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    stream=None,
) -> int:
    """Install a stream handler on the root logger and set its level.

    Calling it again replaces the handler installed by the previous call
    rather than stacking another one. Handlers owned by someone else are
    left alone.

    Environment overrides:
    - `PULUMI_XYZ_LOG_LEVEL` (or a truthy `DEBUG`)
    - `PULUMI_XYZ_LOG_FORMAT`
    - `PULUMI_XYZ_LOG_DATEFMT`
    """
    numeric = resolve_level(level)
    stream = stream if stream is not None else sys.stderr
    color = use_color(stream)
    if fmt is None:
        fmt = os.getenv("PULUMI_XYZ_LOG_FORMAT") or (COLOR_FORMAT if color else PLAIN_FORMAT)
    if datefmt is None:
        datefmt = os.getenv("PULUMI_XYZ_LOG_DATEFMT") or DATE_FORMAT

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_pulumi_xyz", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler._pulumi_xyz = True
    handler.setFormatter(XyzFormatter(fmt, datefmt, color=color))
    root.addHandler(handler)
    root.setLevel(numeric)

    for name, quiet in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet)
    return numeric


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` without touching the logging setup."""
    return logging.getLogger(name)
