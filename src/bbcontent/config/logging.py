# topmark:header:start
#
#   project      : BBContent
#   file         : logging.py
#   file_relpath : src/bbcontent/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for BBContent: a TRACE level, a project logger class and chalk colors.

Rule tracing is logged at TRACE, below DEBUG, so it stays silent unless asked
for through `BBCONTENT_LOG_LEVEL`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from bbcontent.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class BBContentLogger(logging.Logger):
    """Logger with a `trace()` method for the TRACE level."""

    def trace(self, msg: object, *args: object, extra: Mapping[str, object] | None = None) -> None:
        """Log ``msg % args`` at TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(BBContentLogger)

# Highest threshold first; records below TRACE fall through to the last style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by its severity."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by BBCONTENT_LOG_LEVEL, or None if unset or unknown.

    Accepts registered level names in any case (``trace``, ``WARN``...) and
    plain numbers (``15``).
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level: int | str = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Install a single chalk-colored stdout handler on the root logger.

    Args:
        level (int | None): Log level; falls back to the environment, then CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(stream)
    root_logger.propagate = False


def get_logger(name: str) -> BBContentLogger:
    """Return the `BBContentLogger` registered under ``name``."""
    return cast("BBContentLogger", logging.getLogger(name))
