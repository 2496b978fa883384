"""Event logging"""

from __future__ import annotations

import logging
import sys
import warnings
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from os import makedirs, path
from typing import Optional, Set


def init_log(
    logfile: str,
    level: int,
    debug: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Initialize application event logging"""
    global DEBUG, QUIET, VERBOSE

    logfile = path.expanduser(logfile)
    makedirs(path.dirname(logfile) or ".", exist_ok=True)
    handler = RotatingFileHandler(
        logfile,
        maxBytes=2**20,  # 1 MiB
        backupCount=1,
    )
    handler.addFilter(filter_)

    QUIET, VERBOSE = quiet, verbose or debug
    DEBUG = debug = debug or level == logging.DEBUG
    if debug:
        level = logging.DEBUG
    elif VERBOSE:
        level = logging.INFO

    FORMAT = (
        "({process}) ({asctime}) "
        + "{threadName}: " * debug
        + "[{levelname}] {name}: "
        + "{funcName}: " * debug
        + "{message}"
    )
    logging.basicConfig(
        handlers=(handler,),
        format=FORMAT,
        style="{",
        level=level,
    )

    if debug:
        _logger.setLevel(logging.DEBUG)
    _logger.info("Starting a new session")
    _logger.info(f"Logging level set to {logging.getLevelName(level)}")


def log(
    msg: str,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    *,
    direct: bool = True,
    file: bool = True,
    verbose: bool = False,
) -> None:
    """Report events to various destinations"""
    if verbose:
        if VERBOSE:
            logger.log(level, msg, **_kwargs)
            notify(msg, level)
    else:
        if file:
            logger.log(level, msg, **_kwargs)
        if direct:
            notify(msg, level)


def log_exception(
    msg: str, logger: logging.Logger, *, direct: bool = False, fatal: bool = False
) -> None:
    """Report an error with the exception reponsible

    NOTE: Should be called from within an exception handler
    i.e from (also possibly in a nested context) within an except or finally clause.
    """
    if DEBUG:
        logger.exception(f"{msg} due to:", **_kwargs_exc)
    elif VERBOSE:
        exc_type, exc, _ = sys.exc_info()
        logger.error(
            f"{msg} due to: ({exc_type.__module__}.{exc_type.__qualname__}) {exc}",
            **_kwargs,
        )
    else:
        logger.error(msg, **_kwargs)

    if VERBOSE and direct:
        notify(msg, logging.CRITICAL if fatal else logging.ERROR)


def notify(msg: str, level: int = logging.INFO) -> None:
    """Reports a message on the console (STDERR), unless in quiet mode.

    Messages below the WARNING level are only shown in verbose mode.
    """
    if QUIET or level < logging.WARNING and not VERBOSE:
        return

    if level >= logging.WARNING:
        msg = f"{logging.getLevelName(level)}: {msg}"
    print(msg, file=sys.stderr, flush=True)


# Not annotated because it's not directly used.
def _log_warning(msg, catg, fname, lineno, f=None, line=None):
    """Redirects warnings to the logging system.

    Intended to replace `warnings.showwarning()`.
    """
    _logger.warning(warnings.formatwarning(msg, catg, fname, lineno, line), **_kwargs)


# See "Filters" section in `logging` standard library documentation.
@dataclass
class Filter:
    disallowed: Set[str]

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name.partition(".")[0] not in self.disallowed


filter_ = Filter({"PIL", "urllib3", "urwid"})

# Writing to STDERR messes up output while the animation is playing
warnings.showwarning = _log_warning

# Can't use "term_gif", since the logger's level is changed.
# Otherwise, it would affect children of "term_gif".
_logger = logging.getLogger("term-gif")

# > log > logger.log > _log
_kwargs = {"stacklevel": 2}
# > exception-handler > log_exception > logger.exception > _log
_kwargs_exc = {"stacklevel": 3}

# Set from within `init_log()`
DEBUG: Optional[bool] = None
QUIET: Optional[bool] = None
VERBOSE: Optional[bool] = None
