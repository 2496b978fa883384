"""term-gif's CLI Implementation"""

from __future__ import annotations

import logging as _logging
from typing import List, Optional

import PIL
import requests

from . import config, logging
from .animation import Animation
from .colormap import get_mapper
from .config import config_options, is_writable
from .decode import Frame, load_frames
from .driver import Driver
from .exceptions import RenderError, SetupError, URLNotFoundError
from .exit_codes import (
    CONFIG_ERROR,
    FAILURE,
    INVALID_ARG,
    NO_VALID_SOURCE,
    SETUP_ERROR,
    SUCCESS,
)
from .logging import init_log, log, log_exception
from .terminal import Terminal


def get_frames(source: str) -> Optional[List[Frame]]:
    """Loads the frames of *source*, reporting any failure.

    Returns:
        The frames or ``None``, if *source* could not be loaded.
    """
    log(f"Loading {source!r}", logger, verbose=True)
    try:
        frames = load_frames(source)
    # Also handles `ConnectionTimeout`
    except requests.exceptions.ConnectionError:
        log(f"Unable to get {source!r}", logger, _logging.ERROR)
    except requests.exceptions.HTTPError as e:
        log(f"Unable to get {source!r}: {e}", logger, _logging.ERROR)
    except URLNotFoundError as e:
        log(str(e), logger, _logging.ERROR)
    except PIL.UnidentifiedImageError as e:
        log(str(e), logger, _logging.ERROR)
    except ValueError as e:
        log(str(e), logger, _logging.ERROR)
    except OSError as e:
        log(f"Could not read {source!r}: {e}", logger, _logging.ERROR)
    except Exception:
        log_exception(f"Loading {source!r} failed", logger, direct=True)
    else:
        log(f"Done loading {source!r}", logger, verbose=True)
        return frames


def main(argv: Optional[List[str]] = None) -> int:
    """CLI execution sub-entry-point"""
    from .parsers import LOG_LEVELS, parser

    global args

    args = parser.parse_args(argv)

    if args.config and not config.load_config(args.config):
        return CONFIG_ERROR

    for name in ("color_map", "force", "hires", "log_file", "quit_keys"):
        if getattr(args, name) is None:
            setattr(args, name, getattr(config_options, name))
    if args.tick_interval is None:
        args.tick_interval = config_options.tick_interval

    if not is_writable(args.log_file):
        log(f"Log file {args.log_file!r} is not writable", logger, _logging.CRITICAL)
        return INVALID_ARG

    init_log(
        args.log_file,
        LOG_LEVELS[args.log_level],
        args.debug,
        args.quiet,
        args.verbose,
    )

    if args.tick_interval <= 0.0:
        log("Tick interval must be greater than zero", logger, _logging.CRITICAL)
        return INVALID_ARG
    if not all(args.quit_keys):
        log("Quit keys must not be empty", logger, _logging.CRITICAL)
        return INVALID_ARG

    frames = get_frames(args.source)
    if frames is None:
        return NO_VALID_SOURCE

    animation = Animation(
        frames,
        get_mapper(args.color_map),
        hires=args.hires,
        quit_keys=args.quit_keys,
    )
    driver = Driver(animation, Terminal(force=args.force), args.tick_interval)

    try:
        driver.run()
    except SetupError as e:
        log(str(e), logger, _logging.CRITICAL)
        return SETUP_ERROR
    except RenderError as e:
        log(str(e), logger, _logging.CRITICAL)
        return FAILURE

    log(f"Played {animation.ticks} frame(s)", logger, verbose=True)
    return SUCCESS


logger = _logging.getLogger(__name__)

# Set from within `main()`
args = None  #: Optional[argparse.Namespace]
