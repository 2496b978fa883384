"""term-gif's Configuration"""

from __future__ import annotations

import json
import logging as _logging
import os
from dataclasses import dataclass, field
from os import path
from pathlib import Path
from typing import Any, Callable, Optional, Tuple, Union

from . import logging
from .colormap import MAPPERS
from .driver import DEFAULT_TICK_INTERVAL


class ConfigOptions(dict):
    """Config options store

    * Subscription with an option name returns the corresponding :py:class:`Option`
      instance.
    * Attribute reference with a variable name ('s/ /_/g') returns the option's current
      value.
    * Attribute reference with a "private" name ('s/ /_/g' and preceded by '_') returns
      the option's default value.
    """

    def _attr_to_option(self, attr: str) -> Tuple[Option, str]:
        default = attr.startswith("_")
        name = attr.replace("_", " ")
        if default:
            name = name[1:]
        try:
            return self[name], "default" if default else "value"
        except KeyError:
            raise AttributeError(f"Ain't no such config option as {name!r}") from None

    def __getattr__(self, attr: str):
        return getattr(*self._attr_to_option(attr))

    def __setattr__(self, attr: str, value: Any):
        setattr(*self._attr_to_option(attr), value)


@dataclass
class Option:
    """A config option."""

    value: Any = field(init=False)
    default: Any
    is_valid: Callable[[Any], bool]
    error_msg: str

    def __post_init__(self):
        self.value = self.default

    def reset(self) -> None:
        """Restores the default value."""
        self.value = self.default


def is_writable(path: Union[str, os.PathLike, Path]) -> bool:
    """Checks if a file path is writable or creatable.

    Returns:
      - ``True``, if:
        - the file exists and is writable
        - the file doesn't exists but can be created
      - ``False``, if:
        - the path points to a directory
        - the file exists but is unwritable
        - the file doesn't exists and cannot be created
    """
    path = Path(path).expanduser()
    writable = False

    try:
        if path.exists():
            if path.is_file() and os.access(path, os.W_OK):
                writable = True
        else:
            for path in path.parents:
                if path.exists():
                    if path.is_dir() and os.access(path, os.W_OK):
                        writable = True
                    break
    except OSError:  # Fails to stat some directories
        pass

    return writable


def init_config(config_file: Optional[str] = None) -> bool:
    """Initializes user configuration.

    Loads the XDG config files, then *config_file*, if given.

    Returns:
        ``False`` if *config_file* was given but could not be loaded.
        Otherwise, ``True``.
    """
    load_xdg_config()

    return load_config(config_file) if config_file else True


def load_config(config_file: str) -> bool:
    """Loads a user config file.

    Returns:
        ``True`` if the file was read and parsed. Otherwise, ``False``.

    Options with invalid values keep their former values.
    """
    try:
        with open(config_file) as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise TypeError("The top-level value must be an object")
    except Exception as e:
        _report(
            f"Failed to load {config_file!r} ({type(e).__name__}: {e}).",
            _logging.ERROR,
        )
        return False

    for name, value in config.items():
        try:
            option = config_options[name]
        except KeyError:
            _report(f"Unknown option {name!r} (in {config_file!r}).", _logging.WARNING)
        else:
            if option.is_valid(value):
                option.value = value
            else:
                value_repr = "null" if value is None else repr(value)
                value_type_name = "null" if value is None else type(value).__name__
                _report(
                    f"Invalid type/value for {name!r}; {option.error_msg} "
                    f"(got: {value_repr} of type {value_type_name!r}).",
                    _logging.ERROR,
                )
                _report(f"Using former value: {option.value!r}.", _logging.INFO)

    return True


def load_xdg_config() -> None:
    """Loads user config files according to the XDG Base Directories spec."""
    for config_dir in reversed(os.environ.get("XDG_CONFIG_DIRS", "/etc").split(":")):
        config_file = path.join(config_dir, "term_gif", "config.json")
        if (
            # The XDG Base Dirs spec states that relative paths should be ignored
            path.abspath(config_dir) == config_dir
            and path.isfile(config_file)
        ):
            load_config(config_file)

    if path.isfile(xdg_config_file):
        load_config(xdg_config_file)


def _report(msg: str, level: int) -> None:
    # Config is loaded before logging is initialized
    logging.log(
        msg,
        _logger,
        level,
        file=logging.VERBOSE is not None,
        verbose=level == _logging.INFO,
    )


_logger = _logging.getLogger(__name__)

xdg_config_file = path.join(
    os.environ.get("XDG_CONFIG_HOME") or path.join(path.expanduser("~"), ".config"),
    "term_gif",
    "config.json",
)

config_options = ConfigOptions(
    {
        "color map": Option(
            "rgb",
            lambda x: x in MAPPERS,
            f"must be one of {', '.join(map(repr, MAPPERS))}",
        ),
        "force": Option(
            False,
            lambda x: isinstance(x, bool),
            "must be a boolean",
        ),
        "hires": Option(
            True,
            lambda x: isinstance(x, bool),
            "must be a boolean",
        ),
        "log file": Option(
            path.join("~", ".term_gif", "term_gif.log"),
            lambda x: isinstance(x, str) and is_writable(x),
            "must be a string containing a writable/creatable file path",
        ),
        "quit keys": Option(
            ["q"],
            lambda x: (
                isinstance(x, list)
                and bool(x)
                and all(isinstance(key, str) and key for key in x)
            ),
            "must be a non-empty list of non-empty strings",
        ),
        "tick interval": Option(
            DEFAULT_TICK_INTERVAL,
            lambda x: (
                isinstance(x, (int, float)) and not isinstance(x, bool) and x > 0
            ),
            "must be a number greater than zero",
        ),
    }
)
