"""
.. Utilities
"""

from __future__ import annotations

import os
from typing import Any


def arg_type_error(arg: str, value: Any, got_extra: str = "") -> TypeError:
    return TypeError(
        f"Invalid type for {arg!r} (got: {type(value).__qualname__}; {got_extra})"
        if got_extra
        else f"Invalid type for {arg!r} (got: {type(value).__qualname__})"
    )


def arg_value_error_msg(msg: str, value: Any, got_extra: str = "") -> ValueError:
    return ValueError(
        f"{msg} (got: {value!r}; {got_extra})"
        if got_extra
        else f"{msg} (got: {value!r})"
    )


def arg_value_error_range(arg: str, value: Any, got_extra: str = "") -> ValueError:
    return ValueError(
        f"{arg!r} is out of range (got: {value!r}; {got_extra})"
        if got_extra
        else f"{arg!r} is out of range (got: {value!r})"
    )


def supports_256_colors() -> bool:
    """Checks the environment for 256-color (or better) support in the active
    terminal.
    """
    COLORTERM = os.environ.get("COLORTERM") or ""
    TERM = os.environ.get("TERM") or ""

    return "truecolor" in COLORTERM or "24bit" in COLORTERM or "256color" in TERM
