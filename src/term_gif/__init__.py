"""
term-gif

Play animated images in the terminal using indexed colors

Copyright (c) 2026, The term-gif authors
"""

from __future__ import annotations

__all__ = (
    "Animation",
    "Color",
    "Driver",
    "GrayscaleMapper",
    "RGBCubeMapper",
    "Terminal",
    "get_mapper",
    "load_frames",
)

from .animation import Animation
from .color import Color
from .colormap import GrayscaleMapper, RGBCubeMapper, get_mapper
from .decode import load_frames
from .driver import Driver
from .terminal import Terminal

version_info = (0, 1, 0)

# Follows https://semver.org/spec/v2.0.0.html
__version__ = ".".join(map(str, version_info[:3]))
if version_info[3:]:
    __version__ += "-" + ".".join(map(str, version_info[3:]))
