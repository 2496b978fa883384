"""
.. Decoding

Turns image files and URLs into indexed-color frames.
"""

from __future__ import annotations

__all__ = (
    "Frame",
    "frame_from_image",
    "frames_from_image",
    "load_frames",
    "open_image",
)

import io
import logging as _logging
import os
from dataclasses import dataclass
from typing import List, Tuple, Union
from urllib.parse import urlparse

import requests
from PIL import Image, ImageSequence, UnidentifiedImageError

from ._utils import arg_type_error, arg_value_error_msg
from .color import Color, _Color
from .exceptions import URLNotFoundError
from .geometry import Rect
from .palette import PALETTE_SIZE

# Seconds to wait for the server, per request
URL_TIMEOUT = 30.0


@dataclass(frozen=True)
class Frame:
    """An indexed-color raster frame.

    Args:
        rect: The region of the image covered by the frame.
        stride: Distance, in bytes, between the starts of consecutive rows of
          *pixels*.
        pixels: One palette index per pixel, row after row.
        palette: The frame's local palette.

    Raises:
        ValueError: *stride* is less than the frame's width or *pixels* is too
          short for the frame's rows.
    """

    rect: Rect
    stride: int
    pixels: bytes
    palette: Tuple[Color, ...]

    def __post_init__(self) -> None:
        if self.stride < self.rect.width:
            raise arg_value_error_msg(
                "Stride is less than the frame width", self.stride
            )
        # The last row needs only *width* bytes
        if self.rect.height and len(self.pixels) < (
            self.stride * (self.rect.height - 1) + self.rect.width
        ):
            raise arg_value_error_msg(
                "Pixel buffer is too short for the frame", len(self.pixels)
            )


def frame_from_image(img: Image.Image) -> Frame:
    """Converts the current frame of a PIL image.

    | ``P`` mode images keep their own palette; the ``transparency`` info, if any,
      sets the alpha of the affected palette entries.
    | Images of any other mode are converted to RGBA and quantized to at most
      256 colors.
    """
    if img.mode == "P":
        img.load()
        transparency = img.info.get("transparency")
    else:
        img = img.convert("RGBA").quantize(PALETTE_SIZE, Image.Quantize.FASTOCTREE)
        transparency = None

    mode = img.palette.mode
    data = img.getpalette(None) or []
    step = len(mode)
    if mode == "RGBA":
        palette = [_Color(*data[i : i + 4]) for i in range(0, len(data), step)]
    else:
        palette = [_Color(*data[i : i + 3]) for i in range(0, len(data), step)]

    if isinstance(transparency, int):
        if transparency < len(palette):
            palette[transparency] = palette[transparency]._replace(a=0)
    elif isinstance(transparency, bytes):  # per-entry alpha e.g PNG tRNS
        for index, alpha in enumerate(transparency[: len(palette)]):
            palette[index] = palette[index]._replace(a=alpha)

    width, height = img.size
    return Frame(Rect(0, 0, width, height), width, img.tobytes(), tuple(palette))


def frames_from_image(img: Image.Image) -> List[Frame]:
    """Converts every frame of a PIL image, in order.

    Frames after the first are those resolved by PIL i.e with the disposal of
    previous frames already applied.
    """
    frames = [frame_from_image(frame) for frame in ImageSequence.Iterator(img)]
    img.seek(0)

    return frames


def load_frames(source: Union[str, os.PathLike]) -> List[Frame]:
    """Decodes all frames of an image file or URL.

    See :py:func:`open_image` for the exceptions raised.
    """
    with open_image(source) as img:
        frames = frames_from_image(img)
    _logger.info(f"Decoded {len(frames)} frame(s) from {source!r}")

    return frames


def open_image(source: Union[str, os.PathLike]) -> Image.Image:
    """Opens an image file or URL.

    Args:
        source: Relative/Absolute path to an image file, or an ``http://`` or
          ``https://`` URL of one.

    Returns:
        The opened image.

    Raises:
        TypeError: *source* is of an inappropriate type.
        ValueError: The URL is invalid.
        FileNotFoundError: The given path does not exist.
        term_gif.exceptions.URLNotFoundError: The URL does not exist.
        PIL.UnidentifiedImageError: Propagated from from :py:func:`PIL.Image.open`.

    Also propagates connection-related exceptions from :py:func:`requests.get`.
    """
    if not isinstance(source, (str, os.PathLike)):
        raise arg_type_error("source", source)

    if isinstance(source, str) and source.startswith(("http://", "https://")):
        return _open_url(source)

    filepath = os.fsdecode(source)
    try:
        return Image.open(filepath)
    except FileNotFoundError:
        raise FileNotFoundError(f"No such file: {filepath!r}") from None
    except UnidentifiedImageError as e:
        e.args = (f"Could not identify {filepath!r} as an image",)
        raise


def _open_url(url: str) -> Image.Image:
    if not all(urlparse(url)[:3]):
        raise arg_value_error_msg("Invalid URL", url)

    _logger.info(f"Getting image from {url!r}")
    # Propagates connection-related errors.
    response = requests.get(url, timeout=URL_TIMEOUT)
    if response.status_code == 404:
        raise URLNotFoundError(f"URL {url!r} does not exist.")
    response.raise_for_status()

    try:
        return Image.open(io.BytesIO(response.content))
    except UnidentifiedImageError as e:
        e.args = (f"The URL {url!r} doesn't link to an identifiable image",)
        raise


_logger = _logging.getLogger(__name__)
