"""CLI argument parser"""

import argparse
import logging as _logging

from . import __version__
from .colormap import MAPPERS
from .config import config_options

parser = argparse.ArgumentParser(
    prog="term-gif",
    formatter_class=argparse.RawDescriptionHelpFormatter,
    description="Play animated images in a terminal",
    epilog=""" \

'--' should be used to separate a positional argument that begins with an '-' \
from options/flags, to avoid ambiguity.
For example, `$ term-gif [options] -- -image.gif`

Color Maps:
  rgb: Maps colors onto the 6x6x6 color cube of the 256-color palette.
  gray: Maps colors onto the 24-step grayscale ramp of the 256-color palette.

  Both require a terminal with 256-color support. Using a color map on a terminal
  not detected to support 256 colors is not allowed by default. To skip the
  detection, add the '--force' flag.

FOOTNOTES:
  1. The image is cropped to the terminal size; it is never scaled.
  2. In hi-res mode, each character cell holds two vertically-stacked pixels,
     using the lower-half block character.
  3. Supports all image formats supported by `PIL.Image.open()`.
     See https://pillow.readthedocs.io/en/latest/handbook/image-file-formats.html for
     details.
  4. Options without a value on the command line take the value of the
     corresponding config option.
""",
)

parser.add_argument(
    "source",
    help="Path to an image file or an 'http://' or 'https://' URL of one [3]",
)

general = parser.add_argument_group("General Options")
general.add_argument(
    "--version",
    action="version",
    version=__version__,
    help="Show the program version and exit",
)
general.add_argument(
    "--config",
    metavar="FILE",
    help="Load config options from FILE, after the XDG config files",
)

anim_options = parser.add_argument_group("Animation Options [4]")
anim_options.add_argument(
    "-m",
    "--color-map",
    choices=tuple(MAPPERS),
    help=(
        "Color map for palette colors "
        f"(default: {config_options.color_map!r}) (see 'Color Maps' below)"
    ),
)
anim_options.add_argument(
    "--hires",
    action="store_true",
    default=None,
    help=(
        "Render two pixels per character cell "
        f"(default: {config_options.hires}) [1][2]"
    ),
)
anim_options.add_argument(
    "--no-hires",
    action="store_false",
    dest="hires",
    help="Render one pixel per character cell [1]",
)
anim_options.add_argument(
    "-t",
    "--tick-interval",
    type=float,
    metavar="SECONDS",
    help=(
        "Time between frames, in seconds "
        f"(default: {config_options.tick_interval})"
    ),
)
anim_options.add_argument(
    "-q",
    "--quit-key",
    action="append",
    dest="quit_keys",
    metavar="KEY",
    help=(
        "Key that ends the animation; may be given multiple times "
        f"(default: {config_options.quit_keys})"
    ),
)
anim_options.add_argument(
    "-f",
    "--force",
    action="store_true",
    default=None,
    help="Skip the detection of 256-color support in the terminal",
)

log_options = parser.add_argument_group("Logging Options")
log_options.add_argument(
    "-l",
    "--log-file",
    metavar="FILE",
    help=f"Specify a file to write logs to (default: {config_options.log_file!r})",
)
log_options.add_argument(
    "--log-level",
    choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
    default="WARNING",
    help="Set logging level (default: WARNING)",
)
log_options.add_argument(
    "--debug",
    action="store_true",
    help="Equivalent to '--log-level=DEBUG' with more detailed log records",
)

verbosity = log_options.add_mutually_exclusive_group()
verbosity.add_argument(
    "--quiet",
    action="store_true",
    help="No notifications on the console",
)
verbosity.add_argument(
    "-v",
    "--verbose",
    action="store_true",
    help="More detailed event reporting, on the console and in the logs",
)

LOG_LEVELS = {
    name: getattr(_logging, name)
    for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}
