"""
.. Custom Exceptions
"""

from __future__ import annotations


class TermGifError(Exception):
    """Exception baseclass. Raised for generic errors."""


class RenderError(TermGifError):
    """Raised when a frame references a palette index that has no mapped
    attribute.
    """


class SetupError(TermGifError):
    """Raised when the terminal cannot be placed in the required output mode."""


class URLNotFoundError(TermGifError, FileNotFoundError):
    """Raised for 404 errors."""
