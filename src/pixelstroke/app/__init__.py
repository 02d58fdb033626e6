"""Application package for pixelstroke.

Contains the slideshow entrypoint module used by the CLI.
"""

from . import slideshow  # re-export the main application module

__all__ = ["slideshow"]
