"""UI package: the slideshow controller driving the shape demos."""

from .controller import SlideshowController  # re-export for convenience

__all__ = ["SlideshowController"]
