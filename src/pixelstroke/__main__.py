"""Console entrypoint for the pixelstroke slideshow.

This module delegates to :mod:`pixelstroke.cli` so that running
``python -m pixelstroke`` or the installed ``pixelstroke`` console script
executes the same application code.
"""

from __future__ import annotations

from pixelstroke.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`pixelstroke.cli.main`)."""
    cli_main()


if __name__ == "__main__":
    main()
