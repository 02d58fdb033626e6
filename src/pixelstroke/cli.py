"""Command-line interface for pixelstroke.

Argument parsing lives next to the application in
:mod:`pixelstroke.app.slideshow` so the console script, ``python -m
pixelstroke`` and programmatic callers all share one parser.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from pixelstroke import __version__
from pixelstroke.app import slideshow


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Return parsed arguments using the application's parser."""
    return slideshow.parse_args(argv)


def _setup_logging(level: str) -> None:
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    root = logging.getLogger()
    if root.handlers:
        # Assume the host application has configured logging
        root.setLevel(lvl)
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """Synchronous entrypoint for the pixelstroke CLI."""
    args = parse_args(argv)

    if args.version:
        print(f"pixelstroke {__version__}")
        return

    _setup_logging(args.log_level)
    try:
        asyncio.run(run_async(argv))
    except KeyboardInterrupt:
        # Allow graceful cancellation via Ctrl+C
        pass


async def run_async(argv: list[str] | None = None) -> None:
    """Async entrypoint for programmatic usage/testing.

    Tests and programmatic callers can `await run_async(...)` to run the
    application without starting a nested event loop.
    """
    args = parse_args(argv)
    if args.version:
        print(f"pixelstroke {__version__}")
        return

    if args.headless:
        await slideshow._main_headless_async(args)
    else:
        await slideshow.main_async(args)


if __name__ == "__main__":
    main()
