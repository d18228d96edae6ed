"""Command line entry point."""

from __future__ import annotations

import argparse
import sys

from . import terminal
from .main_menu import menu_interface
from .play_video import play_video
from .search_fetch import SearchError


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the command."""
    parser = argparse.ArgumentParser(prog="netimp")
    commands = parser.add_subparsers(dest="command")
    open_command = commands.add_parser(
        "open", help="Open and play a video directly from a URL"
    )
    open_command.add_argument("url", help="The URL of the video to play")
    return parser


def main(argv=None) -> int:
    """Play the given video, or show the main menu."""
    args = build_parser().parse_args(argv)
    try:
        with terminal.session() as screen:
            if args.command == "open":
                play_video(screen, args.url)
            else:
                menu_interface(screen)
    except (SearchError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())