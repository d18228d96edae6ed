"""Search, play and download YouTube videos from a curses terminal interface."""

__version__ = "0.1.0"