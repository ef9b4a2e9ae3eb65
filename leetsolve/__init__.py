"""Solutions to classic array, string, stack, queue and heap puzzles."""

__version__ = "0.1.0"