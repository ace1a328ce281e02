"""Solutions to classic algorithm puzzles, grouped by topic."""

__version__ = "0.1.0"