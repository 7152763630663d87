"""Higher or Lower: a single-player card guessing game."""

__version__ = "0.1.0"
