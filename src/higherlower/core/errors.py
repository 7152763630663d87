"""Engine error types."""


class HigherLowerError(Exception):
    """Base class for game engine errors."""


class InvalidStateError(HigherLowerError):
    """Guess attempted while the game is not being played."""


class DeckExhaustedError(HigherLowerError):
    """Guess attempted with no cards left to draw."""


class DeckConstructionError(HigherLowerError):
    """Deck construction produced no cards."""
