"""Game engine: cards, deck and the guess state machine."""

from higherlower.core.card import (
    Card, Color, JokerCard, Rank, StandardCard, Suit,
    RANKS, RANK_VALUES, SUITS, JOKER_HIGH, JOKER_LOW,
    color, compare, display, is_joker, suit_symbol, value,
)
from higherlower.core.deck import DECK_SIZE, build_deck, build_shuffled_deck, shuffle
from higherlower.core.errors import (
    DeckConstructionError, DeckExhaustedError, HigherLowerError, InvalidStateError,
)
from higherlower.core.state import GameState, GameStatus, Guess, GuessResult
from higherlower.core.game import (
    MAX_SCORE, TOTAL_CARDS,
    guess, is_terminal, new_game, progress_percent, remaining_count, start,
)

__all__ = [
    "Card",
    "Color",
    "JokerCard",
    "Rank",
    "StandardCard",
    "Suit",
    "RANKS",
    "RANK_VALUES",
    "SUITS",
    "JOKER_HIGH",
    "JOKER_LOW",
    "color",
    "compare",
    "display",
    "is_joker",
    "suit_symbol",
    "value",
    "DECK_SIZE",
    "build_deck",
    "build_shuffled_deck",
    "shuffle",
    "DeckConstructionError",
    "DeckExhaustedError",
    "HigherLowerError",
    "InvalidStateError",
    "GameState",
    "GameStatus",
    "Guess",
    "GuessResult",
    "MAX_SCORE",
    "TOTAL_CARDS",
    "guess",
    "is_terminal",
    "new_game",
    "progress_percent",
    "remaining_count",
    "start",
]
