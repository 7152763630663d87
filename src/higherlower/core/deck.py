"""Deck construction and shuffling."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from higherlower.core.card import (
    Card, Color, JokerCard, StandardCard, SUITS, RANKS, display,
)

logger = logging.getLogger(__name__)

DECK_SIZE = 54


def build_deck(rng: Optional[random.Random] = None) -> tuple[Card, ...]:
    """Create a fresh 54-card deck in canonical order.

    The 52 standard cards come first (hearts, diamonds, clubs, spades; each
    suit from 2 up to A), followed by the red and then the black joker. Each
    joker is independently made high or low with even odds. This is the only
    place joker values are decided.

    Args:
        rng: Random source (default: a fresh unseeded ``random.Random``)

    Returns:
        Tuple of 54 cards
    """
    rng = rng or random.Random()

    cards: list[Card] = [
        StandardCard(suit=suit, rank=rank) for suit in SUITS for rank in RANKS
    ]

    red_joker = JokerCard.create(Color.RED, is_high=rng.random() < 0.5)
    black_joker = JokerCard.create(Color.BLACK, is_high=rng.random() < 0.5)
    cards.append(red_joker)
    cards.append(black_joker)

    logger.debug(
        f"Built deck: red {display(red_joker)}, black {display(black_joker)}"
    )
    return tuple(cards)


def shuffle(deck: Sequence[Card], rng: Optional[random.Random] = None) -> tuple[Card, ...]:
    """Fisher-Yates shuffle over a copy of ``deck``.

    The input is never modified and joker values are carried over as-is.
    """
    rng = rng or random.Random()
    shuffled = list(deck)

    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return tuple(shuffled)


def build_shuffled_deck(rng: Optional[random.Random] = None) -> tuple[Card, ...]:
    """Create and shuffle a new deck in one step."""
    rng = rng or random.Random()
    return shuffle(build_deck(rng), rng)
