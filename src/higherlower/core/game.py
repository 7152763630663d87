"""Game state machine: start a game and resolve guesses."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from higherlower.core.card import Card, compare, display
from higherlower.core.deck import DECK_SIZE, build_shuffled_deck
from higherlower.core.errors import (
    DeckConstructionError, DeckExhaustedError, InvalidStateError,
)
from higherlower.core.state import GameState, GameStatus, Guess, GuessResult

logger = logging.getLogger(__name__)

TOTAL_CARDS = DECK_SIZE

# First card is free, so a perfect game scores one less than the deck size
MAX_SCORE = TOTAL_CARDS - 1


def new_game(best_score: int = 0) -> GameState:
    """Idle state waiting for a deck, carrying the best score forward."""
    return GameState(
        deck=(),
        current_card=None,
        score=0,
        best_score=best_score,
        status=GameStatus.IDLE,
        cards_played=0,
    )


def start(
    previous_best_score: int = 0,
    rng: Optional[random.Random] = None,
    deck: Optional[Sequence[Card]] = None,
) -> GameState:
    """Shuffle a new deck and reveal its first card.

    Args:
        previous_best_score: Best score to carry into the new game
        rng: Random source for deck construction and shuffling
        deck: Pre-ordered deck to play instead of a shuffled one

    Returns:
        Playing state with the first card shown

    Raises:
        DeckConstructionError: If the deck has no cards
    """
    cards = tuple(deck) if deck is not None else build_shuffled_deck(rng)

    if not cards:
        raise DeckConstructionError("Failed to create deck")

    first_card = cards[0]
    logger.debug(f"Game started with {display(first_card)}, {len(cards) - 1} cards remaining")

    return GameState(
        deck=cards[1:],
        current_card=first_card,
        score=0,
        best_score=previous_best_score,
        status=GameStatus.PLAYING,
        cards_played=1,
    )


def _is_correct(comparison: int, direction: Guess) -> bool:
    # A tie never loses
    if comparison == 0:
        return True
    if direction == Guess.HIGHER:
        return comparison > 0
    return comparison < 0


def guess(state: GameState, direction: Guess) -> GuessResult:
    """Draw the next card and score the player's guess.

    Raises:
        InvalidStateError: If the game is not in the playing state
        DeckExhaustedError: If no cards remain to be drawn
    """
    if state.status != GameStatus.PLAYING or state.current_card is None:
        raise InvalidStateError(
            f"Game is not in playing state (status: {state.status.value})"
        )

    if not state.deck:
        raise DeckExhaustedError("No cards remaining in deck")

    next_card = state.deck[0]
    correct = _is_correct(compare(next_card, state.current_card), direction)

    remaining = state.deck[1:]
    score = state.score + 1 if correct else state.score

    if not correct:
        status = GameStatus.LOST
    elif not remaining:
        status = GameStatus.WON
    else:
        status = GameStatus.PLAYING

    new_state = state.copy_with(
        deck=remaining,
        current_card=next_card,
        score=score,
        best_score=max(state.best_score, score),
        status=status,
        cards_played=state.cards_played + 1,
    )

    logger.debug(
        f"Guess {direction.value}: {display(state.current_card)} -> "
        f"{display(next_card)} ({'correct' if correct else 'wrong'}), score {score}"
    )
    if status != GameStatus.PLAYING:
        logger.debug(f"Game over: {status.value} with score {score}")

    return GuessResult(correct=correct, next_card=next_card, new_state=new_state)


def remaining_count(state: GameState) -> int:
    return len(state.deck)


def is_terminal(state: GameState) -> bool:
    return state.status in (GameStatus.WON, GameStatus.LOST)


def progress_percent(state: GameState) -> int:
    """Share of the deck revealed, 0-100, rounded half up."""
    # Integer form of round(cards_played / TOTAL_CARDS * 100) with halves rounded up
    return (state.cards_played * 200 + TOTAL_CARDS) // (2 * TOTAL_CARDS)
