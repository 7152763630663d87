"""End-to-end games through the public engine API."""

import random

import pytest
from higherlower.core import (
    GameStatus, Guess, MAX_SCORE, TOTAL_CARDS,
    build_deck, guess, is_terminal, progress_percent, remaining_count, shuffle, start, value,
)


def oracle_guess(state) -> Guess:
    """Peek at the next card and pick the right answer."""
    nxt = state.deck[0]
    return Guess.HIGHER if value(nxt) >= value(state.current_card) else Guess.LOWER


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_perfect_play_wins(seed):
    state = start(10, rng=random.Random(seed))

    while not is_terminal(state):
        state = guess(state, oracle_guess(state)).new_state

    assert state.status == GameStatus.WON
    assert state.score == MAX_SCORE
    assert state.best_score == MAX_SCORE
    assert state.cards_played == TOTAL_CARDS
    assert remaining_count(state) == 0
    assert progress_percent(state) == 100


@pytest.mark.parametrize("seed", [5, 6, 7])
def test_random_play_terminates(seed):
    rng = random.Random(seed)
    state = start(rng=rng)
    history = [state]

    while not is_terminal(state):
        state = guess(state, rng.choice(list(Guess))).new_state
        history.append(state)

    assert state.status in (GameStatus.WON, GameStatus.LOST)
    # Earlier states are untouched by later guesses
    assert history[0].cards_played == 1
    assert remaining_count(history[0]) == 53


def test_reshuffle_keeps_jokers():
    rng = random.Random(21)
    deck = build_deck(rng)

    first = start(deck=shuffle(deck, rng))
    second = start(deck=shuffle(deck, rng))

    def jokers(state):
        cards = (state.current_card,) + state.deck
        return sorted(value(c) for c in cards if value(c) in (0, 15))

    assert jokers(first) == jokers(second)
