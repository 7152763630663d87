"""Tests for deck construction and shuffling."""

import random
from collections import Counter

from higherlower.core.card import Color, JokerCard, StandardCard, Suit, Rank, value
from higherlower.core.deck import DECK_SIZE, build_deck, build_shuffled_deck, shuffle


class TestBuildDeck:
    """Tests for build_deck."""

    def test_has_54_cards(self):
        deck = build_deck(random.Random(1))
        assert len(deck) == DECK_SIZE == 54

    def test_standard_cards_unique(self):
        deck = build_deck(random.Random(1))
        standard = [c for c in deck if isinstance(c, StandardCard)]

        assert len(standard) == 52
        assert len(set(standard)) == 52

        per_suit = Counter(c.suit for c in standard)
        assert all(count == 13 for count in per_suit.values())
        assert len(per_suit) == 4

    def test_one_joker_of_each_variant(self):
        deck = build_deck(random.Random(1))
        jokers = [c for c in deck if isinstance(c, JokerCard)]

        assert len(jokers) == 2
        assert {j.variant for j in jokers} == {Color.RED, Color.BLACK}
        assert all(j.value in (0, 15) for j in jokers)

    def test_canonical_order(self):
        deck = build_deck(random.Random(1))

        assert deck[0] == StandardCard(Suit.HEARTS, Rank.TWO)
        assert deck[12] == StandardCard(Suit.HEARTS, Rank.ACE)
        assert deck[13] == StandardCard(Suit.DIAMONDS, Rank.TWO)
        assert deck[51] == StandardCard(Suit.SPADES, Rank.ACE)
        assert deck[52].variant == Color.RED
        assert deck[53].variant == Color.BLACK

    def test_seeded_build_is_reproducible(self):
        assert build_deck(random.Random(99)) == build_deck(random.Random(99))

    def test_returns_tuple(self):
        assert isinstance(build_deck(random.Random(1)), tuple)

    def test_default_rng(self):
        assert len(build_deck()) == 54


class TestJokerRandomness:
    """Statistical check that joker heights are balanced."""

    def test_jokers_roughly_balanced(self):
        rng = random.Random(2024)
        high = 0
        total = 0

        for _ in range(100):
            for card in build_deck(rng):
                if isinstance(card, JokerCard):
                    total += 1
                    high += card.is_high

        assert total == 200
        # Neither outcome below 25%
        assert 50 <= high <= 150


class TestShuffle:
    """Tests for shuffle."""

    def test_preserves_cards(self):
        deck = build_deck(random.Random(3))
        shuffled = shuffle(deck, random.Random(4))

        assert len(shuffled) == 54
        assert Counter(shuffled) == Counter(deck)

    def test_does_not_mutate_input(self):
        deck = list(build_deck(random.Random(3)))
        original = list(deck)

        shuffle(deck, random.Random(4))

        assert deck == original

    def test_changes_order(self):
        deck = build_deck(random.Random(3))

        first = shuffle(deck, random.Random(10))
        second = shuffle(deck, random.Random(11))

        assert first != deck
        assert first != second

    def test_keeps_joker_values(self):
        deck = build_deck(random.Random(3))
        jokers = {c for c in deck if isinstance(c, JokerCard)}

        for seed in range(20):
            shuffled = shuffle(deck, random.Random(seed))
            assert {c for c in shuffled if isinstance(c, JokerCard)} == jokers

    def test_empty_and_single(self):
        assert shuffle([], random.Random(0)) == ()
        card = StandardCard(Suit.HEARTS, Rank.FIVE)
        assert shuffle([card], random.Random(0)) == (card,)


class TestBuildShuffledDeck:
    """Tests for build_shuffled_deck."""

    def test_full_deck(self):
        deck = build_shuffled_deck(random.Random(5))

        assert len(deck) == 54
        assert sum(1 for c in deck if isinstance(c, JokerCard)) == 2
        assert sorted(value(c) for c in deck if isinstance(c, StandardCard)) == sorted(
            list(range(2, 15)) * 4
        )

    def test_seeded_is_reproducible(self):
        assert build_shuffled_deck(random.Random(8)) == build_shuffled_deck(random.Random(8))
