"""Card types, values and display helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Suit(Enum):
    """Playing card suits."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class Rank(Enum):
    """Standard ranks, lowest to highest."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


class Color(Enum):
    """Card colors (also used as the joker variant)."""

    RED = "red"
    BLACK = "black"


# Canonical deck order: suit-major, rank-ascending
SUITS: tuple[Suit, ...] = tuple(Suit)
RANKS: tuple[Rank, ...] = tuple(Rank)

RANK_VALUES: dict[Rank, int] = {rank: i + 2 for i, rank in enumerate(RANKS)}

JOKER_LOW = 0
JOKER_HIGH = 15

# Unicode card symbols
SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

RED_SUITS = frozenset({Suit.HEARTS, Suit.DIAMONDS})


@dataclass(frozen=True)
class StandardCard:
    """Immutable card from the regular 52-card deck."""

    suit: Suit
    rank: Rank

    @property
    def value(self) -> int:
        return RANK_VALUES[self.rank]

    def __str__(self) -> str:
        return display(self)


@dataclass(frozen=True)
class JokerCard:
    """Immutable joker whose value is fixed to low (0) or high (15)."""

    variant: Color
    value: int

    def __post_init__(self) -> None:
        if self.value not in (JOKER_LOW, JOKER_HIGH):
            raise ValueError(
                f"Joker value must be {JOKER_LOW} or {JOKER_HIGH}, got {self.value}"
            )

    @classmethod
    def create(cls, variant: Color, is_high: bool) -> "JokerCard":
        return cls(variant=variant, value=JOKER_HIGH if is_high else JOKER_LOW)

    @property
    def is_high(self) -> bool:
        return self.value == JOKER_HIGH

    def __str__(self) -> str:
        return display(self)


Card = Union[StandardCard, JokerCard]


def value(card: Card) -> int:
    """Numeric value used for comparison (0-15)."""
    if isinstance(card, JokerCard):
        return card.value
    return RANK_VALUES[card.rank]


def compare(a: Card, b: Card) -> int:
    """Positive if a outranks b, negative if b outranks a, zero on equal rank."""
    return value(a) - value(b)


def is_joker(card: Card) -> bool:
    return isinstance(card, JokerCard)


def suit_symbol(suit: Suit) -> str:
    return SUIT_SYMBOLS[suit]


def display(card: Card) -> str:
    """Format card as rank glyph plus suit symbol, or a joker label."""
    if isinstance(card, JokerCard):
        position = "HIGH" if card.is_high else "LOW"
        return f"Joker [{position}]"
    return f"{card.rank.value}{SUIT_SYMBOLS[card.suit]}"


def color(card: Card) -> Color:
    if isinstance(card, JokerCard):
        return card.variant
    return Color.RED if card.suit in RED_SUITS else Color.BLACK
