"""Card and Deck classes - fixed identity, devaluable worth."""

from enum import Enum, auto
from random import Random
from typing import Iterator


class Suit(Enum):
    """Card suits, in deck-building order."""

    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    @property
    def label(self) -> str:
        """Return the suit name as shown in card names."""
        return self.name.title()


class Rank(Enum):
    """Card ranks with their starting worth."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        """Return the rank as shown in card names ('7', 'Queen', ...)."""
        if self.value <= 10:
            return str(self.value)
        return self.name.title()

    @property
    def initial_worth(self) -> int:
        """Return the undevalued worth (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards


class Card:
    """
    A playing card.

    Suit and rank are fixed for the card's lifetime. The worth starts at the
    rank's initial worth and an Ace can be devalued from 11 to 1 exactly once.
    """

    __slots__ = ("_rank", "_suit", "_worth", "_devalued")

    def __init__(self, rank: Rank, suit: Suit) -> None:
        self._rank = rank
        self._suit = suit
        self._worth = rank.initial_worth
        self._devalued = False

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def worth(self) -> int:
        """Return the current contribution of this card to a hand total."""
        return self._worth

    @property
    def initial_worth(self) -> int:
        return self._rank.initial_worth

    @property
    def devalued(self) -> bool:
        """Check if this card has already been devalued."""
        return self._devalued

    @property
    def is_ace(self) -> bool:
        return self._rank == Rank.ACE

    @property
    def name(self) -> str:
        return f"{self._rank.label} of {self._suit.label}"

    def devalue(self) -> bool:
        """
        Drop an undevalued Ace from 11 to 1.

        Returns:
            True if the worth changed, False for non-aces and aces that were
            already devalued
        """
        if not self.is_ace or self._devalued:
            return False
        self._worth = 1
        self._devalued = True
        return True

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Card({self._rank.name}, {self._suit.name}, worth={self._worth})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return (self._rank, self._suit) == (other._rank, other._suit)

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))


class Deck:
    """A standard 52-card deck, rebuilt from scratch on every reshuffle."""

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a freshly shuffled deck.

        Args:
            rng: Random number generator for shuffling
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reshuffle()

    @staticmethod
    def fresh_cards() -> list[Card]:
        """Return all 52 undevalued cards in suit-then-rank order."""
        return [Card(rank, suit) for suit in Suit for rank in Rank]

    def reshuffle(self) -> None:
        """Discard the current cards and shuffle a complete new set."""
        self._cards = self.fresh_cards()
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Draw a card from the top (end) of the deck."""
        if not self._cards:
            raise IndexError("Cannot draw from empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
