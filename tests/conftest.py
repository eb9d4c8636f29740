"""Pytest fixtures for 21 engine tests."""

from random import Random
from typing import Iterable

import pytest

from core.cards import Card, Deck, Rank, Suit
from core.participant import Dealer, Player
from core.rules import TableRules
from core.game.events import EventEmitter


class StackedDeck(Deck):
    """
    A deck that deals cards in a fixed order.

    Every reshuffle reloads fresh copies of the same order, so each round of a
    match deals the same cards.
    """

    def __init__(self, draw_order: Iterable[Card]) -> None:
        self._draw_order = list(draw_order)
        super().__init__(rng=Random(0))

    def reshuffle(self) -> None:
        self._cards = [Card(c.rank, c.suit) for c in reversed(self._draw_order)]


def deal_order(player: list[Card], dealer: list[Card], hits: Iterable[Card] = ()) -> list[Card]:
    """Interleave two-card hands into draw order, followed by any hit cards."""
    return [player[0], dealer[0], player[1], dealer[1], *hits]


def scripted(*decisions: bool):
    """Return a hit decider that replays decisions, then stays."""
    remaining = list(decisions)

    def ask_hit(points: int) -> bool:
        return remaining.pop(0) if remaining else False

    return ask_hit


def always(answer: bool):
    """Return a callable that always gives the same answer."""
    return lambda *args: answer


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def rules():
    """Default table rules."""
    return TableRules()


@pytest.fixture
def events():
    """A fresh event emitter."""
    return EventEmitter()


@pytest.fixture
def staying_player():
    """A player who never hits."""
    return Player("Alice", ask_hit=always(False))


@pytest.fixture
def dealer():
    """A dealer standing on 17."""
    return Dealer()


@pytest.fixture
def ace_spades():
    return Card(Rank.ACE, Suit.SPADES)


@pytest.fixture
def ace_hearts():
    return Card(Rank.ACE, Suit.HEARTS)


@pytest.fixture
def king_clubs():
    return Card(Rank.KING, Suit.CLUBS)


@pytest.fixture
def queen_diamonds():
    return Card(Rank.QUEEN, Suit.DIAMONDS)


@pytest.fixture
def stacked_deck():
    """Factory for a deck dealing the given hands, then the hit cards."""

    def make(player: list[Card], dealer: list[Card], hits: Iterable[Card] = ()) -> StackedDeck:
        return StackedDeck(deal_order(player, dealer, hits))

    return make


@pytest.fixture
def scripted_player():
    """Factory for a player replaying hit decisions, then staying."""

    def make(*decisions: bool, name: str = "Alice") -> Player:
        return Player(name, ask_hit=scripted(*decisions))

    return make
