"""Core 21 engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit
from core.participant import Dealer, Participant, Player
from core.rules import TableRules

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Dealer",
    "Participant",
    "Player",
    "TableRules",
]
