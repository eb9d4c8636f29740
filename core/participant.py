"""Participants at the table: the human Player and the rule-driven Dealer."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterator, Literal

from core.cards import Card

logger = logging.getLogger(__name__)

HIDDEN_CARD = "??"

# Interactive hit decision: receives the current points, returns True to hit
HitDecider = Callable[[int], bool]

# Seat at the table; names are free text and may collide
Role = Literal["player", "dealer"]


class Participant(ABC):
    """
    A hand holder with a running point total and a match score.

    Subclasses only decide whether to hit; drawing, point recomputation and
    bust detection are shared.
    """

    ROLE: Role

    def __init__(self, name: str, bust_limit: int = 21) -> None:
        self.name = name
        self.bust_limit = bust_limit
        self.hand: list[Card] = []
        self.points = 0
        self.score = 0

    def add_card(self, card: Card) -> None:
        """Add a card to the hand and recompute points."""
        self.hand.append(card)
        self._recompute_points()

    def _recompute_points(self) -> None:
        """
        Total the hand, devaluing aces while over the bust limit.

        Aces are devalued one at a time, first undevalued ace in draw order
        first, until the total fits or no undevalued ace remains.
        """
        total = sum(card.worth for card in self.hand)

        while total > self.bust_limit:
            ace = next(
                (card for card in self.hand if card.is_ace and not card.devalued),
                None,
            )
            if ace is None:
                break
            ace.devalue()
            total = sum(card.worth for card in self.hand)
            logger.debug("%s devalued %s, total now %d", self.name, ace, total)

        self.points = total

    def empty_hand(self) -> None:
        """Clear the hand and points for a new round."""
        self.hand.clear()
        self.points = 0

    @property
    def is_busted(self) -> bool:
        """Check if the hand total exceeds the bust limit."""
        return self.points > self.bust_limit

    @abstractmethod
    def decides_to_hit(self, points: int) -> bool:
        """Return True to draw another card at the given total."""

    def stays(self) -> bool:
        """Return True if the participant ends their turn now."""
        return not self.decides_to_hit(self.points)

    def visible_cards(self) -> list[str]:
        """Return the card names others at the table can see."""
        return [card.name for card in self.hand]

    @property
    def visible_points(self) -> int | None:
        """Return the total others can see, or None while cards are concealed."""
        return self.points

    def __len__(self) -> int:
        return len(self.hand)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.hand)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.name!r}, points={self.points}, "
            f"score={self.score})"
        )


class Player(Participant):
    """The human participant; hit decisions come from an interactive callback."""

    ROLE: Role = "player"

    def __init__(
        self,
        name: str,
        ask_hit: HitDecider,
        bust_limit: int = 21,
    ) -> None:
        """
        Initialize a player.

        Args:
            name: Display name, must not be blank
            ask_hit: Called with the current points, returns True to hit
            bust_limit: Totals above this are a bust
        """
        name = name.strip()
        if not name:
            raise ValueError("Player name cannot be empty")
        super().__init__(name, bust_limit=bust_limit)
        self._ask_hit = ask_hit

    def decides_to_hit(self, points: int) -> bool:
        return self._ask_hit(points)


class Dealer(Participant):
    """The house: hits below a fixed total and keeps its second card hidden."""

    ROLE: Role = "dealer"
    NAME = "Dealer"

    def __init__(self, stands_on: int = 17, bust_limit: int = 21) -> None:
        super().__init__(self.NAME, bust_limit=bust_limit)
        self.stands_on = stands_on
        self.reveal_cards = False

    def decides_to_hit(self, points: int) -> bool:
        return points < self.stands_on

    def visible_cards(self) -> list[str]:
        if self.reveal_cards:
            return super().visible_cards()
        return [card.name if i == 0 else HIDDEN_CARD for i, card in enumerate(self.hand)]

    @property
    def visible_points(self) -> int | None:
        if self.reveal_cards or len(self.hand) < 2:
            return self.points
        return None
