"""Match controller: rounds until a grand winner or the player quits."""

import logging
from random import Random
from typing import Callable

from core.cards import Deck
from core.participant import Dealer, Participant, Player
from core.rules import TableRules
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.round import RoundController
from core.game.summary import MatchSummary, RoundSummary

logger = logging.getLogger(__name__)


class MatchController:
    """
    Repeats rounds between a player and the dealer.

    The match ends right after a round in which either participant reaches
    ``rules.grand_score``, or when ``ask_play_again`` returns False.
    """

    def __init__(
        self,
        player: Player,
        ask_play_again: Callable[[], bool],
        dealer: Dealer | None = None,
        rules: TableRules | None = None,
        deck: Deck | None = None,
        events: EventEmitter | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a match.

        Args:
            player: The human participant
            ask_play_again: Returns True to play another round
            dealer: The house (built from the rules if not provided)
            rules: Table rules (uses defaults if not provided)
            deck: Deck to deal from
            events: Emitter to publish on
            rng: Random number generator for the default deck
        """
        self.rules = rules or TableRules()
        self.player = player
        if dealer is None:
            dealer = Dealer(
                stands_on=self.rules.dealer_stands_on,
                bust_limit=self.rules.bust_limit,
            )
        self.dealer = dealer
        self.events = events or EventEmitter()
        self.round = RoundController(
            self.player,
            self.dealer,
            deck=deck,
            events=self.events,
            rng=rng,
        )
        self._ask_play_again = ask_play_again

        self.grand_winner: Participant | None = None
        self.history: list[RoundSummary] = []

    @property
    def round_num(self) -> int:
        return self.round.round_num

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def play(self) -> MatchSummary:
        """Play rounds until the match is decided and return the result."""
        self.player.score = 0
        self.dealer.score = 0
        self.events.emit_new(
            EventType.MATCH_STARTED,
            player=self.player.name,
            grand_score=self.rules.grand_score,
        )

        while True:
            self.history.append(self.round.play())

            self.grand_winner = self.check_grand_winner()
            if self.grand_winner is not None:
                self.events.emit_new(
                    EventType.GRAND_WINNER,
                    participant=self.grand_winner.name,
                    role=self.grand_winner.ROLE,
                    score=self.grand_winner.score,
                )
                break

            if not self._ask_play_again():
                logger.debug("Player declined another round after round %d", self.round_num)
                break

            self.round.next_round()

        return self._finish()

    def check_grand_winner(self) -> Participant | None:
        """Return whoever has reached the grand score, if anyone."""
        for participant in (self.player, self.dealer):
            if participant.score >= self.rules.grand_score:
                return participant
        return None

    @property
    def cash(self) -> int:
        """Return the player's winnings (negative for a loss)."""
        return (self.player.score - self.dealer.score) * self.rules.cash_per_point

    def _finish(self) -> MatchSummary:
        cash = self.cash
        if cash > 0:
            cash_outcome = "win"
        elif cash < 0:
            cash_outcome = "loss"
        else:
            cash_outcome = "nothing"

        summary = MatchSummary(
            player_name=self.player.name,
            player_score=self.player.score,
            dealer_score=self.dealer.score,
            rounds_played=len(self.history),
            grand_winner=self.grand_winner.name if self.grand_winner is not None else None,
            grand_winner_role=(
                self.grand_winner.ROLE if self.grand_winner is not None else None
            ),
            cash=cash,
            cash_outcome=cash_outcome,
        )
        self.events.emit_new(EventType.CASH_SETTLED, amount=summary.cash_amount, outcome=cash_outcome)
        self.events.emit_new(EventType.MATCH_ENDED, summary=summary)
        logger.info(
            "Match over after %d rounds: %s %d, %s %d",
            summary.rounds_played,
            self.player.name,
            self.player.score,
            self.dealer.name,
            self.dealer.score,
        )
        return summary
