"""Round controller: deal, turns, resolution, scoring."""

import logging
from random import Random

from transitions import Machine

from core.cards import Deck
from core.participant import Dealer, Participant, Player
from core.game.events import EventEmitter, EventType
from core.game.state import RoundState, TurnOutcome
from core.game.summary import ParticipantView, RoundSummary

logger = logging.getLogger(__name__)


class RoundController:
    """
    Plays rounds of 21 between one player and the dealer.

    The same controller is reused for every round of a match; ``next_round``
    resets the table between rounds. All output goes through ``events``.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_cards", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "resolving"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolving"},
        {"trigger": "resolve", "source": "resolving", "dest": "round_complete"},
        {"trigger": "new_round", "source": "round_complete", "dest": "dealing"},
    ]

    def __init__(
        self,
        player: Player,
        dealer: Dealer,
        deck: Deck | None = None,
        events: EventEmitter | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a round controller.

        Args:
            player: The human participant
            dealer: The house
            deck: Deck to deal from (a fresh shuffled deck if not provided)
            events: Emitter to publish on (a private one if not provided)
            rng: Random number generator for the default deck
        """
        self.player = player
        self.dealer = dealer
        self.deck = deck if deck is not None else Deck(rng=rng)
        self.events = events or EventEmitter()

        self.round_num = 1
        self.winner: Participant | None = None
        self.outcomes: dict[Participant, TurnOutcome] = {}

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def participants(self) -> tuple[Participant, Participant]:
        """Participants in turn order."""
        return (self.player, self.dealer)

    def play(self) -> RoundSummary:
        """
        Play one full round and return its summary.

        Raises:
            MachineError: if the previous round has not been reset
        """
        self.events.emit_new(EventType.ROUND_STARTED, round_num=self.round_num)
        self._deal_initial_cards()
        self.deal_cards()

        player_outcome = self.play_turn(self.player)

        self._reveal_dealer()

        if player_outcome is TurnOutcome.BUST:
            logger.debug("Round %d: %s busted, dealer turn skipped", self.round_num, self.player.name)
            self.player_busts()
        else:
            self.player_done()
            self.play_turn(self.dealer)
            self.dealer_done()

        self.winner = self.determine_winner()
        if self.winner is not None:
            self.winner.score += 1

        self.resolve()
        summary = self.summary()
        logger.debug(
            "Round %d resolved: winner=%s, score %d-%d",
            self.round_num,
            summary.winner,
            self.player.score,
            self.dealer.score,
        )
        self.events.emit_new(EventType.ROUND_ENDED, summary=summary)
        return summary

    def _deal_initial_cards(self) -> None:
        """Deal: player, dealer, player, dealer (face down)."""
        for _ in range(2):
            for participant in self.participants:
                self._deal_card_to(participant)

    def _deal_card_to(self, participant: Participant) -> None:
        participant.add_card(self.deck.draw())
        self.events.emit_new(
            EventType.CARD_DEALT,
            participant=participant.name,
            role=participant.ROLE,
            card=participant.visible_cards()[-1],
            points=participant.visible_points,
        )

    def play_turn(self, participant: Participant) -> TurnOutcome:
        """
        Run one participant's hit/stay loop until they stay or bust.

        Returns:
            How the turn ended
        """
        while True:
            if participant.is_busted:
                outcome = TurnOutcome.BUST
                self.events.emit_new(
                    EventType.PARTICIPANT_BUSTS,
                    participant=participant.name,
                    role=participant.ROLE,
                    points=participant.points,
                )
                break

            self.events.emit_new(
                EventType.TURN_STARTED,
                participant=participant.name,
                role=participant.ROLE,
                table=self.table(),
            )
            if participant.stays():
                outcome = TurnOutcome.STAY
                self.events.emit_new(
                    EventType.PARTICIPANT_STAYS,
                    participant=participant.name,
                    role=participant.ROLE,
                    points=participant.points,
                )
                break

            card = self.deck.draw()
            participant.add_card(card)
            logger.debug("%s hits: %s (%d)", participant.name, card, participant.points)
            self.events.emit_new(
                EventType.PARTICIPANT_HITS,
                participant=participant.name,
                role=participant.ROLE,
                card=str(card),
                points=participant.points,
            )

        self.outcomes[participant] = outcome
        return outcome

    def _reveal_dealer(self) -> None:
        self.dealer.reveal_cards = True
        if len(self.dealer.hand) >= 2:
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(self.dealer.hand[1]),
                points=self.dealer.points,
            )

    def determine_winner(self) -> Participant | None:
        """
        Pick the round winner.

        The only unbusted participant wins outright; otherwise the strictly
        higher total wins. Equal totals, or both busted, means no winner.
        """
        remaining = [p for p in self.participants if not p.is_busted]

        if len(remaining) == 1:
            return remaining[0]
        if len(remaining) == 2:
            if self.player.points > self.dealer.points:
                return self.player
            if self.dealer.points > self.player.points:
                return self.dealer
        return None

    def table(self) -> list[ParticipantView]:
        """Snapshot both participants as currently visible."""
        return [self._view(p) for p in self.participants]

    def _view(self, participant: Participant) -> ParticipantView:
        outcome = self.outcomes.get(participant)
        return ParticipantView.of(participant, outcome.value if outcome else None)

    def summary(self) -> RoundSummary:
        """Return the summary of the current round."""
        return RoundSummary(
            round_num=self.round_num,
            player=self._view(self.player),
            dealer=self._view(self.dealer),
            winner=self.winner.name if self.winner is not None else None,
            winner_role=self.winner.ROLE if self.winner is not None else None,
        )

    def next_round(self) -> None:
        """Reshuffle, clear hands and hide the dealer's card for the next deal."""
        self.new_round()

        self.deck.reshuffle()
        self.events.emit_new(EventType.DECK_RESHUFFLED, cards=len(self.deck))

        for participant in self.participants:
            participant.empty_hand()
        self.dealer.reveal_cards = False
        self.winner = None
        self.outcomes.clear()
        self.round_num += 1
