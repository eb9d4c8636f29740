"""Console rendering of game events."""

import time
from typing import Callable, Sequence

from core.game.events import EventType, GameEvent
from core.game.summary import MatchSummary, ParticipantView, RoundSummary
from core.participant import HIDDEN_CARD

WIDTH = 56
RULE = "=" * WIDTH


def join_and(items: Sequence[object], delimiter: str = ", ", word: str = "and") -> str:
    """
    Join items into an English list.

    ["a"] -> "a", ["a", "b"] -> "a and b", ["a", "b", "c"] -> "a, b, and c"
    """
    words = [str(item) for item in items]
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} {word} {words[1]}"
    return delimiter.join(words[:-1]) + f"{delimiter}{word} {words[-1]}"


def describe_cards(cards: Sequence[str]) -> str:
    """Card names for display, with the concealed card spelled out."""
    return join_and(["an unknown card" if c == HIDDEN_CARD else c for c in cards])


def banner(text: str) -> str:
    return f"{RULE}\n{text.center(WIDTH)}\n{RULE}"


class ConsoleDisplay:
    """
    Prints game events for a human at the terminal.

    Subscribe ``handle_event`` as a catch-all handler on the match emitter.
    """

    def __init__(
        self,
        write: Callable[[str], None] = print,
        delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize the display.

        Args:
            write: Prints one line of output
            delay: Pause in seconds after turn announcements and draws
            sleep: Pause function
        """
        self._write = write
        self._delay = delay
        self._sleep = sleep

    def _pause(self) -> None:
        if self._delay > 0:
            self._sleep(self._delay)

    def handle_event(self, event: GameEvent) -> None:
        """Render one game event."""
        etype = event.event_type
        data = event.data

        if etype == EventType.MATCH_STARTED:
            self._write(banner("Welcome to 21!"))
            self._write(f"First to {data['grand_score']} rounds wins the match.")
        elif etype == EventType.ROUND_STARTED:
            self._write("")
            self._write(banner(f"Round {data['round_num']}"))
        elif etype == EventType.TURN_STARTED:
            self._handle_turn_started(data)
        elif etype == EventType.PARTICIPANT_HITS:
            self._write(f"{data['participant']} hits and draws the {data['card']}.")
            self._pause()
        elif etype == EventType.PARTICIPANT_STAYS:
            self._write(f"{data['participant']} stays at {data['points']}.")
        elif etype == EventType.PARTICIPANT_BUSTS:
            self._write(f"{data['participant']} busts with {data['points']}!")
        elif etype == EventType.DEALER_REVEALS:
            self._write(f"Dealer reveals the {data['card']}.")
        elif etype == EventType.ROUND_ENDED:
            self.render_round(data["summary"])
        elif etype == EventType.DECK_RESHUFFLED:
            self._write("The deck has been reshuffled.")
        elif etype == EventType.GRAND_WINNER:
            self._write("")
            self._write(banner(f"{data['participant']} is the grand winner!"))
        elif etype == EventType.MATCH_ENDED:
            self.render_match(data["summary"])

    def _handle_turn_started(self, data: dict) -> None:
        name = data["participant"]
        self._write("")
        self._write("Your turn." if data["role"] == "player" else f"{name}'s turn.")
        for view in data["table"]:
            self._write(self._describe_hand(view))
        self._pause()

    @staticmethod
    def _describe_hand(view: ParticipantView) -> str:
        return f"{view.name} has: {describe_cards(view.cards)} (points: {view.points_label})"

    def render_round(self, summary: RoundSummary) -> None:
        """Print hands, totals and the winner of a finished round."""
        self._write("")
        self._write(RULE)
        for view in (summary.player, summary.dealer):
            self._write(self._describe_hand(view))
            if view.outcome == "bust":
                self._write(f"  {view.name} busted.")
            elif view.outcome == "stay":
                self._write(f"  {view.name} stayed.")
        if summary.tie:
            self._write("It's a tie!")
        else:
            self._write(f"{summary.winner} wins round {summary.round_num}!")
        self._write(
            f"Score: {summary.player.name} {summary.player.score}, "
            f"{summary.dealer.name} {summary.dealer.score}"
        )
        self._write(RULE)

    def render_match(self, summary: MatchSummary) -> None:
        """Print the final score and cash outcome."""
        self._write("")
        self._write(
            f"Final score: {summary.player_name} {summary.player_score}, "
            f"Dealer {summary.dealer_score} after {summary.rounds_played} "
            f"round{'s' if summary.rounds_played != 1 else ''}."
        )
        if summary.cash_outcome == "win":
            self._write(f"You won ${summary.cash_amount}!")
        elif summary.cash_outcome == "loss":
            self._write(f"You lost ${summary.cash_amount}.")
        else:
            self._write("You broke even and won nothing.")
        self._write("Thanks for playing 21! Goodbye!")
