"""Round and turn state enumerations."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → RESOLVING → ROUND_COMPLETE
    """

    # Initial two cards each
    DEALING = auto()

    # Player hits or stays
    PLAYER_TURN = auto()

    # Dealer plays (skipped when the player busts)
    DEALER_TURN = auto()

    # Determining the winner
    RESOLVING = auto()

    # Round finished, ready for the next deal
    ROUND_COMPLETE = auto()


class TurnOutcome(Enum):
    """How a participant's turn ended."""

    STAY = "stay"
    BUST = "bust"

