"""Round and match controllers, events and summaries."""

from core.game.events import GameEvent, EventEmitter, EventType
from core.game.state import RoundState, TurnOutcome
from core.game.summary import MatchSummary, ParticipantView, RoundSummary
from core.game.round import RoundController
from core.game.match import MatchController

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "RoundState",
    "TurnOutcome",
    "MatchSummary",
    "ParticipantView",
    "RoundSummary",
    "RoundController",
    "MatchController",
]
