"""Pydantic models describing finished rounds and matches."""

from typing import Literal

from pydantic import BaseModel, Field

from core.participant import Participant, Role


class ParticipantView(BaseModel):
    """What the table shows for one participant."""

    name: str
    role: Role
    cards: list[str]
    points: int | None = Field(None, description="None while cards are concealed")
    busted: bool
    outcome: Literal["stay", "bust"] | None = None
    score: int = Field(..., ge=0)

    @classmethod
    def of(cls, participant: Participant, outcome: str | None = None) -> "ParticipantView":
        """Snapshot a participant as currently visible."""
        return cls(
            name=participant.name,
            role=participant.ROLE,
            cards=participant.visible_cards(),
            points=participant.visible_points,
            busted=participant.is_busted,
            outcome=outcome,
            score=participant.score,
        )

    @property
    def points_label(self) -> str:
        return "unknown" if self.points is None else str(self.points)


class RoundSummary(BaseModel):
    """Result of a single round."""

    round_num: int = Field(..., ge=1)
    player: ParticipantView
    dealer: ParticipantView
    winner: str | None = None
    winner_role: Role | None = None

    @property
    def tie(self) -> bool:
        return self.winner is None


class MatchSummary(BaseModel):
    """Result of a whole match."""

    player_name: str
    player_score: int = Field(..., ge=0)
    dealer_score: int = Field(..., ge=0)
    rounds_played: int = Field(..., ge=0)
    grand_winner: str | None = None
    grand_winner_role: Role | None = None
    cash: int
    cash_outcome: Literal["win", "loss", "nothing"]

    @property
    def cash_amount(self) -> int:
        """Return the cash moved, without sign."""
        return abs(self.cash)
