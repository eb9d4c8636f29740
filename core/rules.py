"""Table rules for a game of 21."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TableRules:
    """
    Numeric rules shared by the round and match controllers.

    Passed in at construction so rule variants can be played and tested
    without touching the engine.
    """

    # Totals above this are a bust
    bust_limit: int = 21

    # Dealer hits below this total and stays at or above it
    dealer_stands_on: int = 17

    # Rounds a participant must win to take the match
    grand_score: int = 5

    # Cash moved per point of score difference at match end
    cash_per_point: int = 100

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.bust_limit < 2:
            raise ValueError("bust_limit must be at least 2")
        if not 1 <= self.dealer_stands_on <= self.bust_limit:
            raise ValueError("dealer_stands_on must be between 1 and bust_limit")
        if self.grand_score < 1:
            raise ValueError("grand_score must be at least 1")
        if self.cash_per_point < 0:
            raise ValueError("cash_per_point cannot be negative")
