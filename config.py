"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from core.rules import TableRules


@dataclass(frozen=True)
class GameConfig:
    """Table rule overrides for the console game."""

    grand_score: int = field(
        default_factory=lambda: int(os.getenv("TWENTY_ONE_GRAND_SCORE", "5"))
    )
    dealer_stands_on: int = field(
        default_factory=lambda: int(os.getenv("TWENTY_ONE_DEALER_STANDS_ON", "17"))
    )
    cash_per_point: int = field(
        default_factory=lambda: int(os.getenv("TWENTY_ONE_CASH_PER_POINT", "100"))
    )

    def to_rules(self) -> TableRules:
        """Build validated table rules from this configuration."""
        return TableRules(
            dealer_stands_on=self.dealer_stands_on,
            grand_score=self.grand_score,
            cash_per_point=self.cash_per_point,
        )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    pacing_delay: float = field(
        default_factory=lambda: float(os.getenv("TWENTY_ONE_DELAY", "0.6"))
    )  # Seconds between table announcements, 0 disables

    game: GameConfig = field(default_factory=GameConfig)

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debugging, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level


# Global configuration instance
config = AppConfig()
