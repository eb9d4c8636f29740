"""Main entry point for the console 21 game."""

import logging
import sys
from typing import Callable

from config import AppConfig, config as default_config
from core.game.match import MatchController
from core.participant import Player
from console_ui.display import ConsoleDisplay
from console_ui.prompts import Prompter

logger = logging.getLogger(__name__)


def build_match(
    prompter: Prompter,
    display_write: Callable[[str], None] = print,
    app_config: AppConfig = default_config,
) -> MatchController:
    """Wire the prompts, rules and display into a ready match."""
    rules = app_config.game.to_rules()
    player = Player(prompter.ask_name(), ask_hit=prompter.ask_hit, bust_limit=rules.bust_limit)

    match = MatchController(player, ask_play_again=prompter.ask_play_again, rules=rules)
    display = ConsoleDisplay(write=display_write, delay=app_config.pacing_delay)
    match.subscribe(display.handle_event)
    return match


def main() -> int:
    """Run one match at the terminal."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=default_config.effective_log_level,
    )

    try:
        match = build_match(Prompter())
        match.play()
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
        logger.debug("Input closed, leaving the table")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
