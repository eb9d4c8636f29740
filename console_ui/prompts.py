"""Line-based prompts that repeat until they get a usable answer."""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

HIT_OR_STAY = {"h": True, "s": False}
YES_OR_NO = {"y": True, "n": False}


class Prompter:
    """Asks the human player for their name and decisions."""

    def __init__(self, read: InputFunc | None = None, write: OutputFunc | None = None) -> None:
        """
        Initialize the prompter.

        Args:
            read: Shows a prompt and returns one line of input (input by default)
            write: Prints one line of output (print by default)
        """
        self._read = read or input
        self._write = write or print

    def ask_name(self) -> str:
        """Ask for a non-empty player name."""
        while True:
            name = self._read("What's your name? ").strip()
            if name:
                return name
            self._write("Sorry, you must enter a name.")

    def ask_hit(self, points: int) -> bool:
        """Ask whether to hit at the given total. Returns True to hit."""
        return self._ask_choice(f"You have {points}. (h)it or (s)tay? ", HIT_OR_STAY)

    def ask_play_again(self) -> bool:
        """Ask whether to play another round."""
        return self._ask_choice("Play another round? (y/n) ", YES_OR_NO)

    def _ask_choice(self, question: str, choices: dict[str, bool]) -> bool:
        """Repeat the question until the answer starts with a known letter."""
        expected = " or ".join(f"'{letter}'" for letter in choices)
        while True:
            answer = self._read(question).strip()
            if answer and answer[0] in choices:
                return choices[answer[0]]
            logger.debug("Unrecognized answer %r", answer)
            self._write(f"Sorry, please answer {expected}.")
