"""Human input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from higherlower.core.state import Guess

GUESS_ALIASES = {
    "h": Guess.HIGHER,
    "higher": Guess.HIGHER,
    "+": Guess.HIGHER,
    "l": Guess.LOWER,
    "lower": Guess.LOWER,
    "-": Guess.LOWER,
}


@dataclass
class InputResult:
    """Result of human input."""

    guess: Optional[Guess] = None
    quit: bool = False
    error: Optional[str] = None


class HumanPlayer:
    """Handles human player input."""

    def get_guess(self, prompt: str = "Higher or lower? [h/l, q to quit] > ") -> InputResult:
        """Get a guess from human input.

        Returns:
            InputResult with guess, quit flag, or error
        """
        try:
            raw = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        if raw in ("q", "quit", "exit"):
            return InputResult(quit=True)

        if raw in GUESS_ALIASES:
            return InputResult(guess=GUESS_ALIASES[raw])

        return InputResult(error=f"Invalid input '{raw}'. Enter 'h', 'l' or 'q'.")

    def get_yes_no(self, prompt: str, default: Optional[bool] = None) -> Optional[bool]:
        """Get yes/no response.

        Args:
            prompt: Question to show
            default: Answer used for an empty or unrecognised reply

        Returns:
            True for yes, False for no, None for quit/cancel
        """
        try:
            raw = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return None

        if raw.startswith("y"):
            return True
        if raw.startswith("n"):
            return False
        return default
