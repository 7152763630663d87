"""Terminal display for game state and guess results."""

from __future__ import annotations

import click

from higherlower.core.card import Card, Color, color, display
from higherlower.core.game import MAX_SCORE, TOTAL_CARDS, progress_percent, remaining_count
from higherlower.core.state import GameState, GameStatus, GuessResult


def format_card(card: Card, use_color: bool = True) -> str:
    """Format card with unicode suit symbol, red cards styled red."""
    text = display(card)
    if not use_color:
        return text
    if color(card) == Color.RED:
        return click.style(text, fg="red", bold=True)
    return click.style(text, bold=True)


def welcome_text() -> str:
    """Rules banner shown at the start of a session."""
    lines = [
        "=== HIGHER OR LOWER ===",
        "",
        "Guess if the next card will be higher or lower than the current one.",
        "Equal cards always count as a correct guess.",
        "Jokers are secretly high (above an ace) or low (below a two).",
        f"Complete all {TOTAL_CARDS} cards to win!",
    ]
    return "\n".join(lines)


class StateRenderer:
    """Renders game state to terminal."""

    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def render(self, state: GameState, debug: bool = False) -> str:
        """Render header, current card and remaining count."""
        lines: list[str] = []

        lines.append(
            f"Score: {state.score} | Best: {state.best_score} | "
            f"Cards: {state.cards_played}/{TOTAL_CARDS} ({progress_percent(state)}%)"
        )
        lines.append("")

        if state.current_card is not None:
            lines.append(f"Current card: {format_card(state.current_card, self.use_color)}")
        else:
            lines.append("Current card: (none)")

        lines.append(f"Remaining cards: {remaining_count(state)}")

        # Debug mode
        if debug:
            lines.append("")
            lines.append("--- Debug Info ---")
            if state.deck:
                lines.append(f"Next card: {format_card(state.deck[0], self.use_color)}")
            lines.append(f"Status: {state.status.value}")

        return "\n".join(lines)

    def render_result(self, result: GuessResult) -> str:
        """Render the reveal after a guess."""
        verdict = "Correct!" if result.correct else "Wrong!"
        if self.use_color:
            verdict = click.style(verdict, fg="green" if result.correct else "red")
        return f"{verdict} The card was: {format_card(result.next_card, self.use_color)}"

    def render_game_over(self, state: GameState) -> str:
        """Render final score once the game has ended."""
        lines: list[str] = []

        if state.status == GameStatus.WON:
            lines.append("=== CONGRATULATIONS! You completed the entire deck! ===")
        else:
            lines.append("=== Game Over! ===")

        lines.append(f"Final Score: {state.score}/{MAX_SCORE}")
        lines.append(f"Best Score: {state.best_score}")

        if state.score > 0 and state.score == state.best_score:
            lines.append("New Best Score!")

        return "\n".join(lines)
