"""Terminal front end for playing Higher or Lower."""

from higherlower.terminal.display import StateRenderer, format_card, welcome_text
from higherlower.terminal.input import HumanPlayer, InputResult
from higherlower.terminal.session import PlaySession, SessionConfig, SessionSummary

__all__ = [
    "StateRenderer",
    "format_card",
    "welcome_text",
    "HumanPlayer",
    "InputResult",
    "PlaySession",
    "SessionConfig",
    "SessionSummary",
]
