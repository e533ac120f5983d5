"""Errors raised by the engine."""

from collections.abc import Sequence


class IllegalAction(Exception):
    """The action is not available from the current position."""

    def __init__(self, action: str, available: Sequence[str] = ()):
        self.action = action
        self.available = tuple(available)
        if self.available:
            hint = "available actions are: " + ", ".join(self.available)
        else:
            hint = "no actions are available"
        super().__init__(f"Illegal action {action!r}; {hint}")


class GameFinished(IllegalAction):
    """An action was attempted after the game was won or lost."""
