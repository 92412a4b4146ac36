"""Exceptions raised by the UNO engine.

Every error is signaled to the immediate caller; the engine never retries.
"""

from typing import Any, Optional


class UnoError(Exception):
    """Base class for all engine errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidConfiguration(UnoError, ValueError):
    """Bad player/human counts or restored state. Setup must not proceed."""

    def __init__(self, message: str = "Invalid game configuration", **details: Any):
        super().__init__(message, details)


class InvalidPlay(UnoError):
    """Illegal card or hand index. Nothing was mutated; re-prompt the player."""

    def __init__(
        self,
        message: str = "Invalid play",
        index: Optional[int] = None,
        player: Optional[str] = None,
    ):
        details: dict[str, Any] = {}
        if index is not None:
            details["index"] = index
        if player is not None:
            details["player"] = player
        super().__init__(message, details)
        self.index = index
        self.player = player


class InvalidIndex(UnoError, IndexError):
    """Hand index outside [0, hand size)."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Invalid card index: {index}", {"index": index, "size": size})
        self.index = index
        self.size = size


class InvalidColor(UnoError, ValueError):
    """Wild chosen as a resolved color, or no color choice to resolve."""

    def __init__(self, message: str = "Cannot select WILD as a color", color: Any = None):
        super().__init__(message, {"color": str(color)} if color is not None else None)
        self.color = color


class GameNotActive(UnoError):
    """Action attempted while the game is not running."""

    def __init__(self, phase: Any = None):
        super().__init__("Game is not running", {"phase": str(phase)} if phase is not None else None)
        self.phase = phase


class DeckExhausted(UnoError):
    """No card can be drawn even after reshuffling the discard pile."""

    def __init__(self, discard_size: int = 0):
        super().__init__("No cards left to draw", {"discard_size": discard_size})
        self.discard_size = discard_size
