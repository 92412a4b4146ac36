"""Card, Color and CardKind types for UNO."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from unoengine.engine.errors import InvalidColor

if TYPE_CHECKING:
    from unoengine.engine.game_state import GameState


class Color(str, Enum):
    """Card colors. WILD is the color of a wild card whose color is not chosen yet."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    WILD = "wild"

    @classmethod
    def playable(cls) -> tuple["Color", ...]:
        """The four colors a wild card may resolve to."""
        return (cls.RED, cls.BLUE, cls.GREEN, cls.YELLOW)


class CardKind(str, Enum):
    """Card kinds."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"

    @property
    def is_wild(self) -> bool:
        return self in (CardKind.WILD, CardKind.WILD_DRAW_FOUR)

    @property
    def is_action(self) -> bool:
        return self in (CardKind.SKIP, CardKind.REVERSE, CardKind.DRAW_TWO)


@dataclass
class Card:
    """A UNO card.

    Number cards carry a rank 0-9. Action cards (skip, reverse, draw_two) carry
    a color and no rank. Wild cards start with color=WILD; their color is set
    once when the card is played and the player picks a color.
    """

    color: Color
    kind: CardKind
    rank: Optional[int] = None

    def __post_init__(self) -> None:
        self.color = Color(self.color)
        self.kind = CardKind(self.kind)
        if self.kind is CardKind.NUMBER:
            if self.rank is None or not 0 <= self.rank <= 9:
                raise ValueError(f"Number card rank must be between 0 and 9, got {self.rank}")
        elif self.rank is not None:
            raise ValueError(f"Only number cards have a rank: {self.kind.value}")
        if self.kind.is_wild and self.color is not Color.WILD:
            raise ValueError("Wild cards must be created with color=WILD")
        if not self.kind.is_wild and self.color is Color.WILD:
            raise ValueError("Non-wild cards must have a real color")

    @property
    def is_wild(self) -> bool:
        return self.kind.is_wild

    def can_play_on(self, top: Optional["Card"]) -> bool:
        """Check if this card can be played on top of ``top``."""
        if top is None or self.is_wild:
            return True
        if self.color is top.color:
            return True
        if self.kind is CardKind.NUMBER:
            return top.kind is CardKind.NUMBER and self.rank == top.rank
        return self.kind is top.kind

    def execute(self, state: "GameState") -> None:
        """Apply this card's effect to the game state."""
        from unoengine.engine.effects import apply_effect

        apply_effect(self.kind, state)

    def set_color(self, color: Color) -> None:
        """Resolve the color of a played wild card."""
        if color is Color.WILD:
            raise InvalidColor(color=color)
        if not self.is_wild:
            raise InvalidColor(f"Cannot recolor a {self.kind.value} card", color=color)
        self.color = color

    def reset_color(self) -> None:
        """Return a wild card to its unchosen color."""
        if self.is_wild:
            self.color = Color.WILD

    def __str__(self) -> str:
        if self.is_wild:
            if self.color is Color.WILD:
                return self.kind.value
            return f"{self.kind.value}({self.color.value})"
        if self.kind is CardKind.NUMBER:
            return f"{self.color.value}_{self.rank}"
        return f"{self.color.value}_{self.kind.value}"
