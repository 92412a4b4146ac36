"""Game state for UNO."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from unoengine.engine.card import Card
from unoengine.engine.errors import InvalidConfiguration
from unoengine.engine.player import Player

logger = logging.getLogger(__name__)

CLOCKWISE = 1
COUNTER_CLOCKWISE = -1

Observer = Callable[["GameState"], None]


@dataclass(frozen=True)
class SavedTurnState:
    """The minimum needed to resume turn sequencing.

    Hands and deck contents are not part of it.
    """

    current_index: int
    clockwise: bool
    pending_draw: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_index": self.current_index,
            "clockwise": self.clockwise,
            "pending_draw": self.pending_draw,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SavedTurnState":
        try:
            clockwise = data["clockwise"]
            if isinstance(clockwise, str):
                clockwise = clockwise.strip().lower() in ("true", "1", "yes")
            return cls(
                current_index=int(data["current_index"]),
                clockwise=bool(clockwise),
                pending_draw=int(data["pending_draw"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidConfiguration(f"Malformed saved state: {e}", data=data) from e


@dataclass(eq=False)
class GameState:
    """Mutable UNO game state, observable by the presentation layer.

    Observers are called synchronously with this object (not a copy) and must
    not mutate it.
    """

    players: List[Player]
    current_index: int = 0
    direction: int = CLOCKWISE  # 1 = clockwise, -1 = counter-clockwise
    pending_draw: int = 0  # cards the current player must draw before acting
    color_pending: bool = False  # a played wild is waiting for its color
    top_card: Optional[Card] = None
    history: List[str] = field(default_factory=list)
    observers: List[Observer] = field(default_factory=list, repr=False)

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    @property
    def clockwise(self) -> bool:
        return self.direction == CLOCKWISE

    def add_observer(self, observer: Observer) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self.observers:
            self.observers.remove(observer)

    def notify(self) -> None:
        for observer in list(self.observers):
            observer(self)

    def next_index(self) -> int:
        """Seat that advance_turn() would move to."""
        return (self.current_index + self.direction) % len(self.players)

    def advance_turn(self) -> None:
        self.current_index = self.next_index()
        self.notify()

    def reverse_direction(self) -> None:
        self.direction = -self.direction
        # With two players a reverse acts like a skip.
        if len(self.players) == 2:
            self.advance_turn()

    def set_top_card(self, card: Card) -> None:
        self.top_card = card
        self.notify()

    def record(self, event: str) -> None:
        """Append an event to the game history."""
        self.history.append(event)
        logger.info(event)

    def snapshot(self) -> SavedTurnState:
        return SavedTurnState(
            current_index=self.current_index,
            clockwise=self.clockwise,
            pending_draw=self.pending_draw,
        )

    def restore(self, saved: SavedTurnState) -> None:
        """Resume turn sequencing from a saved snapshot."""
        if not 0 <= saved.current_index < len(self.players):
            raise InvalidConfiguration(
                "Saved player index out of range",
                current_index=saved.current_index,
                player_count=len(self.players),
            )
        if saved.pending_draw < 0:
            raise InvalidConfiguration("Saved pending draw is negative", pending_draw=saved.pending_draw)
        self.current_index = saved.current_index
        self.direction = CLOCKWISE if saved.clockwise else COUNTER_CLOCKWISE
        self.pending_draw = saved.pending_draw
        self.notify()


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info. Cards are copies, so
    changing them does not touch the game.
    """

    seat: int
    my_hand: List[Card]
    top_card: Optional[Card]
    current_player: str
    direction: int
    pending_draw: int
    color_pending: bool
    player_order: tuple[str, ...]
    num_cards_per_player: Dict[str, int]  # player name -> hand size
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, seat: int) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        return cls(
            seat=seat,
            my_hand=[copy.copy(c) for c in state.players[seat].hand],
            top_card=copy.copy(state.top_card),
            current_player=state.current_player.name,
            direction=state.direction,
            pending_draw=state.pending_draw,
            color_pending=state.color_pending,
            player_order=tuple(p.name for p in state.players),
            num_cards_per_player={p.name: p.hand_size for p in state.players},
            history=list(state.history[-10:]),  # Last 10 events
        )
