"""Card effects: one procedure per card kind."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from unoengine.engine.card import CardKind

if TYPE_CHECKING:
    from unoengine.engine.game_state import GameState


def _no_effect(state: "GameState") -> None:
    pass


def _skip(state: "GameState") -> None:
    # The controller does not advance again after a skip.
    state.advance_turn()


def _reverse(state: "GameState") -> None:
    state.reverse_direction()


def _draw_two(state: "GameState") -> None:
    state.pending_draw = 2


def _wild(state: "GameState") -> None:
    state.color_pending = True


def _wild_draw_four(state: "GameState") -> None:
    state.pending_draw = 4
    state.color_pending = True


EFFECTS: dict[CardKind, Callable[["GameState"], None]] = {
    CardKind.NUMBER: _no_effect,
    CardKind.SKIP: _skip,
    CardKind.REVERSE: _reverse,
    CardKind.DRAW_TWO: _draw_two,
    CardKind.WILD: _wild,
    CardKind.WILD_DRAW_FOUR: _wild_draw_four,
}

DESCRIPTIONS: dict[CardKind, str] = {
    CardKind.NUMBER: "No effect",
    CardKind.SKIP: "Turn passes immediately",
    CardKind.REVERSE: "Reverse direction of play",
    CardKind.DRAW_TWO: "Next player draws 2 cards and loses their turn",
    CardKind.WILD: "Choose a new color",
    CardKind.WILD_DRAW_FOUR: "Next player draws 4 cards and loses their turn; choose a new color",
}

_missing = set(CardKind) - set(EFFECTS)
if _missing:
    raise RuntimeError(f"No effect registered for: {sorted(k.value for k in _missing)}")


def apply_effect(kind: CardKind, state: "GameState") -> None:
    """Mutate ``state`` according to the effect of a card of ``kind``."""
    EFFECTS[kind](state)


def describe_effect(kind: CardKind) -> str:
    return DESCRIPTIONS[kind]
