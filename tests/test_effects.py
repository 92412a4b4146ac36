"""Unit tests for the per-kind card effects."""

import pytest

from unoengine.engine import CardKind, GameState, Player, apply_effect, describe_effect
from unoengine.engine.effects import EFFECTS


def _state(n: int = 3) -> GameState:
    return GameState(players=[Player(f"p{i}") for i in range(n)])


def test_every_kind_has_an_effect() -> None:
    assert set(EFFECTS) == set(CardKind)
    for kind in CardKind:
        assert describe_effect(kind)


def test_number_has_no_effect() -> None:
    state = _state()
    apply_effect(CardKind.NUMBER, state)
    assert (state.current_index, state.direction, state.pending_draw, state.color_pending) == (0, 1, 0, False)


def test_skip_advances_once() -> None:
    state = _state()
    apply_effect(CardKind.SKIP, state)
    assert state.current_index == 1


def test_reverse_flips_direction() -> None:
    state = _state()
    apply_effect(CardKind.REVERSE, state)
    assert state.direction == -1
    assert state.current_index == 0


def test_reverse_with_two_players_advances() -> None:
    state = _state(2)
    apply_effect(CardKind.REVERSE, state)
    assert state.direction == -1
    assert state.current_index == 1


def test_draw_two_sets_pending_only() -> None:
    state = _state()
    apply_effect(CardKind.DRAW_TWO, state)
    assert state.pending_draw == 2
    assert state.current_index == 0
    assert not state.color_pending


@pytest.mark.parametrize("kind, pending", [(CardKind.WILD, 0), (CardKind.WILD_DRAW_FOUR, 4)])
def test_wild_effects_request_color(kind: CardKind, pending: int) -> None:
    state = _state()
    apply_effect(kind, state)
    assert state.color_pending
    assert state.pending_draw == pending
    assert state.current_index == 0


def test_card_execute_dispatches(make_card) -> None:
    state = _state()
    make_card("blue_draw_two").execute(state)
    assert state.pending_draw == 2
