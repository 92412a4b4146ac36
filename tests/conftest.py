"""Shared fixtures: build cards from short names and games with chosen hands."""

from typing import Optional, Sequence

import pytest

from unoengine.engine import Card, CardKind, Color, TurnController


def parse_card(text: str) -> Card:
    """'red_5' -> Red 5, 'blue_skip' -> Blue Skip, 'wild' -> Wild."""
    if text in ("wild", "wild_draw_four"):
        return Card(Color.WILD, CardKind(text))
    color, _, rest = text.partition("_")
    if rest.isdigit():
        return Card(Color(color), CardKind.NUMBER, int(rest))
    return Card(Color(color), CardKind(rest))


def rig_game(
    hands: Sequence[Sequence[str]],
    top: str,
    draw_pile: Optional[Sequence[str]] = None,
    seed: int = 0,
) -> TurnController:
    """Start a game, then replace every hand and the discard pile."""
    controller = TurnController(seed=seed)
    controller.initialize_game(len(hands), 1)
    for player, cards in zip(controller.state.players, hands):
        player.hand = [parse_card(c) for c in cards]
    top_card = parse_card(top)
    controller.deck.discard_pile = [top_card]
    controller.state.top_card = top_card
    if draw_pile is not None:
        controller.deck.draw_pile = [parse_card(c) for c in draw_pile]
    return controller


@pytest.fixture(scope="session")
def make_card():
    return parse_card


@pytest.fixture(scope="session")
def rigged():
    return rig_game
