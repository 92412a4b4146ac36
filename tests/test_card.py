"""Unit tests for cards and play legality."""

import pytest

from unoengine.engine import Card, CardKind, Color, InvalidColor


@pytest.mark.parametrize(
    "card, top, legal",
    [
        ("red_5", "red_7", True),
        ("red_5", "blue_5", True),
        ("red_5", "blue_7", False),
        ("red_5", "red_skip", True),
        ("red_5", "blue_skip", False),
        ("red_0", "green_0", True),
        ("red_skip", "blue_skip", True),
        ("red_skip", "red_3", True),
        ("red_skip", "blue_reverse", False),
        ("red_skip", "blue_3", False),
        ("green_draw_two", "yellow_draw_two", True),
        ("green_reverse", "green_draw_two", True),
    ],
)
def test_can_play_on(make_card, card: str, top: str, legal: bool) -> None:
    assert make_card(card).can_play_on(make_card(top)) is legal


@pytest.mark.parametrize("wild", ["wild", "wild_draw_four"])
@pytest.mark.parametrize("top", ["red_5", "blue_skip", "green_draw_two", "wild", "wild_draw_four"])
def test_wild_cards_always_playable(make_card, wild: str, top: str) -> None:
    assert make_card(wild).can_play_on(make_card(top))


def test_number_card_matches_resolved_wild_color(make_card) -> None:
    top = make_card("wild")
    top.set_color(Color.RED)
    assert make_card("red_5").can_play_on(top)
    assert not make_card("blue_5").can_play_on(top)


def test_unresolved_wild_only_accepts_wilds(make_card) -> None:
    top = make_card("wild_draw_four")
    assert not make_card("red_5").can_play_on(top)
    assert not make_card("red_skip").can_play_on(top)
    assert make_card("wild").can_play_on(top)


def test_anything_plays_on_empty_discard(make_card) -> None:
    assert make_card("yellow_9").can_play_on(None)


@pytest.mark.parametrize(
    "color, kind, rank",
    [
        (Color.WILD, CardKind.NUMBER, 5),
        (Color.RED, CardKind.WILD, None),
        (Color.BLUE, CardKind.WILD_DRAW_FOUR, None),
        (Color.RED, CardKind.NUMBER, None),
        (Color.RED, CardKind.NUMBER, 10),
        (Color.RED, CardKind.SKIP, 3),
        (Color.WILD, CardKind.SKIP, None),
    ],
)
def test_invalid_cards_rejected(color, kind, rank) -> None:
    with pytest.raises(ValueError):
        Card(color, kind, rank)


def test_card_accepts_plain_strings() -> None:
    card = Card("red", "number", 3)
    assert card.color is Color.RED
    assert card.kind is CardKind.NUMBER


def test_set_color_on_wild(make_card) -> None:
    card = make_card("wild")
    card.set_color(Color.GREEN)
    assert card.color is Color.GREEN
    card.reset_color()
    assert card.color is Color.WILD


def test_set_color_rejects_wild_sentinel(make_card) -> None:
    card = make_card("wild_draw_four")
    with pytest.raises(InvalidColor):
        card.set_color(Color.WILD)
    assert card.color is Color.WILD


def test_set_color_rejects_non_wild_cards(make_card) -> None:
    card = make_card("red_5")
    with pytest.raises(InvalidColor):
        card.set_color(Color.BLUE)
    assert card.color is Color.RED


def test_str(make_card) -> None:
    assert str(make_card("red_5")) == "red_5"
    assert str(make_card("blue_skip")) == "blue_skip"
    assert str(make_card("wild")) == "wild"
    wd4 = make_card("wild_draw_four")
    wd4.set_color(Color.YELLOW)
    assert str(wd4) == "wild_draw_four(yellow)"


def test_playable_colors_exclude_wild() -> None:
    assert Color.WILD not in Color.playable()
    assert len(Color.playable()) == 4
