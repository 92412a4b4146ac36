"""Unit tests for player hands."""

import pytest

from unoengine.engine import InvalidIndex, Player


def test_draw_and_play(make_card) -> None:
    player = Player("p1", is_human=True)
    player.draw_card(make_card("red_1"))
    player.draw_card(make_card("blue_2"))
    assert player.hand_size == 2

    card = player.play_card(0)
    assert str(card) == "red_1"
    assert [str(c) for c in player.hand] == ["blue_2"]


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_play_card_out_of_range(make_card, index: int) -> None:
    player = Player("p1", hand=[make_card("red_1"), make_card("blue_2")])
    with pytest.raises(InvalidIndex):
        player.play_card(index)
    assert player.hand_size == 2


def test_invalid_index_is_an_index_error() -> None:
    with pytest.raises(IndexError):
        Player("p1").play_card(0)


def test_valid_indices_in_hand_order(make_card) -> None:
    player = Player("p1", hand=[make_card(c) for c in ["red_1", "blue_7", "wild", "green_7", "red_skip"]])
    top = make_card("red_7")
    assert player.valid_indices(top) == [0, 1, 2, 3, 4]
    assert player.valid_indices(make_card("yellow_2")) == [2]
    assert player.has_valid_card(make_card("yellow_2"))
    assert not Player("p2", hand=[make_card("blue_1")]).has_valid_card(top)


def test_has_won(make_card) -> None:
    player = Player("p1", hand=[make_card("red_1")])
    assert not player.has_won()
    player.play_card(0)
    assert player.has_won()
