"""Unit tests for game history logging."""

from unoengine.engine import DRAW, init_game


def test_history_initialization():
    controller = init_game(2)
    assert len(controller.state.history) == 1
    assert controller.state.history[0].startswith("Game started with 2 players")


def test_history_records_play(rigged):
    controller = rigged([["red_5", "red_1"], ["blue_1"]], "red_7")
    start = len(controller.state.history)
    controller.play_turn(0)

    assert len(controller.state.history) == start + 1
    assert controller.state.history[-1] == "Player 1 played red_5"


def test_history_records_draw():
    controller = init_game(2, seed=42)
    controller.play_turn(DRAW)
    assert controller.state.history[-1] == "Player 1 drew a card"


def test_history_records_penalty_and_color(rigged):
    controller = rigged([["wild_draw_four", "red_1"], ["blue_1"]], "red_7")
    controller.play_turn(0)
    controller.select_color("yellow")
    controller.play_turn(DRAW)

    assert controller.state.history[-3:] == [
        "Player 1 played wild_draw_four",
        "Color changed to yellow",
        "AI 1 drew 4 cards (penalty)",
    ]


def test_history_records_win(rigged):
    controller = rigged([["red_5"], ["blue_1"]], "red_7")
    controller.play_turn(0)
    assert controller.state.history[-1] == "Player 1 played red_5 and WON!"


def test_history_persists_across_turns():
    controller = init_game(2, seed=42)
    start = len(controller.state.history)

    # Turn 1: Player 1 plays if it can, otherwise draws
    legal = controller.legal_choices()
    controller.play_turn(legal[0])
    if controller.state.color_pending:
        controller.select_color("red")

    # Turn 2: whoever is up now draws
    if controller.is_running():
        controller.play_turn(DRAW)

    assert len(controller.state.history) >= start + 2
    assert controller.state.history[start].startswith("Player 1 ")
