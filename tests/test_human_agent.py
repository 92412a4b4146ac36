"""Tests for the terminal agent."""

from unoengine.agents.human_agent import HumanAgent
from unoengine.engine import DRAW, Color, PlayerView


def _answers(monkeypatch, *replies: str) -> None:
    queue = list(replies)
    monkeypatch.setattr("builtins.input", lambda prompt="": queue.pop(0))


def test_prompt_shows_table_state(rigged, monkeypatch, capsys) -> None:
    controller = rigged([["red_1", "blue_2"], ["green_1"], ["green_2", "green_3"]], "red_9")
    controller.state.direction = -1
    view = PlayerView.from_state(controller.state, 0)
    _answers(monkeypatch, "0")

    assert HumanAgent("Player 1").choose_action(view, [0, DRAW], 0) == 0

    out = capsys.readouterr().out
    assert "Direction: counter-clockwise" in out
    assert "AI 1: 1" in out
    assert "AI 2: 2" in out
    assert "Player 1: 2" not in out


def test_prompt_shows_pending_color(rigged, monkeypatch, capsys) -> None:
    controller = rigged([["blue_2"], ["green_1"]], "red_9")
    controller.state.color_pending = True
    view = PlayerView.from_state(controller.state, 0)
    _answers(monkeypatch, "d")

    assert HumanAgent().choose_action(view, [DRAW], 0) == DRAW
    assert "color not chosen yet" in capsys.readouterr().out


def test_invalid_input_is_reprompted(rigged, monkeypatch) -> None:
    controller = rigged([["red_1", "blue_2"], ["green_1"]], "red_9")
    view = PlayerView.from_state(controller.state, 0)
    _answers(monkeypatch, "x", "1", "0")

    assert HumanAgent().choose_action(view, [0, DRAW], 0) == 0


def test_end_of_input_draws(rigged, monkeypatch) -> None:
    controller = rigged([["red_1"], ["green_1"]], "red_9")
    view = PlayerView.from_state(controller.state, 0)

    def closed(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    agent = HumanAgent()
    assert agent.choose_action(view, [0, DRAW], 0) == DRAW
    assert agent.choose_color(view, 0) is Color.RED


def test_choose_color_by_name_or_number(rigged, monkeypatch) -> None:
    controller = rigged([["red_1"], ["green_1"]], "red_9")
    view = PlayerView.from_state(controller.state, 0)
    _answers(monkeypatch, "purple", "blue", "3")

    agent = HumanAgent()
    assert agent.choose_color(view, 0) is Color.BLUE
    assert agent.choose_color(view, 0) is Color.playable()[3]
