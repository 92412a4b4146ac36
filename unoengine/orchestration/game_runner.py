"""Single game runner."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from unoengine.engine import (
    DRAW,
    DeckExhausted,
    InvalidPlay,
    PlayerView,
    SavedTurnState,
    TurnController,
    TurnResult,
)
from unoengine.engine.game_state import Observer

if TYPE_CHECKING:
    from unoengine.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)

MAX_PROMPTS = 3


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_names: tuple[str, ...]


class GameRunner:
    """Runs a single UNO game to completion.

    Seats listed in ``agents`` are driven by that agent; every other seat
    uses the controller's built-in random AI. ``resume`` puts turn order,
    direction and any pending draw back as saved, after the deal.
    """

    def __init__(
        self,
        player_count: int,
        human_count: int = 1,
        agents: Optional[dict[int, "AgentProtocol"]] = None,
        seed: Optional[int] = None,
        max_turns: int = 1000,
        ai_delay: float = 0.0,
        names: Optional[Sequence[str]] = None,
        observers: Sequence[Observer] = (),
        resume: Optional[SavedTurnState] = None,
    ):
        self._player_count = player_count
        self._human_count = human_count
        self._agents = dict(agents or {})
        self._seed = seed
        self._max_turns = max_turns
        self._ai_delay = ai_delay
        self._names = names
        self._observers = list(observers)
        self._resume = resume
        self.controller: Optional[TurnController] = None

    def run(self) -> GameResult:
        """Run the game and return the result."""
        controller = TurnController(seed=self._seed)
        for observer in self._observers:
            controller.add_observer(observer)
        self.controller = controller
        state = controller.initialize_game(self._player_count, self._human_count, names=self._names)
        if self._resume is not None:
            state.restore(self._resume)
        num_turns = 0

        while controller.is_running() and num_turns < self._max_turns:
            seat = state.current_index
            agent = self._agents.get(seat)
            try:
                if agent is None:
                    if self._ai_delay:
                        time.sleep(self._ai_delay)
                    controller.make_ai_move()
                else:
                    self._agent_turn(controller, agent, seat)
            except DeckExhausted as e:
                logger.error("Game abandoned: %s", e)
                break
            num_turns += 1

        if controller.is_running():
            logger.warning("Game stopped after %d turns without a winner", num_turns)

        winner = controller.get_winner()
        return GameResult(
            winner=winner.name if winner else None,
            num_turns=num_turns,
            player_names=tuple(p.name for p in state.players),
        )

    def _agent_turn(self, controller: TurnController, agent: "AgentProtocol", seat: int) -> TurnResult:
        state = controller.state
        for _ in range(MAX_PROMPTS):
            legal = controller.legal_choices()
            choice = agent.choose_action(PlayerView.from_state(state, seat), legal, seat)
            if choice is None:
                choice = DRAW
            try:
                result = controller.play_turn(choice)
            except InvalidPlay as e:
                logger.warning("%s chose an invalid move: %s", agent.name, e)
                continue
            if controller.is_running() and state.color_pending:
                controller.select_color(agent.choose_color(PlayerView.from_state(state, seat), seat))
            return result

        logger.warning("%s gave no valid move after %d prompts; playing for it", agent.name, MAX_PROMPTS)
        return controller.make_ai_move()
