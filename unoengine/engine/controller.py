"""UNO rules: turn sequencing, legal plays and the game state machine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

from unoengine.engine.card import Card, CardKind, Color
from unoengine.engine.deck import Deck
from unoengine.engine.errors import (
    DeckExhausted,
    GameNotActive,
    InvalidColor,
    InvalidConfiguration,
    InvalidPlay,
)
from unoengine.engine.game_state import GameState, Observer
from unoengine.engine.player import Player

logger = logging.getLogger(__name__)

DRAW = "draw"
Choice = Union[int, str]  # hand index or DRAW

MIN_PLAYERS = 2
MAX_PLAYERS = 10
HAND_SIZE = 7


class GamePhase(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"


class TurnAction(str, Enum):
    PENALTY = "penalty"  # forced draw from a draw-two / wild-draw-four
    DRAW = "draw"
    PLAY = "play"


@dataclass(frozen=True)
class TurnResult:
    """What happened during one call to play_turn()."""

    player: str
    action: TurnAction
    cards: tuple[Card, ...] = ()
    index: Optional[int] = None


class TurnController:
    """Runs one UNO game: owns its deck and state, validates and applies turns.

    Every public method completes or rejects synchronously; observers have
    been notified by the time it returns.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self.deck = Deck(rng=self._rng)
        self.state = GameState(players=[])
        self.phase = GamePhase.NOT_STARTED
        self.winner: Optional[Player] = None

    def initialize_game(
        self,
        player_count: int,
        human_count: int,
        names: Optional[Sequence[str]] = None,
    ) -> GameState:
        """Seat players, deal 7 cards each and flip the opening discard."""
        if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
            raise InvalidConfiguration(
                f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}",
                player_count=player_count,
            )
        if not 1 <= human_count <= player_count:
            raise InvalidConfiguration(
                "Human player count must be between 1 and the player count",
                human_count=human_count,
                player_count=player_count,
            )
        if names is not None and len(names) != player_count:
            raise InvalidConfiguration("Need one name per player", names=list(names))

        players = [Player(f"Player {i + 1}", is_human=True) for i in range(human_count)]
        players += [Player(f"AI {i + 1}", is_human=False) for i in range(player_count - human_count)]
        if names is not None:
            for player, name in zip(players, names):
                player.name = name

        self.deck.reset()
        for _ in range(HAND_SIZE):
            for player in players:
                player.draw_card(self.deck.draw())

        # Opening card must not be wild; flipped wilds are set aside.
        first = self.deck.draw()
        while first.is_wild:
            self.deck.set_aside.append(first)
            first = self.deck.draw()
        self.deck.add_to_discard(first)

        self.state = GameState(players=players, observers=self.state.observers)
        self.winner = None
        self.phase = GamePhase.RUNNING
        self.state.record(f"Game started with {player_count} players, first card {first}")
        self.state.set_top_card(first)
        return self.state

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    def is_running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    def get_winner(self) -> Optional[Player]:
        return self.winner

    def add_observer(self, observer: Observer) -> None:
        self.state.add_observer(observer)

    def remove_observer(self, observer: Observer) -> None:
        self.state.remove_observer(observer)

    def card_count(self) -> int:
        """Cards in the deck (both piles and set-aside) plus every hand."""
        return self.deck.card_count() + sum(p.hand_size for p in self.state.players)

    def legal_choices(self) -> List[Choice]:
        """Choices the current player may pass to play_turn()."""
        if not self.is_running():
            return []
        if self.state.pending_draw > 0:
            return [DRAW]
        top = self.state.top_card
        return [*self.current_player.valid_indices(top), DRAW]

    def play_turn(self, choice: Choice) -> TurnResult:
        """Play one turn for the current player.

        ``choice`` is a hand index or DRAW. It is ignored while the player owes
        a draw penalty.
        """
        self._require_running()
        state = self.state
        player = state.current_player

        if state.pending_draw > 0:
            count = state.pending_draw
            drawn = self._draw_cards(player, count)
            state.pending_draw = 0
            state.record(f"{player.name} drew {count} cards (penalty)")
            state.advance_turn()
            return TurnResult(player.name, TurnAction.PENALTY, tuple(drawn))

        if choice == DRAW:
            # Drawing ends the turn even if the drawn card is playable.
            drawn = self._draw_cards(player, 1)
            state.record(f"{player.name} drew a card")
            state.advance_turn()
            return TurnResult(player.name, TurnAction.DRAW, tuple(drawn))

        index = self._validate_play(player, choice)
        card = player.play_card(index)
        self.deck.add_to_discard(card)
        state.set_top_card(card)
        card.execute(state)

        if player.has_won():
            self.phase = GamePhase.FINISHED
            self.winner = player
            state.record(f"{player.name} played {card} and WON!")
            state.notify()
            return TurnResult(player.name, TurnAction.PLAY, (card,), index)

        state.record(f"{player.name} played {card}")
        if card.kind is not CardKind.SKIP:
            state.advance_turn()
        return TurnResult(player.name, TurnAction.PLAY, (card,), index)

    def select_color(self, color: Union[Color, str]) -> None:
        """Resolve the color of the wild card on top of the discard pile."""
        self._require_running()
        try:
            color = Color(color)
        except ValueError as e:
            raise InvalidColor(f"Unknown color: {color!r}", color=color) from e
        if color is Color.WILD:
            raise InvalidColor(color=color)

        top = self.state.top_card
        if top is None or not self.state.color_pending:
            raise InvalidColor("No color choice is pending", color=color)

        top.set_color(color)
        self.state.color_pending = False
        self.state.record(f"Color changed to {color.value}")
        self.state.notify()

    def make_ai_move(self) -> TurnResult:
        """Play the current player's turn with a uniformly random legal move."""
        self._require_running()
        state = self.state
        if state.pending_draw > 0:
            return self.play_turn(DRAW)

        valid = state.current_player.valid_indices(state.top_card)
        if not valid:
            return self.play_turn(DRAW)

        result = self.play_turn(self._rng.choice(valid))
        if self.is_running() and state.color_pending:
            self.select_color(self._rng.choice(Color.playable()))
        return result

    def _require_running(self) -> None:
        if self.phase is not GamePhase.RUNNING:
            raise GameNotActive(self.phase.value)

    def _validate_play(self, player: Player, choice: Choice) -> int:
        if isinstance(choice, bool) or not isinstance(choice, int):
            raise InvalidPlay(f"Expected a card index or {DRAW!r}, got {choice!r}", player=player.name)
        if not 0 <= choice < player.hand_size:
            raise InvalidPlay("Card index out of range", index=choice, player=player.name)
        card = player.hand[choice]
        top = self.state.top_card
        if not card.can_play_on(top):
            raise InvalidPlay(f"{card} cannot be played on {top}", index=choice, player=player.name)
        return choice

    def _draw_cards(self, player: Player, count: int) -> List[Card]:
        drawn: List[Card] = []
        try:
            for _ in range(count):
                card = self.deck.draw()
                player.draw_card(card)
                drawn.append(card)
        except DeckExhausted:
            logger.error("Deck exhausted while %s was drawing; the game cannot continue", player.name)
            self.phase = GamePhase.FINISHED
            self.state.notify()
            raise
        return drawn


def init_game(
    player_count: int,
    human_count: int = 1,
    seed: Optional[int] = None,
    names: Optional[Sequence[str]] = None,
) -> TurnController:
    """Create a controller and start a game on it."""
    controller = TurnController(seed=seed)
    controller.initialize_game(player_count, human_count, names=names)
    return controller
