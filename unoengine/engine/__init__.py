"""Game engine for UNO."""

from unoengine.engine.card import Card, CardKind, Color
from unoengine.engine.controller import (
    DRAW,
    Choice,
    GamePhase,
    TurnAction,
    TurnController,
    TurnResult,
    init_game,
)
from unoengine.engine.deck import DECK_SIZE, Deck, standard_cards
from unoengine.engine.effects import apply_effect, describe_effect
from unoengine.engine.errors import (
    DeckExhausted,
    GameNotActive,
    InvalidColor,
    InvalidConfiguration,
    InvalidIndex,
    InvalidPlay,
    UnoError,
)
from unoengine.engine.game_state import GameState, PlayerView, SavedTurnState
from unoengine.engine.player import Player

__all__ = [
    "Card",
    "CardKind",
    "Color",
    "DRAW",
    "Choice",
    "GamePhase",
    "TurnAction",
    "TurnController",
    "TurnResult",
    "init_game",
    "DECK_SIZE",
    "Deck",
    "standard_cards",
    "apply_effect",
    "describe_effect",
    "DeckExhausted",
    "GameNotActive",
    "InvalidColor",
    "InvalidConfiguration",
    "InvalidIndex",
    "InvalidPlay",
    "UnoError",
    "GameState",
    "PlayerView",
    "SavedTurnState",
    "Player",
]
