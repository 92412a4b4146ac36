"""Save and load turn sequencing to JSON files.

A save holds what ``GameState.snapshot()`` captures (current player,
direction, pending draw). Hands and deck contents are not saved.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from unoengine.engine.errors import InvalidConfiguration
from unoengine.engine.game_state import GameState, SavedTurnState

logger = logging.getLogger(__name__)

SAVE_VERSION = 1
SAVE_DIR = "saves"
SAVE_SUFFIX = ".json"

PathLike = Union[str, Path]


def _save_path(name: str, save_dir: PathLike) -> Path:
    if not name.endswith(SAVE_SUFFIX):
        name += SAVE_SUFFIX
    return Path(save_dir) / name


def save_game(state: GameState, name: Optional[str] = None, save_dir: PathLike = SAVE_DIR) -> Path:
    """Write the turn state to ``save_dir``; returns the file written.

    Without a name the file is called ``uno_save_<timestamp>.json``.
    """
    directory = Path(save_dir)
    directory.mkdir(parents=True, exist_ok=True)
    if not name:
        name = "uno_save_" + datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    path = _save_path(name, directory)

    data = {
        "version": SAVE_VERSION,
        "saved_at": datetime.now().isoformat(timespec="seconds"),
        "players": [p.name for p in state.players],
        "turn": state.snapshot().to_dict(),
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

    logger.info("Game saved to %s", path)
    return path


def load_game(name: str, save_dir: PathLike = SAVE_DIR) -> SavedTurnState:
    """Read a save written by save_game()."""
    path = _save_path(name, save_dir)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise InvalidConfiguration(f"No such save: {name}", path=str(path)) from e
    except json.JSONDecodeError as e:
        raise InvalidConfiguration(f"Save file is not valid JSON: {e}", path=str(path)) from e

    if not isinstance(data, dict) or data.get("version") != SAVE_VERSION:
        raise InvalidConfiguration("Unsupported save version", path=str(path))
    saved = SavedTurnState.from_dict(data.get("turn") or {})
    logger.info("Game loaded from %s", path)
    return saved


def available_saves(save_dir: PathLike = SAVE_DIR) -> List[str]:
    """Save names in ``save_dir``, sorted by name."""
    directory = Path(save_dir)
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob(f"*{SAVE_SUFFIX}"))
