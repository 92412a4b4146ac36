"""Runtime settings read from the environment.

The CLI calls ``load_dotenv()`` first, so values may also come from a
``.env`` file. Recognised variables:

- UNO_SEED: random seed for deck shuffles and AI choices
- UNO_AI_DELAY: seconds to pause before each AI turn (display only)
- UNO_MAX_TURNS: turn limit for a single game
- UNO_LOG_LEVEL / UNO_LOG_FILE: logging setup
- UNO_LLM_PROVIDER / UNO_LLM_MODEL: defaults for LLM-driven seats
- UNO_SAVE_DIR: directory for saved games
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _env_int(key: str, default: Optional[int]) -> Optional[int]:
    value = os.environ.get(key)
    if value is not None and value.strip():
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _env_float(key: str, default: float) -> float:
    value = os.environ.get(key)
    if value is not None and value.strip():
        try:
            return float(value)
        except ValueError:
            pass
    return default


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    ai_delay: float = 0.0
    max_turns: int = 1000
    log_level: str = "INFO"
    log_file: Optional[str] = None
    llm_provider: str = "openrouter"
    llm_model: str = "openai/gpt-4o-mini"
    save_dir: str = "saves"

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            seed=_env_int("UNO_SEED", defaults.seed),
            ai_delay=max(0.0, _env_float("UNO_AI_DELAY", defaults.ai_delay)),
            max_turns=_env_int("UNO_MAX_TURNS", defaults.max_turns) or defaults.max_turns,
            log_level=os.environ.get("UNO_LOG_LEVEL", defaults.log_level),
            log_file=os.environ.get("UNO_LOG_FILE") or defaults.log_file,
            llm_provider=os.environ.get("UNO_LLM_PROVIDER", defaults.llm_provider),
            llm_model=os.environ.get("UNO_LLM_MODEL", defaults.llm_model),
            save_dir=os.environ.get("UNO_SAVE_DIR") or defaults.save_dir,
        )
