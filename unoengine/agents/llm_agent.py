"""LLM agent using OpenAI library with OpenRouter, Groq, Ollama or Hugging Face."""

import json
import logging
import os
import random
import re
import time
from typing import Optional

from openai import OpenAI

from unoengine.engine import DRAW, Choice, Color, PlayerView, describe_effect

logger = logging.getLogger(__name__)

OPENROUTER_BASE = "https://openrouter.ai/api/v1"
GROQ_BASE = "https://api.groq.com/openai/v1"
OLLAMA_BASE = "http://localhost:11434/v1"
HUGGINGFACE_BASE = "https://router.huggingface.co/v1"

MAX_ATTEMPTS = 3


def _format_player_view(pv: PlayerView) -> str:
    """Format player view as text for the LLM."""
    lines = [
        "=== Your hand ===",
        " ".join(f"[{i}] {c}" for i, c in enumerate(pv.my_hand)),
        "",
        "=== Top card on discard ===",
        str(pv.top_card) if pv.top_card else "None",
        "",
        "=== Other players' card counts ===",
    ]
    me = pv.player_order[pv.seat]
    for name, count in pv.num_cards_per_player.items():
        if name != me:
            lines.append(f"  {name}: {count} cards")
    lines.extend([
        "",
        "=== Direction ===",
        "clockwise" if pv.direction == 1 else "counter-clockwise",
        "",
        "=== Pending draws (for you) ===",
        str(pv.pending_draw),
        "",
        "=== Game History (last 10 events) ===",
    ])
    if pv.history:
        lines.extend(f"- {h}" for h in pv.history)
    else:
        lines.append("No history yet.")
    return "\n".join(lines)


def _format_legal_choices(pv: PlayerView, choices: list[Choice]) -> str:
    """Format legal choices as numbered options."""
    options = []
    for i, c in enumerate(choices):
        if c == DRAW:
            options.append(f"{i}: DRAW")
        else:
            card = pv.my_hand[c]
            options.append(f"{i}: PLAY {card} ({describe_effect(card.kind)})")
    return "\n".join(options)


def _extract_json(response: str) -> Optional[dict]:
    json_match = re.search(r"(\{.*?\})", response, re.DOTALL)
    if not json_match:
        return None
    json_str = json_match.group(1)
    for candidate in (json_str, json_str.replace("'", '"')):
        try:
            data = json.loads(candidate)
        except (json.JSONDecodeError, ValueError):
            continue
        if isinstance(data, dict):
            return data
    return None


def _parse_action_response(response: str, choices: list[Choice]) -> Optional[Choice]:
    """Parse LLM response into one of the legal choices."""
    # 1. A JSON-like object, tolerating single quotes
    data = _extract_json(response)
    if data is not None and "action_index" in data:
        try:
            idx = int(data["action_index"])
        except (TypeError, ValueError):
            idx = -1
        if 0 <= idx < len(choices):
            return choices[idx]
        logger.debug("Index %s out of range (0-%d)", data["action_index"], len(choices) - 1)

    # 2. Targeted regex for "action_index": N (quoted or bare key)
    match = re.search(r'["\']?action_index["\']?\s*:\s*(\d+)', response, re.IGNORECASE)
    if match:
        idx = int(match.group(1))
        if 0 <= idx < len(choices):
            return choices[idx]
        logger.debug("Index %d out of range (0-%d) from regex", idx, len(choices) - 1)

    # 3. The word DRAW
    if "DRAW" in response.upper() and DRAW in choices:
        return DRAW

    # 4. A standalone number
    cleaned_response = re.sub(r'[{}\[\]"\'.,:]', " ", response)
    for word in cleaned_response.split():
        if word.isdigit():
            idx = int(word)
            if 0 <= idx < len(choices):
                return choices[idx]

    return None


def _parse_color_response(response: str) -> Optional[Color]:
    """Parse LLM response into a non-wild color."""
    data = _extract_json(response)
    if data is not None and isinstance(data.get("color"), str):
        text = data["color"]
    else:
        text = response
    text = text.lower()
    for color in Color.playable():
        if re.search(rf"\b{color.value}\b", text):
            return color
    return None


class LLMAgent:
    """Agent that uses an LLM to choose moves."""

    def __init__(
        self,
        provider: str = "openrouter",
        model: str = "openai/gpt-4o-mini",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        rate_limit: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        if provider == "openrouter":
            base_url = OPENROUTER_BASE
            key = api_key or os.environ.get("OPENROUTER_API_KEY")
        elif provider == "groq":
            base_url = GROQ_BASE
            key = api_key or os.environ.get("GROQ_API_KEY")
        elif provider == "ollama":
            base_url = os.environ.get("OLLAMA_BASE_URL", OLLAMA_BASE)
            key = "ollama"
        elif provider == "huggingface":
            base_url = HUGGINGFACE_BASE
            key = api_key or os.environ.get("HUGGINGFACE_API_KEY")
        else:
            raise ValueError(f"Unknown provider: {provider}")

        if not key:
            raise ValueError(f"API key required for {provider}. Set {provider.upper()}_API_KEY or pass api_key.")

        self._client = OpenAI(api_key=key, base_url=base_url)
        self._model = model
        self._timeout = timeout
        self._provider = provider
        self._rate_limit = rate_limit  # Requests per minute
        self._request_history: list[float] = []
        self._rng = rng or random.Random()

        logger.info(
            "[%s] provider=%s base_url=%s timeout=%ss rate_limit=%s rpm",
            self.name, provider, base_url, timeout, rate_limit or "None",
        )

    @property
    def name(self) -> str:
        return f"llm-{self._model}"

    def _wait_for_rate_limit(self) -> None:
        """Block if rate limit is exceeded."""
        if not self._rate_limit:
            return

        now = time.time()
        self._request_history = [t for t in self._request_history if now - t < 60.0]

        if len(self._request_history) >= self._rate_limit:
            # Wait until the oldest request in the window expires
            wait_time = 60.0 - (now - self._request_history[0])
            if wait_time > 0:
                logger.info("[%s] Rate limit reached, waiting %.2fs", self.name, wait_time)
                time.sleep(wait_time)

        self._request_history.append(time.time())

    def _ask(self, prompt: str, parse):
        """Send ``prompt`` up to MAX_ATTEMPTS times; return the first parsed answer."""
        for attempt in range(1, MAX_ATTEMPTS + 1):
            start_time = time.time()
            try:
                self._wait_for_rate_limit()

                kwargs = {
                    "model": self._model,
                    "messages": [{"role": "user", "content": prompt}],
                    "timeout": self._timeout,
                }
                # JSON mode only where the provider is known to support it
                if "gpt-4" in self._model or "gpt-3.5" in self._model or self._provider == "groq":
                    kwargs["response_format"] = {"type": "json_object"}

                resp = self._client.chat.completions.create(**kwargs)
                content = resp.choices[0].message.content or ""
                logger.debug("[%s] Response in %.2fs: %s", self.name, time.time() - start_time, content)

                answer = parse(content)
                if answer is not None:
                    return answer
                logger.warning("[%s] Could not parse response on attempt %d", self.name, attempt)
            except Exception as e:
                logger.warning(
                    "[%s] Error on attempt %d after %.2fs: %s: %s",
                    self.name, attempt, time.time() - start_time, type(e).__name__, e,
                )
        return None

    def choose_action(
        self,
        player_view: PlayerView,
        legal_choices: list[Choice],
        seat: int,
    ) -> Choice | None:
        if not legal_choices:
            return None
        if legal_choices == [DRAW]:
            return DRAW

        prompt = f"""You are playing UNO.
Objective: Win by playing all your cards. Match the top discard card by color (red, blue, green, yellow), by number, or by action (skip, reverse, draw_two). Wild cards can be played on anything. Drawing a card ends your turn.

{_format_player_view(player_view)}

=== Legal actions ===
{_format_legal_choices(player_view, legal_choices)}

INSTRUCTIONS:
Select the best action to win the game.
Respond with a JSON object containing the index of your chosen action.
Example: {{"action_index": 2}}
"""
        choice = self._ask(prompt, lambda content: _parse_action_response(content, legal_choices))
        if choice is None:
            logger.warning("[%s] All retries failed. Defaulting to draw.", self.name)
            return DRAW
        return choice

    def choose_color(self, player_view: PlayerView, seat: int) -> Color:
        prompt = f"""You are playing UNO and just played a wild card.

{_format_player_view(player_view)}

Pick the color the next player must match: red, blue, green or yellow.
Respond with a JSON object, for example: {{"color": "red"}}
"""
        color = self._ask(prompt, _parse_color_response)
        if color is None:
            color = self._rng.choice(Color.playable())
            logger.warning("[%s] All retries failed. Picking %s.", self.name, color.value)
        return color
