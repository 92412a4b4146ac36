"""Built-in agents."""

from unoengine.agents.llm_agent import LLMAgent
from unoengine.agents.human_agent import HumanAgent

__all__ = ["LLMAgent", "HumanAgent"]
