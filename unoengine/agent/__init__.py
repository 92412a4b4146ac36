"""Agent interface."""

from unoengine.agent.protocol import AgentProtocol

__all__ = ["AgentProtocol"]
