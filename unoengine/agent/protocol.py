"""Agent protocol - interface that human and LLM agents implement."""

from typing import Protocol

from unoengine.engine import Choice, Color, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def choose_action(
        self,
        player_view: PlayerView,
        legal_choices: list[Choice],
        seat: int,
    ) -> Choice | None:
        """Choose a move given the player view and legal choices.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            legal_choices: Hand indices that can be played, plus DRAW.
            seat: This agent's seat index.

        Returns:
            One of the legal choices, or None to draw.
        """
        ...

    def choose_color(self, player_view: PlayerView, seat: int) -> Color:
        """Pick the color for a wild card this agent just played."""
        ...
