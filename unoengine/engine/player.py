"""Player and hand management."""

from dataclasses import dataclass, field
from typing import List, Optional

from unoengine.engine.card import Card
from unoengine.engine.errors import InvalidIndex


@dataclass(eq=False)
class Player:
    """A seat at the table and the cards it holds."""

    name: str
    is_human: bool = False
    hand: List[Card] = field(default_factory=list)

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    def draw_card(self, card: Card) -> None:
        self.hand.append(card)

    def play_card(self, index: int) -> Card:
        """Remove and return the card at ``index``."""
        if not 0 <= index < len(self.hand):
            raise InvalidIndex(index, len(self.hand))
        return self.hand.pop(index)

    def valid_indices(self, top: Optional[Card]) -> List[int]:
        """Indices of the cards that can be played on ``top``, in hand order."""
        return [i for i, card in enumerate(self.hand) if card.can_play_on(top)]

    def has_valid_card(self, top: Optional[Card]) -> bool:
        return any(card.can_play_on(top) for card in self.hand)

    def has_won(self) -> bool:
        return not self.hand

    def __str__(self) -> str:
        return f"{self.name} ({len(self.hand)} cards)"
