"""Deck: draw pile, discard pile and reshuffling."""

import logging
import random
from typing import List, Optional

from unoengine.engine.card import Card, CardKind, Color
from unoengine.engine.errors import DeckExhausted

logger = logging.getLogger(__name__)

DECK_SIZE = 108

ACTION_KINDS = (CardKind.SKIP, CardKind.REVERSE, CardKind.DRAW_TWO)


def standard_cards() -> List[Card]:
    """Build an unshuffled standard 108-card UNO deck.

    - 4 colors × (one 0, two each of 1-9): 76 cards
    - 4 colors × two each of Skip, Reverse, Draw Two: 24 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    """
    cards: List[Card] = []

    for color in Color.playable():
        cards.append(Card(color=color, kind=CardKind.NUMBER, rank=0))
        for rank in range(1, 10):
            cards.append(Card(color=color, kind=CardKind.NUMBER, rank=rank))
            cards.append(Card(color=color, kind=CardKind.NUMBER, rank=rank))

    for color in Color.playable():
        for kind in ACTION_KINDS:
            cards.append(Card(color=color, kind=kind))
            cards.append(Card(color=color, kind=kind))

    for _ in range(4):
        cards.append(Card(color=Color.WILD, kind=CardKind.WILD))
        cards.append(Card(color=Color.WILD, kind=CardKind.WILD_DRAW_FOUR))

    return cards


class Deck:
    """Draw pile and discard pile for one game.

    Both piles are lists whose top is the last element. ``set_aside`` holds
    wild cards flipped away while looking for the opening discard; they take
    no further part in the game.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random(seed)
        self.draw_pile: List[Card] = []
        self.discard_pile: List[Card] = []
        self.set_aside: List[Card] = []
        self.reset()

    def reset(self) -> None:
        """Rebuild the full 108-card deck and shuffle it."""
        self.draw_pile = standard_cards()
        self.discard_pile = []
        self.set_aside = []
        self.shuffle()

    def shuffle(self) -> None:
        self._rng.shuffle(self.draw_pile)

    def draw(self) -> Card:
        """Draw the top card, reshuffling the discard pile when the draw pile is empty."""
        if not self.draw_pile:
            self._reshuffle_discard_pile()
        if not self.draw_pile:
            raise DeckExhausted(discard_size=len(self.discard_pile))
        return self.draw_pile.pop()

    def add_to_discard(self, card: Card) -> None:
        self.discard_pile.append(card)

    def top_card(self) -> Optional[Card]:
        """Return the top card of the discard pile, or None before the first discard."""
        return self.discard_pile[-1] if self.discard_pile else None

    def card_count(self) -> int:
        """Cards held by the deck: draw pile, discard pile and set-aside cards."""
        return len(self.draw_pile) + len(self.discard_pile) + len(self.set_aside)

    def _reshuffle_discard_pile(self) -> None:
        if len(self.discard_pile) <= 1:
            return
        top = self.discard_pile.pop()
        recycled = self.discard_pile
        for card in recycled:
            card.reset_color()
        self.draw_pile.extend(recycled)
        self.discard_pile = [top]
        self.shuffle()
        logger.debug("Reshuffled %d cards from the discard pile", len(self.draw_pile))
