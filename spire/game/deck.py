import random
from typing import Iterable, List, Tuple

from spire.models.card import BASH, DEFEND, STRIKE

Pile = Tuple[str, ...]


class Deck:
    """
    Card piles are sorted tuples of card names, so two piles holding the same
    cards are equal regardless of the order they were built in. Draws pick a
    uniformly random card, which makes shuffling implicit.
    """

    @staticmethod
    def starter_deck() -> Pile:
        return Deck.make_pile([STRIKE.name] * 5 + [DEFEND.name] * 4 + [BASH.name])

    @staticmethod
    def make_pile(cards: Iterable[str]) -> Pile:
        return tuple(sorted(cards))

    @staticmethod
    def add(pile: Pile, card_name: str) -> Pile:
        return Deck.make_pile(pile + (card_name,))

    @staticmethod
    def remove(pile: Pile, card_name: str) -> Pile:
        cards = list(pile)
        cards.remove(card_name)
        return tuple(cards)

    @staticmethod
    def draw(draw_pile: Pile, discard_pile: Pile, count: int, rng: random.Random) -> Tuple[List[str], Pile, Pile]:
        """
        Draw up to ``count`` cards, shuffling the discard pile in when the draw pile runs out.

        Returns:
            Tuple of (drawn cards, new draw pile, new discard pile)
        """
        drawn = []
        draw_cards = list(draw_pile)
        for _ in range(count):
            if not draw_cards:
                if not discard_pile:
                    break
                draw_cards = list(discard_pile)
                discard_pile = ()
            drawn.append(draw_cards.pop(rng.randrange(len(draw_cards))))
        return drawn, tuple(draw_cards), discard_pile
