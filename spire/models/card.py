from enum import Enum
from dataclasses import dataclass


class CardType(Enum):
    ATTACK = "Attack"
    SKILL = "Skill"


CardColor = {
    CardType.ATTACK: "red",
    CardType.SKILL: "cyan",
}


@dataclass(frozen=True)
class Card:
    name: str
    cost: int
    type: CardType
    damage: int = 0
    block: int = 0

    @property
    def description(self) -> str:
        parts = []
        if self.damage:
            parts.append(f"Deal {self.damage}")
        if self.block:
            parts.append(f"Block {self.block}")
        return ", ".join(parts)

    def __str__(self) -> str:
        return f"{self.name} ({self.cost})"


STRIKE = Card("Strike", 1, CardType.ATTACK, damage=6)
DEFEND = Card("Defend", 1, CardType.SKILL, block=5)
BASH = Card("Bash", 2, CardType.ATTACK, damage=8)

# Catalog order is the order actions are listed in
CARDS = {card.name: card for card in (STRIKE, DEFEND, BASH)}
