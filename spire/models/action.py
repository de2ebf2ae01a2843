from enum import Enum
from typing import Optional

from spire.models.card import CARDS, Card


class Action(Enum):
    STRIKE = "Strike"
    DEFEND = "Defend"
    BASH = "Bash"
    END_TURN = "End Turn"

    @property
    def card(self) -> Optional[Card]:
        return CARDS.get(self.value)

    def __repr__(self) -> str:
        return f"Action.{self.name}"
