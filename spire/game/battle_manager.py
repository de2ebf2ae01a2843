import logging
import random
from typing import Iterable, Optional

from spire.models.action import Action
from spire.models.battle_state import BattleState
from spire.models.enemy import Enemy, JAW_WORM
from spire.game.battle_logic import draw_hand
from spire.game.deck import Deck

logger = logging.getLogger(__name__)


def build_battle(
    enemy: Enemy,
    deck: Iterable[str],
    rng: random.Random,
    health: int = 80,
    max_health: Optional[int] = None,
    max_energy: int = 3,
    hand_size: int = 5,
    max_turns: int = 50,
) -> BattleState:
    """
    Create a battle at the start of the first player turn.

    Args:
        enemy: Enemy to fight
        deck: Card names making up the player's deck
        rng: Random source used to draw the opening hand
        health: Starting player health
        max_health: Player max health (defaults to ``health``)
        max_energy: Energy per turn
        hand_size: Cards drawn at the start of each turn
        max_turns: Turn limit after which the battle is over

    Returns:
        New BattleState with the opening hand drawn
    """
    state = BattleState(
        enemy=enemy,
        draw_pile=Deck.make_pile(deck),
        health=health,
        max_health=max_health if max_health is not None else health,
        energy=max_energy,
        max_energy=max_energy,
        hand_size=hand_size,
        max_turns=max_turns,
    )
    draw_hand(state, rng)
    return state


class BattleManager:
    def __init__(
        self,
        seed: Optional[int] = None,
        enemy: Enemy = JAW_WORM,
        deck: Optional[Iterable[str]] = None,
        **battle_options,
    ):
        """
        Initialize the battle manager.

        Args:
            seed: Optional seed for the battle's random source.
                  If provided, the same seed and the same actions replay the same battle.
                  If None, a random seed is generated and used for reproducibility.
            enemy: Enemy to fight
            deck: Player deck (defaults to the starter deck)
            battle_options: Extra keyword arguments for build_battle
        """
        if seed is None:
            seed = random.randint(0, 2**31 - 1)

        self.seed = seed
        self.enemy = enemy
        self.deck = tuple(deck) if deck is not None else Deck.starter_deck()
        self.battle_options = battle_options
        self.restart()

    def restart(self) -> BattleState:
        self.rng = random.Random(self.seed)
        self.state = build_battle(self.enemy, self.deck, self.rng, **self.battle_options)
        logger.debug("Started battle against %s (seed=%d)", self.enemy.name, self.seed)
        return self.state

    def get_state(self) -> BattleState:
        return self.state

    def execute_turn(self, action: Action):
        """
        Apply an action to the current battle with the manager's random source.

        Raises:
            InvalidActionError: If the action cannot be applied
        """
        self.state.eval_action(action, self.rng)
        if self.state.game_over:
            logger.debug(
                "Battle over after %d turns: health=%d, enemy hp=%d",
                self.state.turn, self.state.health, self.state.enemy.hp,
            )
