import random
from dataclasses import dataclass, replace
from typing import List, Tuple

from spire.models.action import Action
from spire.models.enemy import Enemy
from spire.game import battle_logic


@dataclass(unsafe_hash=True)
class BattleState:
    """
    A single-enemy battle, compared and hashed by value.

    Card piles are sorted tuples and the enemy is immutable, so the state can be
    used as a dictionary key. Keys must not be mutated afterwards; mutate a
    ``copy()`` instead.
    """
    enemy: Enemy
    hand: Tuple[str, ...] = ()
    draw_pile: Tuple[str, ...] = ()
    discard_pile: Tuple[str, ...] = ()
    health: int = 80
    max_health: int = 80
    block: int = 0
    energy: int = 3
    max_energy: int = 3
    hand_size: int = 5
    turn: int = 1
    cards_played: int = 0
    max_turns: int = 50

    @property
    def won(self) -> bool:
        return not self.enemy.is_alive

    @property
    def lost(self) -> bool:
        return self.health <= 0

    @property
    def timed_out(self) -> bool:
        return self.turn > self.max_turns

    @property
    def game_over(self) -> bool:
        return self.won or self.lost or self.timed_out

    def copy(self) -> 'BattleState':
        """
        Copy the state. Every field is immutable, so a shallow copy is enough.
        """
        return replace(self)

    def list_available_actions(self) -> List[Action]:
        return battle_logic.available_actions(self)

    def eval_action(self, action: Action, rng: random.Random) -> None:
        battle_logic.apply_action(self, action, rng)

    def is_terminal(self) -> bool:
        return self.game_over

    def evaluate(self) -> float:
        """
        Score the state from the player's point of view.

        - Defeat: 0.0
        - Victory: 1.2 + 0.5 * remaining hp ratio, in [1.2, 1.7]
        - Otherwise: player hp ratio - enemy hp ratio, in [-1, 1]
        """
        player_ratio = self.health / self.max_health if self.max_health > 0 else 0.0
        if self.lost:
            return 0.0
        if self.won:
            return 1.2 + player_ratio * 0.5

        enemy_ratio = self.enemy.hp / self.enemy.max_hp if self.enemy.max_hp > 0 else 0.0
        return player_ratio - enemy_ratio
