from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class EnemyMove:
    """
    One scripted enemy move. Damage is rolled uniformly in [min_damage, max_damage]
    and moves are picked with probability proportional to ``weight``.
    """
    name: str
    min_damage: int
    max_damage: int
    block: int = 0
    weight: float = 1.0


@dataclass(frozen=True)
class Enemy:
    name: str
    hp: int
    max_hp: int
    moves: Tuple[EnemyMove, ...]
    block: int = 0

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def with_changes(self, **changes) -> 'Enemy':
        return replace(self, **changes)


JAW_WORM = Enemy(
    name="Jaw Worm",
    hp=40,
    max_hp=40,
    moves=(
        EnemyMove("Chomp", 10, 12, weight=0.45),
        EnemyMove("Thrash", 7, 7, block=5, weight=0.30),
        EnemyMove("Bellow", 0, 0, block=6, weight=0.25),
    ),
)
