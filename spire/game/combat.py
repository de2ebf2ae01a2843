from typing import Tuple

from spire.models.enemy import Enemy


class Combat:
    @staticmethod
    def calculate_damage(damage: int, block: int) -> Tuple[int, int]:
        """Split incoming damage into (hp_loss, remaining_block)."""
        absorbed = min(block, damage)
        return damage - absorbed, block - absorbed

    @staticmethod
    def attack_enemy(enemy: Enemy, damage: int) -> Enemy:
        hp_loss, block = Combat.calculate_damage(damage, enemy.block)
        return enemy.with_changes(hp=enemy.hp - hp_loss, block=block)
