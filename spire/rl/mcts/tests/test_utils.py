"""
Small synthetic simulations shared by the MCTS tests.
Each one implements the same contract as BattleState.
"""
import random
from dataclasses import dataclass, replace
from typing import FrozenSet, Optional, Tuple

from spire.models.enemy import Enemy, EnemyMove
from spire.game.battle_manager import build_battle
from spire.rl.simulation import ActionError


@dataclass(unsafe_hash=True)
class CommutativeState:
    """Actions can be applied in any order; A then B equals B then A."""
    applied: FrozenSet[str] = frozenset()
    actions: Tuple[str, ...] = ("A", "B")

    def copy(self):
        return replace(self)

    def list_available_actions(self):
        return [a for a in self.actions if a not in self.applied]

    def eval_action(self, action, rng: random.Random):
        if action in self.applied or action not in self.actions:
            raise ActionError(f"{action} cannot be applied to {sorted(self.applied)}")
        self.applied = self.applied | {action}

    def is_terminal(self):
        return len(self.applied) == len(self.actions)

    def evaluate(self):
        return float(len(self.applied))


SAFE_REWARD = 0.6


@dataclass(unsafe_hash=True)
class GambleState:
    """
    One decision: "safe" always pays 0.6, "risky" pays 1.0 or 0.0 with equal odds.
    """
    result: Optional[str] = None

    def copy(self):
        return replace(self)

    def list_available_actions(self):
        if self.result is not None:
            return []
        return ["safe", "risky"]

    def eval_action(self, action, rng: random.Random):
        if self.result is not None:
            raise ActionError("gamble already resolved")
        if action == "safe":
            self.result = "safe"
        elif action == "risky":
            self.result = "win" if rng.random() < 0.5 else "lose"
        else:
            raise ActionError(f"unknown action {action}")

    def is_terminal(self):
        return self.result is not None

    def evaluate(self):
        return {"safe": SAFE_REWARD, "win": 1.0, "lose": 0.0}.get(self.result, 0.0)


@dataclass(unsafe_hash=True)
class DeadEndState:
    """The only action leads to a state that is not terminal but has no actions."""
    stuck: bool = False

    def copy(self):
        return replace(self)

    def list_available_actions(self):
        return [] if self.stuck else ["wander"]

    def eval_action(self, action, rng: random.Random):
        if self.stuck:
            raise AssertionError("eval_action must not be called on a stuck state")
        self.stuck = True

    def is_terminal(self):
        return False

    def evaluate(self):
        return 0.25 if self.stuck else 0.0


@dataclass(unsafe_hash=True)
class BrokenState:
    """Lists an action it always rejects."""

    def copy(self):
        return replace(self)

    def list_available_actions(self):
        return ["bad"]

    def eval_action(self, action, rng: random.Random):
        raise ActionError("bad is never allowed")

    def is_terminal(self):
        return False

    def evaluate(self):
        return 0.0


@dataclass(unsafe_hash=True)
class ToggleState:
    """Single action "go" that works until the class-level switch is flipped."""
    done: bool = False
    broken = False

    def copy(self):
        return replace(self)

    def list_available_actions(self):
        return [] if self.done else ["go"]

    def eval_action(self, action, rng: random.Random):
        if ToggleState.broken:
            raise ActionError("switched off")
        self.done = True

    def is_terminal(self):
        return self.done

    def evaluate(self):
        return 1.0 if self.done else 0.0


@dataclass(unsafe_hash=True)
class TickState:
    """Never terminal; counts ticks. Optionally fails once ``fail_at`` ticks were made."""
    ticks: int = 0
    fail_at: Optional[int] = None

    def copy(self):
        return replace(self)

    def list_available_actions(self):
        return ["tick"]

    def eval_action(self, action, rng: random.Random):
        if self.fail_at is not None and self.ticks >= self.fail_at:
            raise ActionError("clock is broken")
        self.ticks += 1

    def is_terminal(self):
        return False

    def evaluate(self):
        return float(self.ticks)


@dataclass(unsafe_hash=True)
class DieState:
    """One roll of a six-sided die, then the game is over. Reward is the face over six."""
    face: Optional[int] = None

    def copy(self):
        return replace(self)

    def list_available_actions(self):
        return [] if self.face is not None else ["roll"]

    def eval_action(self, action, rng: random.Random):
        if self.face is not None:
            raise ActionError("die was already rolled")
        self.face = rng.randint(1, 6)

    def is_terminal(self):
        return self.face is not None

    def evaluate(self):
        return self.face / 6 if self.face is not None else 0.0


def make_duel(rng: random.Random):
    """
    Deterministic duel: the player has 20 HP and a single Strike (6 damage, 1 energy),
    the enemy has 12 HP and always hits for exactly 6.
    """
    enemy = Enemy(name="Dummy", hp=12, max_hp=12, moves=(EnemyMove("Hit", 6, 6),))
    return build_battle(enemy, ["Strike"], rng, health=20, max_energy=1, hand_size=1)
