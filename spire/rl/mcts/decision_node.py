"""
Decision node for Expectimax MCTS.
A decision node holds a game state at which the agent picks an action.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional, Set


@dataclass
class DecisionNode:
    """
    A state in the search graph where the agent chooses an action.

    Decision nodes live in the engine's arena and refer to other nodes by id.
    Several chance nodes may resolve to the same decision node through the
    transposition table, so ``parent`` only records which chance node created it.

    Attributes:
        state: Copy of the game state owned by this node (never mutated)
        parent: Id of the chance node that first created this node (None for roots)
        visits: Number of iterations that passed through this node
        total_reward: Sum of rewards backpropagated through this node
        children: Ids of chance nodes, one per tried action
        tried_actions: Actions that already have a chance node
    """
    state: Any
    parent: Optional[int] = None
    visits: int = 0
    total_reward: float = 0.0
    children: List[int] = field(default_factory=list)
    tried_actions: Set[Any] = field(default_factory=set)

    def avg_reward(self) -> float:
        """Mean reward (Q-value), 0.0 before the first visit."""
        if self.visits == 0:
            return 0.0
        return self.total_reward / self.visits

    def has_tried_action(self, action) -> bool:
        return action in self.tried_actions

    def get_untried_action(self, available_actions: List[Any]) -> Optional[Any]:
        """First action in ``available_actions`` without a chance node yet."""
        for action in available_actions:
            if not self.has_tried_action(action):
                return action
        return None

    def is_fully_expanded(self, available_actions: List[Any]) -> bool:
        """True once every available action has a chance node child."""
        return all(self.has_tried_action(action) for action in available_actions)

    def update(self, reward: float):
        self.visits += 1
        self.total_reward += reward

    def __repr__(self):
        return (f"DecisionNode(parent={self.parent}, visits={self.visits}, "
                f"total_reward={self.total_reward:.2f}, children={len(self.children)})")
