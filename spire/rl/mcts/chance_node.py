"""
Chance node for Expectimax MCTS.
A chance node stands for one action whose outcome the environment decides.
"""
import math
from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class ChanceNode:
    """
    An agent action with a stochastic outcome.

    Attributes:
        action: The action this node represents
        parent: Id of the decision node the action is taken from
        visits: Number of iterations that passed through this node
        total_reward: Sum of rewards backpropagated through this node
        children: Distinct outcome decision-node ids observed so far
    """
    action: Any
    parent: int
    visits: int = 0
    total_reward: float = 0.0
    children: List[int] = field(default_factory=list)

    def avg_reward(self) -> float:
        """Mean reward (Q-value), 0.0 before the first visit."""
        if self.visits == 0:
            return 0.0
        return self.total_reward / self.visits

    def uct_value(self, parent_visits: int, exploration_constant: float) -> float:
        """
        UCT score of this action as seen from its parent decision node.

        Args:
            parent_visits: Visit count of the parent decision node
            exploration_constant: Balance between exploitation and exploration

        Returns:
            mean_reward + C * sqrt(ln(parent_visits) / visits), or +inf if unvisited
        """
        if self.visits == 0:
            return float('inf')
        exploitation = self.total_reward / self.visits
        exploration = exploration_constant * math.sqrt(math.log(parent_visits) / self.visits)
        return exploitation + exploration

    def is_fully_expanded(self, samples_per_action: int) -> bool:
        """
        True once the outcome distribution has been sampled ``samples_per_action`` times.
        Fully expanded chance nodes keep sampling fresh outcomes, they never pick
        among known children.
        """
        return self.visits >= samples_per_action

    def add_outcome(self, decision_id: int) -> None:
        """Record an outcome decision node if it is not already a child."""
        if decision_id not in self.children:
            self.children.append(decision_id)

    def update(self, reward: float):
        self.visits += 1
        self.total_reward += reward

    def __repr__(self):
        return (f"ChanceNode(action={self.action!r}, visits={self.visits}, "
                f"total_reward={self.total_reward:.2f}, children={len(self.children)})")
