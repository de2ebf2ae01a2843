"""
Expectimax MCTS agent for stochastic battles.
Implements the four phases: Selection, Expansion, Simulation, Backpropagation.

The search graph alternates two node kinds:
    Decision node (state)  -> [Chance node (action 1), Chance node (action 2), ...]
    Chance node (action)   -> [Decision node (outcome 1), Decision node (outcome 2), ...]

Nodes are stored in two flat lists and refer to each other by integer id. A
global transposition table maps every state seen so far to its decision node,
so identical states reached through different action sequences (or in later
calls to ``select_action``) share statistics.
"""
import logging
import math
import random
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from spire.rl.agent import Agent
from spire.rl.simulation import ActionError, ForwardSimulation
from spire.rl.mcts.chance_node import ChanceNode
from spire.rl.mcts.decision_node import DecisionNode
from spire.rl.mcts.errors import SearchError, SearchInvariantError, SimulationContractError
from spire.rl.mcts.constants import (
    MCTS_ITERATIONS,
    MCTS_EXPLORATION_CONSTANT,
    MCTS_MAX_ROLLOUT_DEPTH,
    MCTS_SAMPLES_PER_ACTION,
)

logger = logging.getLogger(__name__)


class ActionStatistics(NamedTuple):
    """Search statistics for one action tried at a decision node."""
    action: Any
    visits: int
    mean_reward: float


class MCTSAgent(Agent):
    """
    Monte Carlo Tree Search agent using Expectimax over chance nodes.

    The arenas and the transposition table belong to the agent instance and grow
    across calls to ``select_action``; call ``reset()`` to drop them.
    """

    def __init__(
        self,
        iterations: int = MCTS_ITERATIONS,
        exploration_constant: float = MCTS_EXPLORATION_CONSTANT,
        max_rollout_depth: Optional[int] = MCTS_MAX_ROLLOUT_DEPTH,
        samples_per_action: int = MCTS_SAMPLES_PER_ACTION,
    ):
        """
        Initialize MCTS agent.

        Args:
            iterations: Number of MCTS iterations per action selection
            exploration_constant: UCT exploration constant (typically sqrt(2))
            max_rollout_depth: Rollout depth cap (None uses the default cap)
            samples_per_action: Visits before a chance node counts as fully expanded
        """
        self.iterations = iterations
        self.exploration_constant = exploration_constant
        self.max_rollout_depth = max_rollout_depth
        self.samples_per_action = samples_per_action

        self.decision_nodes: List[DecisionNode] = []
        self.chance_nodes: List[ChanceNode] = []
        self.transposition_table: Dict[Any, int] = {}
        self._last_root_id: Optional[int] = None

    @property
    def name(self) -> str:
        return "MCTS-Expectimax"

    def select_action(self, root_state: ForwardSimulation, rng: random.Random) -> Tuple[Any, List[ActionStatistics]]:
        """
        Run MCTS from ``root_state`` and pick the most visited action.

        Args:
            root_state: Current state (not mutated)
            rng: Random source shared by the search and the simulation

        Returns:
            Tuple of (best action, statistics for every action tried at the root)
        """
        root_id = self._get_or_create_root(root_state)

        for _ in range(self.iterations):
            self._run_iteration(root_id, root_state.copy(), rng)

        self._last_root_id = root_id
        best_action = self._select_best_action(root_id, root_state)
        stats = self.get_action_statistics(root_id)

        logger.debug(
            "Searched root %d for %d iterations: %d decision nodes, %d chance nodes, chose %r",
            root_id, self.iterations, len(self.decision_nodes), len(self.chance_nodes), best_action,
        )
        return best_action, stats

    def choose_action(self, state: ForwardSimulation, rng: random.Random):
        action, _ = self.select_action(state, rng)
        return action

    def get_action_statistics(self, root_id: Optional[int] = None) -> List[ActionStatistics]:
        """
        Get statistics for all actions explored from a decision node.
        Defaults to the root of the last search.

        Returns:
            List of (action, visits, mean_reward) in the order actions were expanded
        """
        if root_id is None:
            root_id = self._last_root_id
        if root_id is None:
            return []

        stats = []
        for child_id in self.decision_nodes[root_id].children:
            chance_node = self.chance_nodes[child_id]
            stats.append(ActionStatistics(chance_node.action, chance_node.visits, chance_node.avg_reward()))
        return stats

    def get_tree_stats(self) -> Dict[str, int]:
        """
        Get the size of the search graph.

        Returns:
            Dictionary with decision_nodes, chance_nodes and transpositions counts
        """
        return {
            'decision_nodes': len(self.decision_nodes),
            'chance_nodes': len(self.chance_nodes),
            'transpositions': len(self.transposition_table),
        }

    def reset(self):
        """Drop the whole search graph and the transposition table."""
        self.decision_nodes = []
        self.chance_nodes = []
        self.transposition_table = {}
        self._last_root_id = None

    def _get_or_create_root(self, root_state: ForwardSimulation) -> int:
        """Reuse the decision node of a previously seen state, or register a new one."""
        existing_id = self.transposition_table.get(root_state)
        if existing_id is not None:
            return existing_id
        return self._create_decision_node(root_state)

    def _run_iteration(self, root_id: int, state: ForwardSimulation, rng: random.Random) -> float:
        """
        Run a single MCTS iteration on a private copy of the root state.
        Returns the reward that was backpropagated.
        """
        # (is_decision, node_id) for every node visited in this iteration
        path: List[Tuple[bool, int]] = [(True, root_id)]
        at_decision = True
        current_id = root_id

        while True:
            if state.is_terminal():
                return self._finish(path, state.evaluate())

            if at_decision:
                available_actions = state.list_available_actions()
                if not available_actions:
                    return self._finish(path, state.evaluate())

                decision_node = self.decision_nodes[current_id]
                if decision_node.is_fully_expanded(available_actions):
                    current_id = self._uct_select(current_id)
                    path.append((False, current_id))
                    at_decision = False
                    continue

                action = decision_node.get_untried_action(available_actions)
                chance_id = self._expand_decision_node(current_id, action)
                path.append((False, chance_id))
                self._apply_action(state, action, rng, current_id, available_actions)
            else:
                chance_id = current_id
                chance_node = self.chance_nodes[chance_id]
                if chance_node.is_fully_expanded(self.samples_per_action):
                    # Re-sample the environment from the parent's own state
                    state = self.decision_nodes[chance_node.parent].state.copy()
                    context = "This occurred during fresh outcome sampling from a fully expanded chance node."
                else:
                    context = ""
                self._apply_action(state, chance_node.action, rng, chance_node.parent, context=context)

            outcome_id, is_new_node = self._add_decision_node(chance_id, state)
            path.append((True, outcome_id))

            if is_new_node:
                return self._finish(path, self._rollout(state, rng))

            at_decision = True
            current_id = outcome_id

    def _apply_action(
        self,
        state: ForwardSimulation,
        action,
        rng: random.Random,
        decision_id: int,
        available_actions: Optional[List[Any]] = None,
        context: str = "",
    ):
        """Apply an action that the simulation reported as available."""
        try:
            state.eval_action(action, rng)
        except ActionError as err:
            if available_actions is None:
                available_actions = self.decision_nodes[decision_id].state.list_available_actions()
            raise SimulationContractError(
                type(state).__name__, action, err, available_actions, context
            ) from err

    def _uct_select(self, decision_id: int) -> int:
        """Pick the chance node child with the highest UCT score."""
        node = self.decision_nodes[decision_id]
        if not node.children:
            raise SearchInvariantError(f"Decision node {decision_id} is fully expanded but has no children")
        if node.visits < 1:
            raise SearchInvariantError(f"Decision node {decision_id} is fully expanded but was never visited")

        best_id = None
        best_score = float('-inf')
        for child_id in node.children:
            child = self.chance_nodes[child_id]
            score = child.uct_value(node.visits, self.exploration_constant)
            if math.isnan(score):
                raise SearchInvariantError(
                    f"UCT value for {child.action!r} is not comparable "
                    f"(visits={child.visits}, total_reward={child.total_reward})"
                )
            if best_id is None or score > best_score:
                best_score = score
                best_id = child_id
        return best_id

    def _rollout(self, state: ForwardSimulation, rng: random.Random) -> float:
        """
        Simulation phase: play uniformly random actions from a new node.
        Stops at a terminal state, when no action is available, when an action
        fails, or after twice the configured rollout depth.
        """
        max_depth = self.max_rollout_depth if self.max_rollout_depth is not None else MCTS_MAX_ROLLOUT_DEPTH

        depth = 0
        while depth < max_depth * 2:
            if state.is_terminal():
                break

            available_actions = state.list_available_actions()
            if not available_actions:
                break

            action = available_actions[rng.randrange(len(available_actions))]
            try:
                state.eval_action(action, rng)
            except ActionError:
                break
            depth += 1

        return state.evaluate()

    def _expand_decision_node(self, decision_id: int, action) -> int:
        """Expansion phase: add a chance node for an untried action."""
        chance_id = len(self.chance_nodes)
        self.chance_nodes.append(ChanceNode(action=action, parent=decision_id))

        decision_node = self.decision_nodes[decision_id]
        decision_node.children.append(chance_id)
        decision_node.tried_actions.add(action)
        return chance_id

    def _add_decision_node(self, chance_id: int, state: ForwardSimulation) -> Tuple[int, bool]:
        """
        Resolve a sampled outcome to a decision node through the transposition table.

        Returns:
            Tuple of (decision node id, True if the node was just created)
        """
        chance_node = self.chance_nodes[chance_id]
        existing_id = self.transposition_table.get(state)
        if existing_id is not None:
            chance_node.add_outcome(existing_id)
            return existing_id, False

        decision_id = self._create_decision_node(state, parent=chance_id)
        chance_node.children.append(decision_id)
        return decision_id, True

    def _create_decision_node(self, state: ForwardSimulation, parent: Optional[int] = None) -> int:
        """Store a copy of ``state`` in a new decision node and register it."""
        node_state = state.copy()
        decision_id = len(self.decision_nodes)
        self.decision_nodes.append(DecisionNode(state=node_state, parent=parent))
        self.transposition_table[node_state] = decision_id
        return decision_id

    def _finish(self, path: List[Tuple[bool, int]], reward: float) -> float:
        self._backpropagate(path, reward)
        return reward

    def _backpropagate(self, path: List[Tuple[bool, int]], reward: float):
        """Backpropagation phase: add the reward to every node on the path."""
        for is_decision, node_id in path:
            if is_decision:
                self.decision_nodes[node_id].update(reward)
            else:
                self.chance_nodes[node_id].update(reward)

    def _select_best_action(self, root_id: int, root_state: ForwardSimulation):
        """Robust child: the action whose chance node has the most visits."""
        root = self.decision_nodes[root_id]

        if not root.children:
            available_actions = root_state.list_available_actions()
            if not available_actions:
                raise SearchError(f"No available actions at the root {type(root_state).__name__}")
            return available_actions[0]

        best_child_id = max(root.children, key=lambda child_id: self.chance_nodes[child_id].visits)
        return self.chance_nodes[best_child_id].action
