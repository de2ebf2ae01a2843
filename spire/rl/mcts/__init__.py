"""
Expectimax MCTS for stochastic Spire battles.

Decision nodes hold states, chance nodes hold actions; both live in flat arenas
indexed by id and are shared across the search through a transposition table.
"""

from spire.rl.mcts.mcts_agent import MCTSAgent, ActionStatistics
from spire.rl.mcts.decision_node import DecisionNode
from spire.rl.mcts.chance_node import ChanceNode
from spire.rl.mcts.errors import SearchError, SearchInvariantError, SimulationContractError

__all__ = [
    'MCTSAgent',
    'ActionStatistics',
    'DecisionNode',
    'ChanceNode',
    'SearchError',
    'SearchInvariantError',
    'SimulationContractError',
]
