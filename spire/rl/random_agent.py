"""
Random agent that picks uniformly among the available actions.
Serves as a baseline for the MCTS agent.
"""
import random

from spire.rl.agent import Agent
from spire.rl.simulation import ForwardSimulation
from spire.rl.mcts.errors import SearchError


class RandomAgent(Agent):

    @property
    def name(self) -> str:
        return "Random"

    def choose_action(self, state: ForwardSimulation, rng: random.Random):
        actions = state.list_available_actions()
        if not actions:
            raise SearchError(f"No available actions for {type(state).__name__}, battle should be over")
        return rng.choice(actions)
