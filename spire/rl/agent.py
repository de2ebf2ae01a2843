"""
Common interface for agents that play Spire battles.
"""
import random
from abc import ABC, abstractmethod

from spire.rl.simulation import ForwardSimulation


class Agent(ABC):
    """
    Base class for battle agents (random baseline, MCTS, ...).
    """

    @abstractmethod
    def choose_action(self, state: ForwardSimulation, rng: random.Random):
        """
        Select an action for the given state.

        Args:
            state: Current state (implements the simulation contract)
            rng: Random number generator for stochastic decisions

        Returns:
            One of ``state.list_available_actions()``
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Agent name used in logs and evaluation output."""

    def reset(self):
        """Reset agent state between battles. Does nothing by default."""
