"""
Simulation contract consumed by the search agents.

A state is mutable, cloneable and hashable by value. The search engine keys its
transposition table on states, so a state must never be mutated once it has been
used as a key (the engine only ever mutates its own working copies).
"""
import random
from typing import Hashable, List, Protocol, TypeVar


A = TypeVar("A", bound=Hashable)


class ActionError(Exception):
    """Raised by a simulation when an action cannot be applied to a state."""


class ForwardSimulation(Protocol[A]):
    """Structural type for states that can be simulated forward."""

    def copy(self) -> "ForwardSimulation[A]":
        ...

    def __eq__(self, other: object) -> bool:
        ...

    def __hash__(self) -> int:
        ...

    def list_available_actions(self) -> List[A]:
        """Legal actions from this state (pure)."""
        ...

    def eval_action(self, action: A, rng: random.Random) -> None:
        """Apply an action in place. Raises ActionError on failure."""
        ...

    def is_terminal(self) -> bool:
        ...

    def evaluate(self) -> float:
        """Desirability of this state for the acting agent (higher is better)."""
        ...
