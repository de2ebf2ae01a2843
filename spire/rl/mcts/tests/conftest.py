"""
Pytest configuration and shared fixtures for MCTS tests.
"""
import random

import pytest
from spire.rl.mcts.constants import MCTS_TEST_SEED


@pytest.fixture
def game_seed():
    """Seed for battles (deterministic draws and enemy moves)."""
    return MCTS_TEST_SEED


@pytest.fixture
def rng(game_seed):
    """Random source for the search."""
    return random.Random(game_seed)
