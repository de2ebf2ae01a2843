"""
Pytest fixtures for battle rule tests.
"""
import pytest
from spire.rl.mcts.constants import MCTS_TEST_SEED


@pytest.fixture
def game_seed():
    """Seed for BattleManager (deterministic draws and enemy moves)."""
    return MCTS_TEST_SEED
