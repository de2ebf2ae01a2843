"""
Tests for decision and chance node bookkeeping.
"""
import math

import pytest

from spire.rl.mcts.chance_node import ChanceNode
from spire.rl.mcts.decision_node import DecisionNode
from .test_utils import CommutativeState


def test_decision_node_creation():
    node = DecisionNode(state=CommutativeState())

    assert node.visits == 0
    assert node.total_reward == 0.0
    assert node.children == []
    assert node.tried_actions == set()
    assert node.parent is None
    assert node.avg_reward() == 0.0


def test_decision_node_untried_action_follows_available_order():
    node = DecisionNode(state=CommutativeState())
    available = ["A", "B", "C"]

    assert node.get_untried_action(available) == "A"
    node.tried_actions.add("A")
    assert node.get_untried_action(available) == "B"
    node.tried_actions.update({"B", "C"})
    assert node.get_untried_action(available) is None


def test_decision_node_has_tried_action():
    node = DecisionNode(state=CommutativeState())

    assert not node.has_tried_action("A")
    node.tried_actions.add("A")
    assert node.has_tried_action("A")
    assert not node.has_tried_action("B")


def test_decision_node_fully_expanded_only_when_every_action_tried():
    node = DecisionNode(state=CommutativeState())

    assert not node.is_fully_expanded(["A", "B"])
    node.tried_actions.add("A")
    assert not node.is_fully_expanded(["A", "B"])
    node.tried_actions.add("B")
    assert node.is_fully_expanded(["A", "B"])


def test_decision_node_update_accumulates():
    node = DecisionNode(state=CommutativeState())
    node.update(3.0)
    node.update(7.0)

    assert node.visits == 2
    assert node.total_reward == 10.0
    assert node.avg_reward() == 5.0


def test_chance_node_creation():
    node = ChanceNode(action="A", parent=0)

    assert node.parent == 0
    assert node.visits == 0
    assert node.children == []
    assert node.avg_reward() == 0.0


def test_chance_node_unvisited_uct_is_infinite():
    node = ChanceNode(action="A", parent=0)
    assert node.uct_value(10, 1.41) == float('inf')


def test_chance_node_uct_calculation():
    node = ChanceNode(action="A", parent=0, visits=10, total_reward=5.0)

    uct = node.uct_value(100, 1.41)

    expected = 0.5 + 1.41 * math.sqrt(math.log(100) / 10)
    assert uct == pytest.approx(expected)
    assert 0.0 < uct < float('inf')


def test_chance_node_uct_grows_with_exploration_constant():
    node = ChanceNode(action="A", parent=0, visits=4, total_reward=2.0)

    assert node.uct_value(50, 0.0) == pytest.approx(0.5)
    assert node.uct_value(50, 2.0) > node.uct_value(50, 1.0)


def test_chance_node_fully_expanded_by_visits():
    node = ChanceNode(action="A", parent=0)

    for _ in range(2):
        node.update(1.0)
    assert not node.is_fully_expanded(3)

    node.update(1.0)
    assert node.is_fully_expanded(3)


def test_chance_node_add_outcome_keeps_children_distinct():
    node = ChanceNode(action="A", parent=0)
    node.add_outcome(4)
    node.add_outcome(4)
    node.add_outcome(7)

    assert node.children == [4, 7]
