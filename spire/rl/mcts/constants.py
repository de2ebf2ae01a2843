import math

MCTS_ITERATIONS = 1000
MCTS_EXPLORATION_CONSTANT = math.sqrt(2)  # UCT exploration constant
MCTS_MAX_ROLLOUT_DEPTH = 100  # Rollouts stop at twice this many plies
MCTS_SAMPLES_PER_ACTION = 3  # Outcome samples before a chance node counts as expanded

EVAL_NUM_BATTLES = 10
EVAL_SEED = 42

MCTS_TEST_ITERATIONS = 200
MCTS_TEST_SEED = 42
