"""
Console script for evaluating agents on win percentage and average evaluation.

Plays a number of seeded battles against the default enemy with either the
MCTS agent (parameters from constants.py unless overridden) or the random baseline.
"""
import argparse
import logging
import random

from spire.game.battle_manager import BattleManager
from spire.rl.agent import Agent
from spire.rl.random_agent import RandomAgent
from spire.rl.mcts.mcts_agent import MCTSAgent
from spire.rl.mcts.constants import (
    MCTS_ITERATIONS,
    MCTS_EXPLORATION_CONSTANT,
    MCTS_MAX_ROLLOUT_DEPTH,
    MCTS_SAMPLES_PER_ACTION,
    EVAL_SEED,
    EVAL_NUM_BATTLES,
)

logger = logging.getLogger(__name__)

AGENTS = ("mcts", "random")


def make_agent(
    agent_name: str,
    iterations: int = MCTS_ITERATIONS,
    exploration_constant: float = MCTS_EXPLORATION_CONSTANT,
) -> Agent:
    if agent_name == "mcts":
        return MCTSAgent(
            iterations=iterations,
            exploration_constant=exploration_constant,
            max_rollout_depth=MCTS_MAX_ROLLOUT_DEPTH,
            samples_per_action=MCTS_SAMPLES_PER_ACTION,
        )
    if agent_name == "random":
        return RandomAgent()
    raise ValueError(f"Unknown agent {agent_name!r}, expected one of {AGENTS}")


def run_evaluation(
    agent: Agent,
    num_battles: int = EVAL_NUM_BATTLES,
    seed: int = EVAL_SEED,
    verbose: bool = False,
):
    """
    Play seeded battles with an agent and return results.

    Args:
        agent: Agent choosing every action
        num_battles: Number of battles to play
        seed: Base seed; battle i uses seed + i for both the battle and the agent
        verbose: Print progress during evaluation

    Returns:
        Dictionary with evaluation results
    """
    evaluations = []
    wins = 0

    for battle_num in range(num_battles):
        battle_seed = seed + battle_num

        if verbose:
            print(f"Playing battle {battle_num + 1}/{num_battles} (seed={battle_seed})...")

        agent.reset()
        engine = BattleManager(seed=battle_seed)
        agent_rng = random.Random(battle_seed)
        state = engine.get_state()

        while not state.game_over:
            action = agent.choose_action(state, agent_rng)
            engine.execute_turn(action)
            state = engine.get_state()

        evaluation = state.evaluate()
        evaluations.append(evaluation)
        if state.won:
            wins += 1

        logger.info("Battle %d: %s in %d turns, evaluation %.3f", battle_num + 1,
                    "won" if state.won else "lost", state.turn, evaluation)
        if verbose:
            print(f"  Battle {battle_num + 1} finished: Evaluation={evaluation:.3f}, "
                  f"{'Win' if state.won else 'Loss'} (turn {state.turn}, health {state.health})")

    win_percentage = (wins / num_battles) * 100.0 if num_battles > 0 else 0.0
    average_evaluation = sum(evaluations) / num_battles if num_battles > 0 else 0.0

    return {
        "agent": agent.name,
        "num_battles": num_battles,
        "wins": wins,
        "win_percentage": win_percentage,
        "average_evaluation": average_evaluation,
        "best_evaluation": max(evaluations) if evaluations else 0.0,
        "worst_evaluation": min(evaluations) if evaluations else 0.0,
        "evaluations": evaluations,
    }


def print_results(results: dict, agent: Agent):
    """Print evaluation results."""
    print(f"\n=== {results['agent']} Evaluation Results ===")
    if isinstance(agent, MCTSAgent):
        print(f"Configuration:")
        print(f"  Iterations: {agent.iterations}")
        print(f"  Exploration Constant: {agent.exploration_constant:.3f}")
        print(f"  Max Rollout Depth: {agent.max_rollout_depth}")
        print(f"  Samples Per Action: {agent.samples_per_action}")
    print(f"\nResults:")
    print(f"  Battles Played: {results['num_battles']}")
    print(f"  Wins: {results['wins']}")
    print(f"  Win Percentage: {results['win_percentage']:.2f}%")
    print(f"  Average Evaluation: {results['average_evaluation']:.3f}")
    print(f"  Best Evaluation: {results['best_evaluation']:.3f}")
    print(f"  Worst Evaluation: {results['worst_evaluation']:.3f}")


def main():
    """Console script entry point."""
    parser = argparse.ArgumentParser(
        description="Evaluate an agent on win percentage and average evaluation."
    )
    parser.add_argument(
        "--agent",
        choices=AGENTS,
        default="mcts",
        help="Agent to evaluate (default: mcts)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress during evaluation"
    )
    parser.add_argument(
        "--num-battles",
        type=int,
        default=EVAL_NUM_BATTLES,
        help=f"Number of battles to play (default: {EVAL_NUM_BATTLES})"
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=MCTS_ITERATIONS,
        help=f"MCTS iterations per action (default: {MCTS_ITERATIONS})"
    )
    parser.add_argument(
        "--exploration-constant",
        type=float,
        default=MCTS_EXPLORATION_CONSTANT,
        help="UCT exploration constant (default: sqrt(2))"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_SEED,
        help=f"Base seed for battles (default: {EVAL_SEED})"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    agent = make_agent(args.agent, args.iterations, args.exploration_constant)
    results = run_evaluation(
        agent,
        num_battles=args.num_battles,
        seed=args.seed,
        verbose=args.verbose,
    )
    print_results(results, agent)


if __name__ == "__main__":
    main()
