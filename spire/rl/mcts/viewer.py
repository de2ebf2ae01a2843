"""
Interactive viewer for watching the MCTS agent play a Spire battle.
"""
import argparse
import random
from typing import Optional

from spire.game.battle_manager import BattleManager
from spire.rl.mcts.mcts_agent import MCTSAgent
from spire.rl.mcts.constants import MCTS_ITERATIONS, MCTS_EXPLORATION_CONSTANT
from spire.rl.utils import format_action, format_action_stats
from spire.ui.terminal_ui import TerminalUI


def run_mcts_viewer(
    iterations: int = MCTS_ITERATIONS,
    exploration_constant: float = MCTS_EXPLORATION_CONSTANT,
    seed: Optional[int] = None,
):
    """
    Run interactive viewer with MCTS agent.

    Args:
        iterations: Number of MCTS iterations per move
        exploration_constant: UCT exploration constant
        seed: Optional seed for the battle (same seed = same battle for the same actions)
    """
    agent = MCTSAgent(iterations=iterations, exploration_constant=exploration_constant)
    engine = BattleManager(seed=seed)
    ui = TerminalUI()
    agent_rng = random.Random(engine.seed)

    actions_title = f"MCTS ({iterations} iterations)"
    state = engine.restart()

    while True:
        if state.game_over:
            ui.display_battle_state(state)
            tree = agent.get_tree_stats()
            ui.console.print(f"Search graph: {tree['decision_nodes']} decision / {tree['chance_nodes']} chance nodes")
            user = input("r=restart | q=quit: ").strip().lower()
            if user in ("r", "restart"):
                agent.reset()
                state = engine.restart()
                continue
            break

        action, stats = agent.select_action(state, agent_rng)
        ui_text = f"Next: [bold green]{format_action(action)}[/bold green]"
        if stats:
            ui_text += " | " + format_action_stats(stats, action)

        ui.display_battle_state(state, actions_override=ui_text, actions_title=actions_title)

        user = input("Space=step | r=restart | q=quit: ").strip().lower()

        if user in ("q", "quit"):
            break
        if user in ("r", "restart"):
            agent.reset()
            state = engine.restart()
            continue
        if user in ("", " ", "s", "step"):
            engine.execute_turn(action)
        state = engine.get_state()


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Watch the MCTS agent play a Spire battle interactively."
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=MCTS_ITERATIONS,
        help="Number of MCTS iterations per move"
    )
    parser.add_argument(
        "--exploration-constant",
        type=float,
        default=MCTS_EXPLORATION_CONSTANT,
        help="UCT exploration constant"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the battle (same seed = same battle)"
    )
    return parser.parse_args()


def main():
    """Entry point for console script."""
    args = parse_args()
    run_mcts_viewer(
        iterations=args.iterations,
        exploration_constant=args.exploration_constant,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
