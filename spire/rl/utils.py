"""
Shared helpers for agents and viewers.
"""
from typing import Sequence

from spire.models.action import Action


def format_action(action: Action) -> str:
    """
    Convert Action enum to human-readable string.

    Args:
        action: Action enum value

    Returns:
        Human-readable action string (e.g., "end turn", "play strike")
    """
    if action == Action.END_TURN:
        return "end turn"
    return f"play {action.value.lower()}"


def format_action_stats(stats: Sequence, chosen: Action) -> str:
    """
    Render root statistics as rich markup, highlighting the chosen action.

    Args:
        stats: (action, visits, mean_reward) tuples from MCTSAgent.select_action
        chosen: Action the agent picked

    Returns:
        One markup string such as "[bold green][strike:+1.42/120][/bold green] defend:+0.97/40"
    """
    parts = []
    for action, visits, mean_reward in stats:
        label = action.value.lower()
        if action == chosen:
            parts.append(f"[bold green][{label}:{mean_reward:+.2f}/{visits}][/bold green]")
        elif mean_reward > 1.0:
            parts.append(f"[green]{label}:{mean_reward:+.2f}/{visits}[/green]")
        else:
            parts.append(f"[dim]{label}:{mean_reward:+.2f}/{visits}[/dim]")
    return " ".join(parts)
