"""
Exceptions raised by the search engine.

None of these are meant to be caught by the engine itself: they signal a bug in
the simulation or a broken search invariant.
"""


class SearchError(Exception):
    """Base class for search failures."""


class SimulationContractError(SearchError):
    """An action listed as available was rejected by ``eval_action``."""

    def __init__(self, state_type: str, action, error: Exception, available_actions, context: str = ""):
        self.state_type = state_type
        self.action = action
        self.error = error
        self.available_actions = list(available_actions)
        message = (
            "eval_action failed for an action from list_available_actions()\n"
            f"State Type: {state_type}\n"
            f"Failed Action: {action!r}\n"
            f"Error: {error!r}\n"
            f"Available Actions: {self.available_actions!r}"
        )
        if context:
            message += f"\n{context}"
        super().__init__(message)


class SearchInvariantError(SearchError):
    """The tree reached a shape the search algorithm guarantees cannot happen."""
