"""
Pure battle rules for Spire.

Stateless functions that implement turn flow, card effects and the enemy turn.
They mutate the BattleState handed to them and are used both by BattleManager
(for playing a battle) and by the search agents (through BattleState's
simulation methods).
"""
import random
from typing import List, TYPE_CHECKING

from spire.models.card import CARDS, Card
from spire.models.action import Action
from spire.game.combat import Combat
from spire.game.deck import Deck
from spire.rl.simulation import ActionError

if TYPE_CHECKING:
    from spire.models.battle_state import BattleState


class InvalidActionError(ActionError):
    """The action cannot be applied to this battle state."""


def available_actions(state: 'BattleState') -> List[Action]:
    """
    Legal actions for the current state.

    Every distinct affordable card in hand can be played. END_TURN is offered
    once a card has been played this turn, or when nothing is affordable.
    """
    if state.game_over:
        return []

    actions = []
    for card in CARDS.values():
        if card.name in state.hand and card.cost <= state.energy:
            actions.append(Action(card.name))

    if state.cards_played > 0 or not actions:
        actions.append(Action.END_TURN)
    return actions


def apply_action(state: 'BattleState', action: Action, rng: random.Random) -> None:
    """
    Apply an action to the state in place.

    Raises:
        InvalidActionError: If the battle is over, or the card is not in hand or
            not affordable
    """
    if state.game_over:
        raise InvalidActionError(f"Battle is over, cannot apply {action.value}")

    if action == Action.END_TURN:
        end_turn(state, rng)
        return

    card = action.card
    if card.name not in state.hand:
        raise InvalidActionError(f"{card.name} is not in hand {state.hand}")
    if card.cost > state.energy:
        raise InvalidActionError(f"{card.name} costs {card.cost} but only {state.energy} energy left")

    play_card(state, card)

    if state.game_over:
        return
    if state.energy == 0 or not state.hand:
        end_turn(state, rng)


def play_card(state: 'BattleState', card: Card) -> None:
    state.hand = Deck.remove(state.hand, card.name)
    state.discard_pile = Deck.add(state.discard_pile, card.name)
    state.energy -= card.cost
    state.cards_played += 1

    if card.damage:
        state.enemy = Combat.attack_enemy(state.enemy, card.damage)
    if card.block:
        state.block += card.block


def end_turn(state: 'BattleState', rng: random.Random) -> None:
    """Discard the hand, let the enemy act, then start the next player turn."""
    state.discard_pile = Deck.make_pile(state.discard_pile + state.hand)
    state.hand = ()

    enemy_turn(state, rng)
    if state.lost:
        return
    start_player_turn(state, rng)


def enemy_turn(state: 'BattleState', rng: random.Random) -> None:
    """Pick a move by weight, roll its damage and hit the player through block."""
    enemy = state.enemy
    move = rng.choices(enemy.moves, weights=[m.weight for m in enemy.moves])[0]
    damage = rng.randint(move.min_damage, move.max_damage)

    hp_loss, state.block = Combat.calculate_damage(damage, state.block)
    state.health -= hp_loss
    # Enemy block from its previous turn expires before the new move's block
    state.enemy = enemy.with_changes(block=move.block)


def start_player_turn(state: 'BattleState', rng: random.Random) -> None:
    state.turn += 1
    state.block = 0
    state.energy = state.max_energy
    state.cards_played = 0
    draw_hand(state, rng)


def draw_hand(state: 'BattleState', rng: random.Random) -> None:
    drawn, state.draw_pile, state.discard_pile = Deck.draw(
        state.draw_pile, state.discard_pile, state.hand_size, rng
    )
    state.hand = Deck.make_pile(state.hand + tuple(drawn))
