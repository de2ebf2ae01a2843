from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.columns import Columns
from rich.align import Align
from rich.box import ROUNDED
from rich import box
from spire.models.battle_state import BattleState
from spire.models.card import CARDS, Card, CardColor


class TerminalUI:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.terminal_height = self.console.height

        self.header_height = 4
        self.hand_height = 5
        self.actions_height = 3
        self.total_height = self.header_height + self.hand_height + self.actions_height
        self.total_width = 88

    def create_card_panel(self, card: Card, count: int, playable: bool) -> Panel:
        """Create a stylized panel for a card in hand"""
        color = CardColor[card.type] if playable else "grey50"
        title = f"x{count}" if count > 1 else ""

        return Panel(
            f"[bold {color}]{str(card)}[/bold {color}]",
            title=title,
            subtitle=card.description,
            border_style=color,
            box=box.ROUNDED,
            width=20,
            padding=(0, 1),
            height=3,
        )

    def print_battle_header_panel(self, state: BattleState):
        health_ratio = state.health / state.max_health if state.max_health else 0
        health_color = (
            "green"
            if health_ratio > 0.5
            else "yellow" if health_ratio > 0.25 else "red"
        )
        enemy = state.enemy
        header_content = (
            f"[bold {health_color}]Health: {state.health}/{state.max_health}[/bold {health_color}]  "
            f"[blue]Block: {state.block}[/blue]  "
            f"[yellow]Energy: {state.energy}/{state.max_energy}[/yellow]  "
            f"[grey50]Draw: {len(state.draw_pile)} Discard: {len(state.discard_pile)}[/grey50]\n"
            f"[red]{enemy.name}: {enemy.hp}/{enemy.max_hp}[/red]  [blue]Block: {enemy.block}[/blue]"
        )

        header = Panel(
            Align.center(header_content, vertical="middle"),
            title=f"[bold]Spire - Turn {state.turn}[/bold]",
            box=ROUNDED,
            padding=(0, 1),
            width=self.total_width,
            height=self.header_height,
        )
        self.console.print(header)

    def print_battle_over_panel(self, state: BattleState):
        if state.won:
            over_color, title_content = "green", "Victory"
        elif state.lost:
            over_color, title_content = "red", "Defeat"
        else:
            over_color, title_content = "yellow", "Out of turns"

        over_panel = Panel(
            Align.center(f"Evaluation: {state.evaluate():.3f}", vertical="middle"),
            title=f"[bold {over_color}]{title_content}[/bold {over_color}]",
            border_style=over_color,
            box=ROUNDED,
            padding=(0, 1),
            width=self.total_width,
            height=self.hand_height + self.actions_height,
        )
        self.console.print(over_panel)

    def print_hand_panel(self, state: BattleState):
        hand_cards = []
        for card in CARDS.values():
            count = state.hand.count(card.name)
            if count:
                hand_cards.append(self.create_card_panel(card, count, card.cost <= state.energy))

        hand_display = Panel(
            Columns(hand_cards, padding=1, width=20) if hand_cards else "Empty hand",
            title="[bold blue]Hand[/bold blue]",
            border_style="blue",
            box=ROUNDED,
            padding=(0, 1),
            width=self.total_width,
            height=self.hand_height,
        )
        self.console.print(hand_display)

    def print_actions_panel(self, text: str, title: str = "Actions"):
        actions = Panel(
            text,
            title=f"[bold]{title}[/bold]",
            box=ROUNDED,
            padding=(0, 1),
            width=self.total_width,
            height=self.actions_height,
        )
        self.console.print(actions)

    def display_battle_state(
        self,
        state: BattleState,
        actions_override: Optional[str] = None,
        actions_title: str = "Actions",
    ):
        """Display the battle layout at the bottom of the screen"""
        self.console.clear()

        padding_lines = self.terminal_height - self.total_height - 1  # -1 for input prompt
        if padding_lines > 0:
            self.console.print("\n" * padding_lines, end="")

        self.print_battle_header_panel(state)

        if state.game_over:
            self.print_battle_over_panel(state)
            return

        self.print_hand_panel(state)

        if actions_override is None:
            options = [f"[bold white]{action.value}[/bold white]" for action in state.list_available_actions()]
            actions_override = "Commands: " + ", ".join(options)
        self.print_actions_panel(actions_override, actions_title)
