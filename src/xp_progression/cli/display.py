"""Rich terminal rendering for progression results."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from xp_progression.errors import LevelNotReachableError
from xp_progression.models.progression import Progression

console = Console()


class Display:
    def __init__(self, output: Console | None = None, bar_width: int = 20):
        self.console = output or console
        self.bar_width = bar_width

    def show_floor(self, level: int, experience: int) -> None:
        self.console.print(
            f"Level [bold yellow]{level}[/bold yellow] starts at "
            f"[bold cyan]{experience}[/bold cyan] experience"
        )

    def show_status(self, progression: Progression) -> None:
        table = Table(title="Progression", box=box.ROUNDED, show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Experience", str(progression.experience))
        table.add_row("Level", str(progression.level))
        try:
            until_level_up = str(progression.experience_until_level_up)
            progress = self._progress_bar(progression.percentage_until_level_up)
        except LevelNotReachableError:
            until_level_up = "max level"
            progress = self._progress_bar(100)
        table.add_row("Until level up", until_level_up)
        table.add_row("Progress", progress)
        self.console.print(table)

    def show_floor_table(self, rows: list[tuple[int, int]]) -> None:
        table = Table(title="Level floors", box=box.SIMPLE)
        table.add_column("Level", justify="right", style="yellow")
        table.add_column("Experience", justify="right", style="cyan")
        for level, experience in rows:
            table.add_row(str(level), str(experience))
        self.console.print(table)

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def _progress_bar(self, percentage: int) -> Text:
        filled = percentage * self.bar_width // 100
        color = "green" if percentage >= 75 else ("yellow" if percentage >= 25 else "red")
        bar = Text()
        bar.append(f"[{'█' * filled}{'░' * (self.bar_width - filled)}]", style=color)
        bar.append(f" {percentage}%")
        return bar
