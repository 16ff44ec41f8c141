"""Typer CLI application."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from xp_progression.cli.display import Display
from xp_progression.config import ProgressionSettings, load_config
from xp_progression.errors import LevelNotReachableError, ProgressionError
from xp_progression.mechanics.formulas import FORMULA_NAMES, STEPPED_FORMULAS, get_formula
from xp_progression.mechanics.level_floor import LevelFormula
from xp_progression.models.progression import Progression

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="xp-progression",
    help="Experience and level calculations for monotonic level formulas",
    no_args_is_help=True,
)

_FORMULA_HELP = f"Level formula ({', '.join(FORMULA_NAMES)})"


def _build_formula(settings: ProgressionSettings, name: Optional[str], step: Optional[int]) -> LevelFormula:
    name = (name or settings.default_formula).lower()
    if name in STEPPED_FORMULAS:
        return get_formula(name, step=settings.step if step is None else step)
    return get_formula(name)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    ctx.obj = load_config(config)


@app.command()
def floor(
    ctx: typer.Context,
    level: int = typer.Argument(..., help="Level to look up"),
    formula: Optional[str] = typer.Option(None, "--formula", "-f", help=_FORMULA_HELP),
    step: Optional[int] = typer.Option(None, "--step", help="Experience step for linear/quadratic formulas"),
) -> None:
    """Print the minimum experience needed to be at LEVEL."""
    settings: ProgressionSettings = ctx.obj
    display = Display()
    try:
        progression = Progression(_build_formula(settings, formula, step), upper_bound=settings.upper_bound)
        display.show_floor(level, progression.experience_for_level(level))
    except ProgressionError as e:
        display.show_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def status(
    ctx: typer.Context,
    experience: int = typer.Argument(..., help="Total accumulated experience"),
    formula: Optional[str] = typer.Option(None, "--formula", "-f", help=_FORMULA_HELP),
    step: Optional[int] = typer.Option(None, "--step", help="Experience step for linear/quadratic formulas"),
) -> None:
    """Show level and progress for EXPERIENCE."""
    settings: ProgressionSettings = ctx.obj
    display = Display()
    try:
        progression = Progression(
            _build_formula(settings, formula, step), experience, settings.upper_bound
        )
        display.show_status(progression)
    except ProgressionError as e:
        display.show_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def table(
    ctx: typer.Context,
    max_level: int = typer.Argument(..., help="Highest level to list"),
    formula: Optional[str] = typer.Option(None, "--formula", "-f", help=_FORMULA_HELP),
    step: Optional[int] = typer.Option(None, "--step", help="Experience step for linear/quadratic formulas"),
) -> None:
    """List the experience floor of every level from 0 to MAX_LEVEL."""
    settings: ProgressionSettings = ctx.obj
    display = Display()
    try:
        progression = Progression(_build_formula(settings, formula, step), upper_bound=settings.upper_bound)
        rows = []
        for level in range(max_level + 1):
            try:
                rows.append((level, progression.experience_for_level(level)))
            except LevelNotReachableError as e:
                logger.debug(f"Skipping level {level}: {e}")
        display.show_floor_table(rows)
    except ProgressionError as e:
        display.show_error(str(e))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
