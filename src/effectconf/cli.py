"""effectconf CLI application.

This module provides the command-line interface for inspecting the effect
odds and mega settings derived from a set of configuration files.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer

from effectconf.common.enums import Effect
from effectconf.constants import MAX_ODDS_MAGNITUDE, MIN_ODDS_MAGNITUDE
from effectconf.manager.effects import EffectManager
from effectconf.models.species import Species
from effectconf.settings.user import StoreSettings
from effectconf.store.errors import ConfigLoadError

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Effect odds and mega settings CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "effectconf.cli"

CONFIG_OPTION = typer.Option(
    None, "--config", "-c", dir_okay=False, help="Settings file (default: search paths)"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
EFFECT_OPTION = typer.Option(None, "--effect", "-e", help="Only show this effect")
MEGA_ARGUMENT = typer.Argument(..., help="Mega name, e.g. 'Mega Gengar'")


def _build_manager(config: Path | None, debug: bool) -> EffectManager:
    try:
        settings = StoreSettings.load(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        return EffectManager.from_paths(settings.load_paths)
    except ConfigLoadError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _format_odds(manager: EffectManager, effect: Effect) -> str:
    values = " ".join(
        f"{manager.get_odds(effect, num):.2f}"
        for num in range(MIN_ODDS_MAGNITUDE, MAX_ODDS_MAGNITUDE + 1)
    )
    return f"{effect.key:<20} {values}"


@app.command()
def odds(
    config: Path | None = CONFIG_OPTION,
    effect: str | None = EFFECT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show effect odds for combo sizes 3 through 6."""
    manager = _build_manager(config, debug)
    if effect is None:
        selected = list(Effect)
    else:
        try:
            selected = [Effect.from_key(effect)]
        except KeyError as exc:
            typer.secho(f"Unknown effect: {effect}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1) from exc

    for item in selected:
        typer.echo(_format_odds(manager, item))


@app.command()
def mega(
    name: str = MEGA_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the mega speedup cap and threshold for a mega name."""
    manager = _build_manager(config, debug)
    species = Species(name=name, mega_name=name)
    typer.echo(f"speedup cap: {manager.get_mega_speedup_cap(species)}")
    typer.echo(f"threshold:   {manager.get_mega_threshold(species)}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a settings file and every value file it lists."""
    try:
        settings = StoreSettings.load(file)
        EffectManager.from_paths(settings.load_paths)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError, ConfigLoadError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
