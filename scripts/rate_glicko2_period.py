#!/usr/bin/env python3
"""Run one Glicko-2 rating period from a TOML period file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from ratings.common import Glicko2Settings
from ratings.config_base import select_system_config
from ratings.exceptions import Glicko2Error
from ratings.glicko2.config import Glicko2SystemConfig, load_glicko2_system_configs
from ratings.glicko2.conversions import to_glicko_state
from ratings.glicko2.period import Glicko2PeriodCalculator
from ratings.glicko2.period_file import load_period_file

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ratings" / "glicko2"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Glicko-2 rating period jobs.",
)


def _select_config(config_dir: Path, config_name: str | None) -> Glicko2SystemConfig:
    try:
        configs = load_glicko2_system_configs(config_dir)
    except (FileNotFoundError, NotADirectoryError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config-dir") from exc
    try:
        return select_system_config(configs, config_name)
    except LookupError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config-name") from exc


@app.command()
def rate(
    period_file: Annotated[
        Path,
        typer.Argument(help="TOML file with [[players]] and [[matches]] for one period."),
    ],
    config_dir: Annotated[
        Path,
        typer.Option(
            "--config-dir",
            help="Directory containing Glicko-2 system TOML config files.",
        ),
    ] = DEFAULT_CONFIG_DIR,
    config_name: Annotated[
        str | None,
        typer.Option(
            "--config-name",
            help="Optional single config filename (for example: default.toml).",
        ),
    ] = None,
    tau: Annotated[
        float | None,
        typer.Option("--tau", help="Override the system constant from the config."),
    ] = None,
    epsilon: Annotated[
        float | None,
        typer.Option("--epsilon", help="Override the convergence tolerance from the config."),
    ] = None,
) -> None:
    """Compute post-period ratings and print them on the Glicko scale."""
    if tau is not None and tau <= 0.0:
        raise typer.BadParameter("--tau must be greater than 0")
    if epsilon is not None and epsilon <= 0.0:
        raise typer.BadParameter("--epsilon must be greater than 0")

    system_config = _select_config(config_dir, config_name)
    settings = Glicko2Settings(
        system_constant=system_config.settings.system_constant if tau is None else tau,
        convergence_tolerance=(
            system_config.settings.convergence_tolerance if epsilon is None else epsilon
        ),
        max_iterations=system_config.settings.max_iterations,
    )

    try:
        players, matches = load_period_file(
            period_file,
            default_volatility=system_config.initial_volatility,
        )
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="PERIOD_FILE") from exc

    calculator = Glicko2PeriodCalculator(settings)
    try:
        updated_players = calculator.process_period(players, matches)
    except Glicko2Error as exc:
        typer.echo(f"error: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(
        f"glicko2_system={system_config.name} "
        f"players={len(updated_players)} "
        f"matches={len(matches)} "
        f"tau={settings.system_constant}"
    )
    for key, player in updated_players.items():
        glicko_player = to_glicko_state(player)
        typer.echo(
            f"player={key} "
            f"rating={glicko_player.rating:.2f} "
            f"rd={glicko_player.deviation:.2f} "
            f"volatility={player.volatility:.6f}"
        )


if __name__ == "__main__":
    app()
