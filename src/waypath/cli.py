"""
Command-line interface for Waypath.

Provides commands for browsing configured profiles and paths and for
generating trajectories from them.
"""

import json
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from waypath import __version__
from waypath.core.config import ConfigManager
from waypath.core.exceptions import WaypathError
from waypath.core.logging import configure_logging, generation_context
from waypath.generator import TrajectoryGenerator

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default="config",
    help="Configuration directory",
)
@click.option("--log-level", default="WARNING", help="Minimum log level")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.pass_context
def main(ctx: click.Context, config_dir: Path, log_level: str, json_logs: bool) -> None:
    """Waypath - spline trajectory generation for planar robots."""
    configure_logging(level=log_level, json_output=json_logs)
    ctx.ensure_object(dict)
    ctx.obj["config_dir"] = config_dir


# =============================================================================
# Configuration Commands
# =============================================================================


@main.group()
def config() -> None:
    """Configuration commands."""
    pass


@config.command("list-profiles")
@click.pass_context
def config_list_profiles(ctx: click.Context) -> None:
    """List available limit profiles."""
    try:
        config_mgr = ConfigManager(ctx.obj["config_dir"])
        profiles = config_mgr.list_profiles()

        if not profiles:
            console.print("[yellow]No profiles found.[/yellow]")
            return

        table = Table(title="Limit Profiles")
        table.add_column("Name", style="cyan")
        table.add_column("Max Velocity", justify="right")
        table.add_column("Max Acceleration", justify="right")
        table.add_column("Centripetal", justify="right")
        table.add_column("Regions", justify="right")

        for name in profiles:
            profile = config_mgr.get_profile(name)
            centripetal = profile.max_centripetal_acceleration
            table.add_row(
                name,
                f"{profile.max_velocity:g}",
                f"{profile.max_acceleration:g}",
                "-" if centripetal is None else f"{centripetal:g}",
                str(len(profile.regions)),
            )

        console.print(table)

    except WaypathError as e:
        console.print(f"[red]✗[/red] Failed to list profiles: {e}")
        raise SystemExit(1)


@config.command("list-paths")
@click.pass_context
def config_list_paths(ctx: click.Context) -> None:
    """List available paths."""
    try:
        config_mgr = ConfigManager(ctx.obj["config_dir"])
        paths = config_mgr.list_paths()

        if not paths:
            console.print("[yellow]No paths found.[/yellow]")
            return

        table = Table(title="Paths")
        table.add_column("Name", style="cyan")
        table.add_column("Waypoints", justify="right")
        table.add_column("Profile")
        table.add_column("Reversed")

        for name in paths:
            path = config_mgr.get_path(name)
            table.add_row(
                name,
                str(len(path.waypoints)),
                path.profile or "default",
                "✓" if path.reversed else "-",
            )

        console.print(table)

    except WaypathError as e:
        console.print(f"[red]✗[/red] Failed to list paths: {e}")
        raise SystemExit(1)


# =============================================================================
# Trajectory Commands
# =============================================================================


@main.group()
def trajectory() -> None:
    """Trajectory generation commands."""
    pass


@trajectory.command("generate")
@click.argument("path_name")
@click.option("--profile", "-p", help="Override the path's limit profile")
@click.option("--dt", type=float, default=0.02, show_default=True, help="Export period (s)")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the resampled trajectory as JSON",
)
@click.pass_context
def trajectory_generate(
    ctx: click.Context,
    path_name: str,
    profile: Optional[str],
    dt: float,
    output: Optional[Path],
) -> None:
    """Generate a trajectory for a configured path."""
    try:
        config_mgr = ConfigManager(ctx.obj["config_dir"])
        path = config_mgr.get_path(path_name)
        generator_config = config_mgr.generator_config(path_name, profile)

        with generation_context(path=path_name):
            result = TrajectoryGenerator.from_config(generator_config).generate_from_config(
                path.poses(), generator_config
            )

        velocities = [abs(state.velocity) for state in result]
        table = Table(title=f"Trajectory: {path.name}")
        table.add_column("Property", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Profile", generator_config.limits.name)
        table.add_row("Samples", str(len(result)))
        table.add_row("Length", f"{result.length:.3f}")
        table.add_row("Duration (s)", f"{result.duration:.3f}")
        table.add_row("Peak velocity", f"{max(velocities):.3f}")
        table.add_row("Reversed", "✓" if generator_config.reversed else "-")
        console.print(table)

        if output is not None:
            output.write_text(json.dumps(result.to_dict(dt=dt), indent=2))
            console.print(f"[green]✓[/green] Wrote trajectory to {output}")

    except WaypathError as e:
        console.print(f"[red]✗[/red] Failed to generate trajectory: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
