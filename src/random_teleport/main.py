"""CLI startup entrypoint for random-teleport."""

from __future__ import annotations

import asyncio
import logging

import typer
from rich import print

from random_teleport.adapters import MinescriptGameCommandAdapter, MinescriptUnavailableError
from random_teleport.cli import SearchHandler
from random_teleport.config import settings
from random_teleport.exceptions import InvalidParameterError, NotFoundError, SearchInProgressError
from random_teleport.terrain import CommandTerrainResolver, InMemoryTerrainResolver, TerrainResolver
from random_teleport.validators import ValidatorRegistry, builtin_validators
from random_teleport.world import DemoWorld

app = typer.Typer(help="Random location search around a center point")


@app.callback()
def main(log_level: str = typer.Option(None, help="Override RANDOM_TELEPORT_LOG_LEVEL")) -> None:
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _build_resolver() -> TerrainResolver:
    if settings.terrain_backend.lower() == "minescript":
        try:
            adapter = MinescriptGameCommandAdapter(command_prefix=settings.minescript_command_prefix)
        except MinescriptUnavailableError as exc:
            logging.getLogger("random_teleport.main").warning("minescript_unavailable", extra={"error": str(exc)})
            return InMemoryTerrainResolver()
        return CommandTerrainResolver(adapter)
    return InMemoryTerrainResolver()


def _build_validators(world_seed: int) -> ValidatorRegistry:
    world = DemoWorld(seed=world_seed, border_radius=settings.world_border_radius)
    return ValidatorRegistry(builtin_validators(world, blocked=settings.blocked_surface_blocks))


def _build_handler(world_seed: int = 0) -> SearchHandler:
    return SearchHandler(_build_resolver(), validators=_build_validators(world_seed))


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "world_name": settings.world_name,
            "terrain_backend": settings.terrain_backend,
            "default_radius": [settings.default_min_radius, settings.default_max_radius],
            "default_max_checks": settings.default_max_checks,
            "search_timeout_seconds": settings.search_timeout_seconds,
        }
    )


@app.command()
def validators(world_seed: int = typer.Option(0, help="Seed of the demo world")) -> None:
    """List the validators applied to every search, in evaluation order."""
    print({"validators": _build_validators(world_seed).names()})


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def search(
    ctx: typer.Context,
    x: int = typer.Option(0, help="Center X"),
    z: int = typer.Option(0, help="Center Z"),
    world: str = typer.Option(None, help="World name"),
    min_radius: int = typer.Option(None, help="Minimum distance from the center"),
    max_radius: int = typer.Option(None, help="Maximum distance from the center (exclusive)"),
    seed: int = typer.Option(None, help="Seed for reproducible searches"),
    world_seed: int = typer.Option(0, help="Seed of the demo world"),
) -> None:
    """Search a random location. Extra tokens are search options, e.g. ``-biome desert -tries 20``."""
    handler = _build_handler(world_seed)
    try:
        searcher = handler.build_searcher(
            x=x,
            z=z,
            world=world,
            min_radius=min_radius,
            max_radius=max_radius,
            tokens=ctx.args,
        )
        if seed is not None:
            searcher.seed = seed
    except InvalidParameterError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        location = handler.run_sync(searcher)
    except NotFoundError as exc:
        print({"location": None, "error": str(exc), "checks": searcher.checks})
        raise typer.Exit(code=1)
    except asyncio.TimeoutError:
        print({"location": None, "error": "search timed out", "checks": searcher.checks})
        raise typer.Exit(code=1)
    except SearchInProgressError as exc:
        print({"location": None, "error": str(exc)})
        raise typer.Exit(code=1)

    print(
        {
            "location": {"world": location.world, "x": location.x, "y": location.y, "z": location.z},
            "checks": searcher.checks,
            "search_id": searcher.id,
            "cooldown": searcher.cooldown,
        }
    )


if __name__ == "__main__":
    app()
