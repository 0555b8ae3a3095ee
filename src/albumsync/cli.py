#!/usr/bin/env python3
"""Command-line interface for albumsync.

A thin terminal front end over CatalogController: every command forwards
its arguments into the controller and renders the resulting state.
"""

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from albumsync.controller import CatalogController
from albumsync.models.album import Album
from albumsync.models.enums import SearchField
from albumsync.models.form import CreateMode, EditMode
from albumsync.services.ui_state import UIState
from albumsync.settings import Settings, get_settings

logger = logging.getLogger("albumsync")

ControllerFactory = Callable[[Settings], CatalogController]

NO_RESULTS_MESSAGE = "No albums match your search criteria."

# CLI option name -> form field name
FORM_OPTIONS = {
    "title": "title",
    "artist": "artist",
    "genre": "genre",
    "release_date": "releaseDate",
    "duration": "duration",
    "country": "countryOfOrigin",
    "rating": "rating",
}


def setup_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first so it can be called more than once.

    Args:
        verbose: If True, log at DEBUG regardless of `level`.
        level: Log level name from settings.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(logging.DEBUG if verbose else level)
    root_logger.addHandler(handler)


def print_albums(console: Console, albums: Sequence[Album]) -> None:
    """Print albums as a table, one row per album."""
    table = Table(title="Album List", title_justify="left")
    table.add_column(SearchField.TITLE.label, style="bold")
    table.add_column(SearchField.ARTIST.label)
    table.add_column(SearchField.GENRE.label)
    table.add_column(SearchField.RELEASE_DATE.label)
    table.add_column(SearchField.DURATION.label, justify="right")
    table.add_column(SearchField.COUNTRY_OF_ORIGIN.label)
    table.add_column(SearchField.RATING.label, justify="right")
    table.add_column("ID", style="dim")

    for album in albums:
        table.add_row(
            album.title,
            album.artist,
            album.genre,
            album.release_day,
            f"{album.duration:g}",
            album.country_of_origin or "",
            f"{album.rating:g}",
            album.id,
        )

    console.print(table)


def print_result(
    console: Console, albums: Sequence[Album], state: UIState, as_json: bool
) -> None:
    if as_json:
        data = [a.model_dump(by_alias=True) for a in albums]
        json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    if state.error_message:
        # Saved, but the follow-up listing failed
        console.print(f"[red]{state.error_message}[/red]")
        return
    if state.no_results:
        console.print(f"[yellow]{NO_RESULTS_MESSAGE}[/yellow]")
        return
    print_albums(console, albums)


def run_with_controller(
    ctx: click.Context,
    action: Callable[[CatalogController], Awaitable[bool]],
    failure_prefix: str | None = None,
) -> tuple[tuple[Album, ...], UIState]:
    """Run one controller action and return what it left to render.

    Args:
        ctx: Click context holding settings and the controller factory.
        action: Coroutine function driving the controller.
        failure_prefix: Optional text put before the error banner.

    Raises:
        click.ClickException: If the action failed; the message is the
            controller's error banner.
    """
    factory: ControllerFactory = ctx.obj["controller_factory"]
    settings: Settings = ctx.obj["settings"]

    async def _run() -> tuple[bool, tuple[Album, ...], UIState]:
        async with factory(settings) as catalog:
            ok = await action(catalog)
            return ok, catalog.records, catalog.state()

    ok, albums, state = asyncio.run(_run())
    if not ok:
        message = state.error_message or "Operation failed"
        if failure_prefix:
            message = f"{failure_prefix} failed: {message}"
        raise click.ClickException(message)
    return albums, state


def fill_form(catalog: CatalogController, values: dict[str, Any]) -> None:
    """Copy the given CLI options into the form, skipping unset ones."""
    for option, field in FORM_OPTIONS.items():
        value = values.get(option)
        if value is not None:
            catalog.set_form_field(field, str(value))


def form_options(required_hint: bool) -> Callable[[Any], Any]:
    """Attach one option per album field to a command."""
    suffix = " (required)" if required_hint else ""

    def decorator(f: Any) -> Any:
        for name, help_text in reversed(
            [
                ("--title", f"Album title{suffix}."),
                ("--artist", f"Artist name{suffix}."),
                ("--genre", f"Genre{suffix}."),
                ("--release-date", f"Release date, YYYY-MM-DD{suffix}."),
                ("--duration", f"Duration in minutes{suffix}."),
                ("--rating", f"Rating from 0 to 10{suffix}."),
                ("--country", "Country of origin."),
            ]
        ):
            f = click.option(name, default=None, help=help_text)(f)
        return f

    return decorator


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("--api-url", default=None, help="Catalog service base address.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, api_url: str | None) -> None:
    """Browse and edit the music album catalog."""
    ctx.ensure_object(dict)
    try:
        settings = Settings(api_url=api_url) if api_url else get_settings()
    except ValidationError as e:
        raise click.ClickException(
            f"Configuration error: {e.errors()[0]['msg']}"
        ) from e

    ctx.obj["settings"] = settings
    ctx.obj.setdefault("controller_factory", CatalogController.from_settings)
    setup_logging(verbose=verbose, level=settings.log_level)
    logger.debug("Using catalog service at %s", settings.api_url)


@main.command(name="list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """Show every album in the catalog."""
    albums, state = run_with_controller(ctx, lambda catalog: catalog.show_all())
    print_result(Console(), albums, state, as_json)


@main.command(name="search")
@click.argument(
    "field", type=click.Choice([f.value for f in SearchField]), metavar="FIELD"
)
@click.argument("value", metavar="VALUE")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def search_cmd(ctx: click.Context, field: str, value: str, as_json: bool) -> None:
    """Show albums whose FIELD matches VALUE.

    \b
    Examples:
      albumsync search genre Pop
      albumsync search releaseDate 1982-11-30
    """

    async def action(catalog: CatalogController) -> bool:
        catalog.select_search_field(field)
        catalog.set_search_value(value)
        return await catalog.search()

    albums, state = run_with_controller(ctx, action)
    print_result(Console(), albums, state, as_json)


@main.command(name="add")
@form_options(required_hint=True)
@click.pass_context
def add_cmd(ctx: click.Context, **values: Any) -> None:
    """Add a new album, then show the catalog."""

    async def action(catalog: CatalogController) -> bool:
        catalog.open_create()
        fill_form(catalog, values)
        return await catalog.submit_form()

    mode = CreateMode()
    albums, state = run_with_controller(ctx, action, mode.action_label)
    console = Console()
    console.rule(mode.title)
    console.print(f"[green]Added[/green] {values.get('title')}")
    print_result(console, albums, state, as_json=False)


@main.command(name="edit")
@click.argument("album_id", metavar="ID")
@form_options(required_hint=False)
@click.pass_context
def edit_cmd(ctx: click.Context, album_id: str, **values: Any) -> None:
    """Change fields of album ID; fields not given keep their value."""

    async def action(catalog: CatalogController) -> bool:
        if not await catalog.show_all():
            return False
        try:
            catalog.start_edit(album_id)
        except KeyError as e:
            raise click.ClickException(f"Album not found: {album_id}") from e
        fill_form(catalog, values)
        return await catalog.submit_form()

    mode = EditMode(album_id=album_id)
    albums, state = run_with_controller(ctx, action, mode.action_label)
    console = Console()
    console.rule(mode.title)
    console.print(f"[green]Updated[/green] {album_id}")
    print_result(console, albums, state, as_json=False)


@main.command(name="delete")
@click.argument("album_id", metavar="ID")
@click.pass_context
def delete_cmd(ctx: click.Context, album_id: str) -> None:
    """Delete album ID, then show the catalog."""
    albums, state = run_with_controller(
        ctx, lambda catalog: catalog.delete(album_id)
    )
    console = Console()
    console.print(f"[green]Deleted[/green] {album_id}")
    print_result(console, albums, state, as_json=False)


if __name__ == "__main__":
    main()
