#!/usr/bin/env python3
"""Command-line interface for subsonic_catalog.

This CLI is primarily for debugging and development.
For production use, import subsonic_catalog as a library.
"""

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from subsonic_catalog.client import CatalogClient
from subsonic_catalog.config import ServerConfig
from subsonic_catalog.exceptions import CatalogError
from subsonic_catalog.models.enums import ListType
from subsonic_catalog.models.subsonic import Album, Song
from subsonic_catalog.transport import SubsonicTransport

logger = logging.getLogger("subsonic_catalog")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first so it can be called more than once.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


@contextmanager
def open_catalog(config: ServerConfig) -> Iterator[CatalogClient]:
    """Open a catalog whose transport is closed on exit."""
    with SubsonicTransport(config) as transport:
        yield CatalogClient(transport)


def format_duration(seconds: int | None) -> str:
    """Format seconds as M:SS, or H:MM:SS for an hour or more."""
    if seconds is None:
        return "-"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def print_album_card(console: Console, album: Album) -> None:
    """Print album fields as a vertical card."""
    table = Table(
        show_header=False,
        padding=(0, 1),
        title=f"[bold yellow]{album.name}[/bold yellow]",
        title_justify="left",
    )
    table.add_column("Field", style="bold cyan", width=12)
    table.add_column("Value", overflow="fold")

    table.add_row("ID", str(album.id))
    if album.artist:
        table.add_row("Artist", album.artist)
    if album.year is not None:
        table.add_row("Year", str(album.year))
    if album.genre:
        table.add_row("Genre", album.genre)
    table.add_row("Songs", str(album.song_count))
    table.add_row("Duration", format_duration(album.duration))
    if album.cover_id:
        table.add_row("Cover", album.cover_id)

    console.print()
    console.print(table)


def print_songs(console: Console, songs: tuple[Song, ...]) -> None:
    """Print songs as a table in server order."""
    table = Table(show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title")
    table.add_column("Artist", style="cyan")
    table.add_column("Length", justify="right")

    for song in songs:
        table.add_row(
            str(song.track) if song.track is not None else "",
            song.title,
            song.artist or "",
            format_duration(song.duration),
        )

    console.print()
    console.print(table)


def print_album_list(
    console: Console, albums: list[Album], list_type: ListType
) -> None:
    """Print an album list as a table."""
    table = Table(title=f"Albums ({list_type.label})", title_justify="left")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Name")
    table.add_column("Artist", style="cyan")
    table.add_column("Year", justify="right")
    table.add_column("Songs", justify="right")

    for album in albums:
        table.add_row(
            str(album.id),
            album.name,
            album.artist or "",
            str(album.year) if album.year is not None else "",
            str(album.song_count),
        )

    console.print(table)


def dump_json(data: object) -> None:
    """Write data to stdout as indented JSON."""
    json.dump(data, sys.stdout, indent=2, ensure_ascii=False, default=str)
    sys.stdout.write("\n")


@click.group()
@click.option(
    "--url", envvar="SUBSONIC_URL", required=True, help="Subsonic server URL."
)
@click.option("--user", envvar="SUBSONIC_USER", required=True, help="Username.")
@click.option(
    "--password", envvar="SUBSONIC_PASSWORD", required=True, help="Password."
)
@click.option(
    "--legacy-auth",
    is_flag=True,
    help="Send the hex-encoded password instead of a salted token.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    url: str,
    user: str,
    password: str,
    legacy_auth: bool,
    verbose: bool,
) -> None:
    """Browse albums on a Subsonic server."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = ServerConfig(
        base_url=url,
        username=user,
        password=password,
        token_auth=not legacy_auth,
    )
    setup_logging(verbose=verbose)


@main.command(name="album")
@click.argument("album_id", type=click.IntRange(min=0))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def album_cmd(ctx: click.Context, album_id: int, as_json: bool) -> None:
    """Show one album and its songs.

    \b
    Examples:
      subsonic-catalog album 1
      subsonic-catalog album 1 --json
    """
    console = Console()
    try:
        with open_catalog(ctx.obj["config"]) as catalog:
            album = catalog.fetch_album(album_id)
    except CatalogError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    if as_json:
        dump_json(album.model_dump(mode="json"))
        return

    print_album_card(console, album)
    print_songs(console, album.songs)


@main.command(name="albums")
@click.option(
    "--type",
    "list_type",
    type=click.Choice([t.value for t in ListType]),
    default=ListType.NEWEST.value,
    show_default=True,
    help="List ordering.",
)
@click.option("--size", type=click.IntRange(min=0), help="Number of albums.")
@click.option("--offset", type=click.IntRange(min=0), help="Albums to skip.")
@click.option(
    "--folder", "folder_id", type=click.IntRange(min=0), help="Music folder ID."
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def albums_cmd(
    ctx: click.Context,
    list_type: str,
    size: int | None,
    offset: int | None,
    folder_id: int | None,
    as_json: bool,
) -> None:
    """List albums by ordering.

    \b
    Examples:
      subsonic-catalog albums --type newest --size 20
      subsonic-catalog albums --type starred --json
    """
    console = Console()
    kind = ListType(list_type)
    try:
        with open_catalog(ctx.obj["config"]) as catalog:
            albums = catalog.fetch_album_list(
                kind, size=size, offset=offset, folder_id=folder_id
            )
    except CatalogError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    if as_json:
        dump_json([a.model_dump(mode="json") for a in albums])
        return

    if not albums:
        console.print("[yellow]No albums found[/yellow]")
        return
    print_album_list(console, albums, kind)


@main.command(name="songs")
@click.argument("album_id", type=click.IntRange(min=0))
@click.option(
    "--type",
    "list_type",
    type=click.Choice([t.value for t in ListType]),
    default=ListType.ALPHA_BY_NAME.value,
    show_default=True,
    help="List used to find the album.",
)
@click.pass_context
def songs_cmd(ctx: click.Context, album_id: int, list_type: str) -> None:
    """Show the songs of an album found through an album list.

    The album is looked up in a list response (which carries no songs),
    then its songs are loaded on demand.

    \b
    Examples:
      subsonic-catalog songs 1
      subsonic-catalog songs 1 --type newest
    """
    console = Console()
    try:
        with open_catalog(ctx.obj["config"]) as catalog:
            albums = catalog.fetch_album_list(ListType(list_type))
            album = next((a for a in albums if a.id == album_id), None)
            if album is None:
                raise click.ClickException(
                    f"Album {album_id} not found in {list_type} list"
                )
            songs = catalog.album_songs(album)
    except CatalogError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    console.print(f"[bold]{album.name}[/bold] [dim]({len(songs)} songs)[/dim]")
    print_songs(console, songs)


if __name__ == "__main__":
    main()
