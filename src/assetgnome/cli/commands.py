"""CLI commands for assetgnome.

Developer tooling around the library: inspect the directory an item maps to,
classify filenames, list an item's local files and the journaled user actions
in a local library.

Design:
- Typer app and Rich Console are instantiated at module level for reuse across
  commands.
- Item descriptors are read from YAML or JSON files (YAML is a superset), in
  either the server's PascalCase DTO shape or the MediaItemRef field names.
- Library root and database path resolve CLI > env > config.toml > default.
"""

import asyncio
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, List, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.traceback import install as install_traceback

from assetgnome.core.asset_manager import LocalAssetManager
from assetgnome.core.classifier import classify_file
from assetgnome.models.core import MediaItemRef, ServerIdentity
from assetgnome.storage.local import LocalFileStorage
from assetgnome.storage.sqlite import SqliteActionStorage, SqliteItemStorage
from assetgnome.utils import config
from assetgnome.utils import debug as log

install_traceback(show_locals=False)

app = typer.Typer(
    name="assetgnome",
    help="Inspect the local asset library of an offline media-sync client.",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Read and write persistent settings.")
app.add_typer(config_app, name="config")
console = Console()


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


ITEM_FILE = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="YAML or JSON file describing the media item",
    ),
]

SERVER = Annotated[
    str,
    typer.Option("--server", "-s", help="Server name (top-level library folder)"),
]

ROOT = Annotated[
    Optional[Path],
    typer.Option("--root", "-r", help="Library root directory"),
]

DATABASE = Annotated[
    Optional[Path],
    typer.Option("--db", help="SQLite database holding actions and items"),
]


def load_item(item_file: Path) -> MediaItemRef:
    """Load a MediaItemRef from a YAML/JSON descriptor file.

    Raises:
        typer.BadParameter: If the file does not describe an item.
    """
    with item_file.open("r", encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{item_file} does not contain a mapping")
    try:
        if "category" in data or "id" in data:
            return MediaItemRef.model_validate(data)
        return MediaItemRef.from_dto(data)
    except ValidationError as e:
        raise typer.BadParameter(f"Invalid item in {item_file}: {e}") from e


def build_manager(root: Optional[Path], database: Optional[Path]) -> LocalAssetManager:
    """Create a manager over the local library and its SQLite database."""
    library_root = config.get_library_root(root)
    db_path = config.get_database_path(database, library_root)
    log.debug("Library root %s, database %s", library_root, db_path)
    return LocalAssetManager(
        SqliteActionStorage(db_path),
        SqliteItemStorage(db_path),
        LocalFileStorage(library_root),
    )


def _fail(message: str) -> NoReturn:
    log.debug("Command failed: %s", message)
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(ExitCode.ERROR)


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output. Can also be set with ASSETGNOME_DEBUG=1.",
        ),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    if verbose or log.DEBUG_ON:
        log.setup_logger(logging.DEBUG)


@app.command()
def version() -> None:
    """Show the version of assetgnome."""
    from assetgnome.__about__ import __version__

    console.print(f"AssetGnome version: [bold]{__version__}[/bold]")


@app.command()
def path(
    item_file: ITEM_FILE,
    server: SERVER,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the segments as a JSON list")
    ] = False,
    root: ROOT = None,
) -> None:
    """Show the library directory an item's files are stored in."""
    manager = build_manager(root, None)
    item = load_item(item_file)
    segments = manager.get_directory_path(item, ServerIdentity(name=server))
    if as_json:
        console.print_json(json.dumps(segments))
    else:
        console.print("/".join(segments), markup=False, highlight=False)


@app.command()
def classify(
    filenames: Annotated[List[str], typer.Argument(help="Filenames to classify")],
) -> None:
    """Show how filenames are classified (media, image or subtitles)."""
    table = Table(title="Classification")
    table.add_column("File", overflow="fold")
    table.add_column("Type", no_wrap=True)
    table.add_column("Image role", no_wrap=True)
    for name in filenames:
        result = classify_file(name)
        table.add_row(
            name,
            result.type.value,
            result.image_type.value if result.image_type else "-",
        )
    console.print(table)


@app.command("ls")
def list_files(
    item_file: ITEM_FILE,
    server: SERVER,
    root: ROOT = None,
) -> None:
    """List the local files stored for an item."""
    manager = build_manager(root, None)
    item = load_item(item_file)
    files = asyncio.run(manager.get_files(item, ServerIdentity(name=server)))
    if not files:
        console.print("[yellow]No local files for this item.[/yellow]")
        return
    table = Table(title=f"Local files for {item.name or item.id}")
    table.add_column("Name", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Path", overflow="fold")
    for entry in files:
        table.add_row(entry.name, entry.type.value, entry.path)
    console.print(table)


@app.command()
def actions(
    server_id: Annotated[str, typer.Argument(help="Server id to list actions for")],
    root: ROOT = None,
    database: DATABASE = None,
) -> None:
    """List the user actions recorded for a server."""
    manager = build_manager(root, database)
    records = asyncio.run(manager.get_user_actions(server_id))
    if not records:
        console.print(f"[yellow]No recorded actions for server {server_id}.[/yellow]")
        return
    table = Table(title=f"User actions for {server_id}")
    table.add_column("Id", overflow="fold")
    table.add_column("Type", no_wrap=True)
    table.add_column("Item", no_wrap=True)
    table.add_column("Date", overflow="fold")
    for record in records:
        table.add_row(
            record.id or "-",
            record.type.value,
            record.item_id or "-",
            record.date.isoformat(),
        )
    console.print(table)


@config_app.command("get")
def config_get(key: Annotated[str, typer.Argument(help="Dotted setting key")]) -> None:
    """Show the resolved value of a setting."""
    value = config.resolve_setting(key, default=None)
    if value is None:
        _fail(f"Setting {key!r} is not set")
    console.print(str(value), markup=False, highlight=False)


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Dotted setting key, e.g. library.root")],
    value: Annotated[str, typer.Argument(help="Value to store")],
) -> None:
    """Persist a setting in config.toml."""
    config.set_setting(key, value)
    log.info("Stored %s in %s", key, config.CONFIG_FILE)
    console.print(f"[green]Set[/green] {key} = {value}")


if __name__ == "__main__":
    app()
