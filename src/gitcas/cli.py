"""CLI for gitcas."""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import CASConfig, load_config
from .errors import CASError
from .hashing import HashAlgorithm
from .path_mapping import hash_to_path
from .storage import ObjectStorage, make_object_storage
from .store import get_object, has_object, hash_object as compute_object_hash, put_object


app = typer.Typer(help="""\
Content-addressable object store compatible with git loose objects.
Hash, store and read blob, tree, commit and tag objects.""")

console = Console()
err_console = Console(stderr=True)


class _State:
    config_path: Optional[Path] = None
    store_dir: Optional[Path] = None


state = _State()


@app.callback()
def main(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to gitcas.yaml"),
    store: Optional[Path] = typer.Option(None, "--store", help="Store directory (filesystem backend)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Global options."""
    state.config_path = config
    state.store_dir = store
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


def _fail(e: Exception) -> NoReturn:
    err_console.print(f"[red]✗[/red] {escape(str(e))}")
    raise typer.Exit(1)


def require_config() -> CASConfig:
    """Load configuration, applying --store.

    Raises:
        typer.Exit: If the configuration cannot be loaded
    """
    try:
        config = load_config(state.config_path)
    except (FileNotFoundError, CASError) as e:
        _fail(e)
    if state.store_dir is not None:
        config.storage.provider = "fs"
        config.storage.root = state.store_dir
    return config


def require_storage(config: CASConfig) -> ObjectStorage:
    """Create the configured backend.

    Raises:
        typer.Exit: If the backend is misconfigured
    """
    try:
        return make_object_storage(config.storage)
    except (ValueError, ImportError, NotImplementedError) as e:
        _fail(e)


@app.command("hash-object")
def hash_object(
    file: Path = typer.Argument(..., help="File to hash ('-' for stdin)"),
    obj_type: str = typer.Option("blob", "--type", "-t", help="Object type"),
    write: bool = typer.Option(False, "--write", "-w", help="Also store the object"),
    algorithm: Optional[HashAlgorithm] = typer.Option(
        None, "--algorithm", help="Hash algorithm (default from config)"
    ),
):
    """Compute an object hash, optionally storing the object.

    Examples:
        gitcas hash-object README.md          # Print the blob hash
        gitcas hash-object -w README.md       # Store and print the hash
        echo hello | gitcas hash-object -     # Hash stdin
    """
    config = require_config()
    algorithm = algorithm or config.algorithm

    if str(file) == "-":
        content = sys.stdin.buffer.read()
    else:
        if not file.is_file():
            _fail(FileNotFoundError(f"File not found: {file}"))
        content = file.read_bytes()

    try:
        if write:
            storage = require_storage(config)
            hash_value = put_object(
                storage, obj_type, content,
                algorithm=algorithm, level=config.compression_level,
            )
        else:
            hash_value = compute_object_hash(obj_type, content, algorithm=algorithm)
    except CASError as e:
        _fail(e)

    typer.echo(hash_value)


@app.command("cat-file")
def cat_file(
    hash_value: str = typer.Argument(..., metavar="HASH", help="Object hash"),
    show_type: bool = typer.Option(False, "--type", "-t", help="Print the object type"),
    show_size: bool = typer.Option(False, "--size", "-s", help="Print the content size"),
):
    """Print an object's content, type or size.

    Examples:
        gitcas cat-file b6fc4c620b67d95f953a5c1c1230aaab5db5a1b0
        gitcas cat-file -t b6fc4c620b67d95f953a5c1c1230aaab5db5a1b0
    """
    if show_type and show_size:
        _fail(ValueError("--type and --size are mutually exclusive"))

    storage = require_storage(require_config())
    try:
        obj = get_object(hash_value, storage)
    except CASError as e:
        _fail(e)

    if show_type:
        typer.echo(obj.type.value)
    elif show_size:
        typer.echo(str(len(obj.content)))
    else:
        typer.echo(obj.content, nl=False)


@app.command()
def exists(
    hash_value: str = typer.Argument(..., metavar="HASH", help="Object hash"),
):
    """Check whether an object is stored (exit code 1 if not)."""
    storage = require_storage(require_config())
    try:
        present = has_object(hash_value, storage)
    except CASError as e:
        _fail(e)

    if present:
        console.print(f"[green]✓[/green] {hash_value.lower()}")
    else:
        console.print(f"[yellow]✗[/yellow] {hash_value.lower()} not found")
        raise typer.Exit(1)


@app.command()
def path(
    hash_value: str = typer.Argument(..., metavar="HASH", help="Object hash"),
):
    """Print the storage path for a hash."""
    try:
        typer.echo(hash_to_path(hash_value))
    except CASError as e:
        _fail(e)


if __name__ == "__main__":
    app()
