"""Command-line interface: get, set, delete and list variables in a .env file."""

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from envedit.config import Preferences, load_preferences, save_preferences
from envedit.constants import APP_NAME, LIST_FORMATS
from envedit.document import EnvFile
from envedit.errors import EnvEditError
from envedit.models import KeyValue

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help="Edit .env files without disturbing comments, blank lines or ordering",
    no_args_is_help=True,
)

# Module-level defaults for Typer arguments
_FILE_HELP = "Path to the .env file (defaults to the configured default_file)"
_PATTERN_HELP = "Glob patterns to filter keys by, e.g. 'DB_*'"
_FORMAT_HELP = f"Output format: {', '.join(LIST_FORMATS)}"


@dataclass
class State:
    file: Path
    prefs: Preferences


def fail(message: str) -> NoReturn:
    """Print ``message`` to stderr and exit with status 1."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(1)


def resolve_path(file: str) -> Path:
    """Resolve ``file`` against the current working directory."""
    return Path(file).expanduser().absolute()


def open_for_read(state: State) -> EnvFile:
    try:
        return EnvFile.at(state.file).load()
    except EnvEditError as exc:
        fail(str(exc))


def open_for_write(state: State) -> EnvFile:
    try:
        return EnvFile.writable(state.file).load()
    except EnvEditError as exc:
        fail(str(exc))


def save(env: EnvFile) -> None:
    try:
        env.save()
    except EnvEditError as exc:
        fail(str(exc))


@app.callback()
def main(
    ctx: typer.Context,
    file: str | None = typer.Option(None, "--file", "-f", help=_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Edit .env files in place."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        prefs = load_preferences()
    except EnvEditError as exc:
        fail(str(exc))
    ctx.obj = State(file=resolve_path(file or prefs.default_file), prefs=prefs)
    logger.debug("Using %s", ctx.obj.file)


@app.command()
def init(
    ctx: typer.Context,
    template: Path | None = typer.Option(  # noqa: B008
        None, "--template", "-t", help="Seed the new file from this template"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Create the .env file, optionally from a template such as .env.example."""
    state: State = ctx.obj
    contents = ""
    if template is not None:
        try:
            source = EnvFile.at(template)
            contents = source.storage.read_text(source.path)
        except EnvEditError as exc:
            fail(str(exc))

    env = EnvFile(state.file)
    if env.exists() and not force:
        fail(f"{state.file} already exists, use --force to overwrite it")

    try:
        if env.exists():
            env.storage.write_text(env.path, contents)
        else:
            EnvFile.create(state.file, contents)
    except EnvEditError as exc:
        fail(str(exc))
    typer.echo(f"Initialised {state.file}")


@app.command()
def get(ctx: typer.Context, key: str = typer.Argument(..., help="Variable name")) -> None:
    """Print the value of KEY."""
    env = open_for_read(ctx.obj)
    value = env.get(key)
    if value is None:
        fail(f"{key} is not defined in {env.path}")
    typer.echo(value)


@app.command("set")
def set_(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Variable name"),
    value: str = typer.Argument(..., help="Value to assign"),
    quote_single: bool = typer.Option(False, "--quote-single", help="Wrap the value in '"),
    quote_double: bool = typer.Option(False, "--quote-double", help='Wrap the value in "'),
) -> None:
    """Set KEY to VALUE, replacing an existing definition in place or appending it."""
    state: State = ctx.obj
    if quote_single and quote_double:
        fail("--quote-single and --quote-double are mutually exclusive")

    quote = state.prefs.default_quote
    if quote_single:
        quote = "'"
    elif quote_double:
        quote = '"'

    env = open_for_write(state)
    existed = env.has_key(key)
    env.set(key, value, quote)
    save(env)
    verb = "Updated" if existed else "Added"
    typer.echo(f"{verb} {KeyValue(key, value, quote).to_string()}")


@app.command()
def delete(
    ctx: typer.Context,
    keys: list[str] = typer.Argument(..., help="Variable names to remove"),  # noqa: B008
) -> None:
    """Remove every definition of each KEY."""
    env = open_for_write(ctx.obj)
    total = 0
    for key in keys:
        removed = env.remove(key)
        total += removed
        if removed:
            typer.echo(f"Removed {key} ({removed} line{'s' if removed != 1 else ''})")
        else:
            typer.echo(f"{key} is not defined", err=True)

    if not total:
        sys.exit(1)
    save(env)


@app.command("list")
def list_(
    ctx: typer.Context,
    patterns: list[str] | None = typer.Argument(None, help=_PATTERN_HELP),  # noqa: B008
    output_format: str | None = typer.Option(None, "--format", help=_FORMAT_HELP),
) -> None:
    """List variables, optionally only those whose keys match PATTERNs."""
    state: State = ctx.obj
    output_format = output_format or state.prefs.list_format
    if output_format not in LIST_FORMATS:
        fail(f"Unknown format {output_format!r}, expected one of {', '.join(LIST_FORMATS)}")

    env = open_for_read(state)
    variables = env.dictionary_with_keys_matching(patterns) if patterns else env.dictionary()

    if output_format == "json":
        typer.echo(json.dumps(variables, indent=2))
    elif output_format == "dotenv":
        for key, value in variables.items():
            typer.echo(KeyValue(key, value).to_string())
    else:
        table = Table("Key", "Value")
        for key, value in variables.items():
            table.add_row(Text(key), Text(value))
        Console().print(table)


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the absolute path of the .env file in use."""
    typer.echo(str(ctx.obj.file))


@app.command()
def configure(
    ctx: typer.Context,
    default_file: str | None = typer.Option(None, "--default-file", help="Default .env path"),
    default_quote: str | None = typer.Option(
        None, "--default-quote", help="Quote used by set: \"'\", '\"' or ''"
    ),
    list_format: str | None = typer.Option(None, "--list-format", help=_FORMAT_HELP),
) -> None:
    """Update the saved preferences and print them."""
    updates = {
        "default_file": default_file,
        "default_quote": default_quote,
        "list_format": list_format,
    }
    data = ctx.obj.prefs.model_dump() | {k: v for k, v in updates.items() if v is not None}
    try:
        prefs = Preferences.model_validate(data)
    except ValidationError as exc:
        fail(f"Invalid preference: {exc}")

    if any(v is not None for v in updates.values()):
        try:
            save_preferences(prefs)
        except EnvEditError as exc:
            fail(str(exc))
    typer.echo(json.dumps(prefs.model_dump(), indent=2))
