"""SafeDict CLI - inspect dicts built from JSON and YAML input."""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from ...exceptions import InvalidArgument, SafeDictException
from ...models import ABSENT, SafeDict
from ...operations import create, create_from_seed
from ..common import _handle_error, _handle_warn, console

logger = logging.getLogger(__name__)

ENTRIES_HELP = 'JSON object of initial entries (e.g., \'{"toString": 1, "constructor": 2}\')'
FILE_HELP = "YAML seed file with initial entries"
SET_HELP = "Set an entry as key=value; value is parsed as JSON when possible (repeatable)"
DELETE_HELP = "Delete an entry by key (repeatable)"


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _build_dict(
    entries: Optional[str],
    seed_file: Optional[Path],
    set_entries: Optional[List[str]],
    delete_keys: Optional[List[str]],
) -> SafeDict:
    """Build a SafeDict from command line input.

    The seed file is loaded first, then JSON entries override it, then
    ``--set`` and ``--delete`` are applied in that order.
    """
    d = create_from_seed(seed_file) if seed_file else create()

    if entries:
        try:
            parsed = json.loads(entries)
        except json.JSONDecodeError as e:
            raise InvalidArgument(f"Error parsing entries JSON: {e}") from e
        if not isinstance(parsed, dict):
            raise InvalidArgument(f"Entries JSON must be an object, got {type(parsed).__name__}")
        for key, value in create(parsed).iteritems():
            d.set(key, value)

    for assignment in set_entries or []:
        key, sep, raw = assignment.partition("=")
        if not sep:
            raise InvalidArgument(f"Invalid --set value {assignment!r}; expected key=value")
        d.set(key, _parse_value(raw))

    for key in delete_keys or []:
        if not d.delete(key):
            logger.debug("Key %r not present, nothing to delete", key)

    return d


def _format_value(value: Any) -> str:
    # YAML seeds can hold non-string mapping keys (dates, ints) or circular anchors
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError):
        return repr(value)


def show(
    entries: Optional[str] = typer.Option(None, "--entries", "-e", help=ENTRIES_HELP),
    seed_file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    set_entries: Optional[List[str]] = typer.Option(None, "--set", "-s", help=SET_HELP),
    delete_keys: Optional[List[str]] = typer.Option(None, "--delete", "-d", help=DELETE_HELP),
) -> None:
    """Show every entry of a dict.

    Examples:
        safedict show --entries '{"toString": 1, "constructor": 2}'

        safedict show --file seed.yaml --set __proto__=3 --delete constructor
    """
    try:
        d = _build_dict(entries, seed_file, set_entries, delete_keys)
    except (SafeDictException, FileNotFoundError) as e:
        _handle_error(escape(str(e)), e)

    if not len(d):
        console.print("[yellow]Dict is empty.[/yellow]")
        return

    table = Table(title=f"SafeDict ({len(d)} entries)")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Type", style="magenta")

    for key, value in sorted(d.items(), key=lambda item: item[0]):
        table.add_row(escape(repr(key)), escape(_format_value(value)), type(value).__name__)

    console.print(table)


def get(
    key: str = typer.Argument(..., help="Key to look up"),
    entries: Optional[str] = typer.Option(None, "--entries", "-e", help=ENTRIES_HELP),
    seed_file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    set_entries: Optional[List[str]] = typer.Option(None, "--set", "-s", help=SET_HELP),
    delete_keys: Optional[List[str]] = typer.Option(None, "--delete", "-d", help=DELETE_HELP),
) -> None:
    """Print the value stored for a key.

    A missing key is reported, not treated as an error.

    Example:
        safedict get toString --entries '{"toString": 1}'
    """
    try:
        d = _build_dict(entries, seed_file, set_entries, delete_keys)
    except (SafeDictException, FileNotFoundError) as e:
        _handle_error(escape(str(e)), e)

    value = d.get(key)
    if value is ABSENT:
        _handle_warn(f"Key not present: {escape(repr(key))}")
        return

    console.print(escape(_format_value(value)))


def has(
    key: str = typer.Argument(..., help="Key to check"),
    entries: Optional[str] = typer.Option(None, "--entries", "-e", help=ENTRIES_HELP),
    seed_file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    set_entries: Optional[List[str]] = typer.Option(None, "--set", "-s", help=SET_HELP),
    delete_keys: Optional[List[str]] = typer.Option(None, "--delete", "-d", help=DELETE_HELP),
) -> None:
    """Print whether a key is present (true/false).

    Example:
        safedict has constructor --entries '{"constructor": 2}'
    """
    try:
        d = _build_dict(entries, seed_file, set_entries, delete_keys)
    except (SafeDictException, FileNotFoundError) as e:
        _handle_error(escape(str(e)), e)

    console.print("true" if d.has(key) else "false")


def keys(
    entries: Optional[str] = typer.Option(None, "--entries", "-e", help=ENTRIES_HELP),
    seed_file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    set_entries: Optional[List[str]] = typer.Option(None, "--set", "-s", help=SET_HELP),
    delete_keys: Optional[List[str]] = typer.Option(None, "--delete", "-d", help=DELETE_HELP),
) -> None:
    """Print every key, one per line."""
    try:
        d = _build_dict(entries, seed_file, set_entries, delete_keys)
    except (SafeDictException, FileNotFoundError) as e:
        _handle_error(escape(str(e)), e)

    for key in sorted(d.keys()):
        console.print(escape(key))
