"""Popo CLI commands for resolving accessor names and dispatching calls."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml
from rich.table import Table

from ..config import ResolverConfig, load_config
from ..constants import CallType
from ..exceptions import PopoException
from ..models import DataObject
from ..naming import NameResolver
from .common import _handle_error, _print_success, console

log = logging.getLogger(__name__)


def _load_resolver_config(config_path: Optional[Path]) -> Optional[ResolverConfig]:
    if config_path is None:
        return None
    try:
        return load_config(config_path)
    except (FileNotFoundError, PopoException) as e:
        _handle_error(str(e), e)


def _is_json(path: Path) -> bool:
    return path.suffix.lower() == ".json"


def _load_data_file(data_file: Path) -> Dict[str, Any]:
    if not data_file.exists():
        _handle_error(f"Data file not found: {data_file}")

    text = data_file.read_text()
    try:
        data = json.loads(text) if _is_json(data_file) else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        _handle_error(f"Could not parse {data_file}: {e}", e)

    if data is None:
        return {}
    if not isinstance(data, dict):
        _handle_error(f"Expected a mapping in {data_file}, got {type(data).__name__}")
    return data


def _save_data_file(data_file: Path, data: Dict[str, Any]) -> None:
    with open(data_file, "w") as f:
        if _is_json(data_file):
            json.dump(data, f, indent=2)
            f.write("\n")
        else:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def resolve(
    names: List[str] = typer.Argument(..., help="Accessor call names, e.g. getFirstName"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Resolver configuration YAML"),
) -> None:
    """Show how accessor call names resolve to property keys.

    Example:
        popo resolve getFirstName setId doThing
    """
    resolver = NameResolver(_load_resolver_config(config))

    table = Table(title="Accessor Resolution")
    table.add_column("Name", style="cyan")
    table.add_column("Call Type", style="green")
    table.add_column("Key", style="magenta")

    for name in names:
        resolution = resolver.resolve(name)
        table.add_row(name, resolution.call_type.value, resolution.key if resolution.key is not None else "-")

    console.print(table)


def call(
    data_file: Path = typer.Argument(..., help="JSON or YAML file holding a flat mapping"),
    call_name: str = typer.Argument(..., help="Accessor call name, e.g. getTitle or setTitle"),
    value: Optional[str] = typer.Argument(None, help="Setter value, parsed as JSON when possible"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Resolver configuration YAML"),
    write: bool = typer.Option(False, "--write", "-w", help="Save the data back after a setter call"),
) -> None:
    """Dispatch one accessor call against the data in a file.

    Examples:
        # Read a property
        popo call article.yaml getTitle

        # Write a property and save it
        popo call article.json setFirstName '"Ada"' --write
    """
    resolver = NameResolver(_load_resolver_config(config))
    data_object = DataObject(_load_data_file(data_file), resolver=resolver)

    arguments = () if value is None else (_parse_value(value),)
    try:
        result = data_object.dispatch(call_name, *arguments)
    except PopoException as e:
        _handle_error(str(e), e)

    log.debug("Dispatched %s for key '%s'", call_name, data_object.last_call_property)

    if data_object.last_call_type == CallType.GETTER:
        console.print_json(json.dumps(result, default=str))
        return

    console.print_json(json.dumps(data_object.get_data(), default=str))
    if write:
        _save_data_file(data_file, data_object.get_data())
        _print_success(f"Saved [cyan]{data_file}[/cyan]")
