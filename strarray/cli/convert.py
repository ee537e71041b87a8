"""Command line front end for splitting and joining delimited text."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from strarray.core.config import ConverterConfig, load_converter_config, merge_converter_config
from strarray.core.converter import DelimitedStringArrayConverter

CONFIG_ENV_VAR = "STRARRAY_CONFIG"

app = typer.Typer(help="Split delimited text into tokens or join tokens back into text.")
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


def _resolve_config(path: Optional[Path]) -> ConverterConfig:
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return ConverterConfig()
        path = Path(env_path)
    resolved = path.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"Converter config not found at {resolved}")
    return load_converter_config(resolved)


def _build_converter(config_path: Optional[Path], **overrides) -> DelimitedStringArrayConverter:
    try:
        config = merge_converter_config(_resolve_config(config_path), overrides)
    except ValueError as exc:
        console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        raise typer.Exit(code=1) from exc
    return DelimitedStringArrayConverter(config)


@app.command()
def split(
    text: str = typer.Argument(..., help="Delimited text to split."),
    separator: Optional[str] = typer.Option(None, "--separator", "-s", help="Delimiter (default: ',')."),
    delete: Optional[str] = typer.Option(None, "--delete", help="Characters to remove from every token."),
    trim: Optional[bool] = typer.Option(None, "--trim/--no-trim", help="Strip surrounding whitespace from tokens."),
    empty_as_null: Optional[bool] = typer.Option(
        None, "--empty-as-null/--empty-as-list", help="Report an empty result as null or as an empty list."
    ),
    config: Optional[Path] = typer.Option(None, "--config", help=f"YAML options file (env: {CONFIG_ENV_VAR})."),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON array instead of a table."),
) -> None:
    converter = _build_converter(
        config,
        separator=separator,
        chars_to_delete=delete,
        trim_values=trim,
        empty_array_as_null=empty_as_null,
    )
    tokens = converter.parse(text)

    if as_json:
        typer.echo(json.dumps(tokens))
        return

    if tokens is None:
        console.print("[yellow]null[/yellow]")
        return
    table = Table(title=f"{len(tokens)} token(s)", show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Token")
    for index, token in enumerate(tokens):
        table.add_row(str(index), escape(repr(token)))
    console.print(table)


@app.command()
def join(
    values: List[str] = typer.Argument(None, help="Tokens to join."),
    separator: Optional[str] = typer.Option(None, "--separator", "-s", help="Delimiter (default: ',')."),
    config: Optional[Path] = typer.Option(None, "--config", help=f"YAML options file (env: {CONFIG_ENV_VAR})."),
) -> None:
    converter = _build_converter(config, separator=separator)
    typer.echo(converter.format(values or []))


if __name__ == "__main__":
    app()
