"""CLI commands for slackmd."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from slackmd.config import (
    SlackmdConfig,
    config_path,
    load_config,
    set_config_value,
)
from slackmd.converter import convert, convert_message, load_document
from slackmd.errors import RichTextError

app = typer.Typer(
    name="slackmd",
    help="Convert Slack rich text messages to Markdown.",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Manage configuration.")
app.add_typer(config_app, name="config")

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _get_config() -> SlackmdConfig:
    return load_config()


def _read_input(path: str) -> dict[str, Any]:
    if path == "-":
        data: dict[str, Any] = json.load(sys.stdin)
        return data
    return load_document(Path(path))


def _write_output(content: str, output: Path) -> Path:
    """Write content to a file and return the path."""
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content + "\n", encoding="utf-8")
    return output


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Convert Slack rich text messages to Markdown."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


FormatOption = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format: markdown, html"),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Output file (defaults to stdout)"),
]


@app.command("convert")
def convert_cmd(
    path: Annotated[str, typer.Argument(help="JSON file, or - for stdin")],
    format: FormatOption = None,
    output: OutputOption = None,
    message: Annotated[
        bool,
        typer.Option("--message", "-m", help="Input is a full Slack message"),
    ] = False,
) -> None:
    """Convert a rich text block (or message) to Markdown."""
    config = _get_config()
    output_format = format or config.default_format
    if output_format not in ("markdown", "html"):
        err_console.print(f"[red]Unknown format: {output_format}[/red]")
        raise typer.Exit(1)

    logger.debug("Converting %s to %s", path, output_format)
    try:
        data = _read_input(path)
        content = convert_message(data) if message else convert(data)
    except (RichTextError, OSError, json.JSONDecodeError) as e:
        err_console.print(
            f"[red]Failed to convert {escape(path)}: {escape(str(e))}[/red]"
        )
        raise typer.Exit(1) from e

    if output_format == "html":
        from slackmd.output import html as html_out

        content = html_out.render(content, title=config.html_title)

    if output is None and config.output_dir and path != "-":
        ext = ".html" if output_format == "html" else ".md"
        output = Path(config.output_dir).expanduser() / (
            Path(path).stem + ext
        )

    if output is None:
        typer.echo(content)
        return

    written = _write_output(content, output)
    err_console.print(f"[green]Written to {written}[/green]")


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    config = _get_config()
    console.print("[bold]Current Configuration[/bold]\n")

    console.print(f"[dim]{escape(str(config_path()))}[/dim]")
    for key, value in asdict(config).items():
        console.print(f"  {key} = {escape(value)}")


@config_app.command("set")
def config_set(
    key: Annotated[
        str, typer.Argument(help="Config key (e.g., default_format)")
    ],
    value: Annotated[str, typer.Argument(help="Value to set")],
) -> None:
    """Set a configuration value."""
    try:
        set_config_value(key, value)
        console.print(f"[green]Set {key} = {value}[/green]")
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e
