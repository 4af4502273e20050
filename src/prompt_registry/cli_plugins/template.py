import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from prompt_registry.errors import RenderError, TemplateNotFoundError
from prompt_registry.logging_utils import CliLogger

console = Console()
template_app = typer.Typer(help="Inspect and render registered templates")

DEFAULT_CONFIG = Path("registry.yml")


def _parse_assignments(assignments: Optional[List[str]]) -> Dict[str, str]:
    args: Dict[str, str] = {}
    for item in assignments or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got '{item}'", param_hint="--set")
        args[key] = value
    return args


# ======================================================================================
# COMMAND: list
# ======================================================================================
@template_app.command("list")
def list_templates(
    config_file: Path = typer.Option(DEFAULT_CONFIG, "--file", "-f", help="Path to registry.yml"),
):
    """List all registered template names."""
    from prompt_registry.cli import load_registry

    registry = load_registry(config_file, CliLogger("template list"))
    names = sorted(registry.list_names())

    console.print("[bold]REGISTERED TEMPLATES[/bold]")
    if not names:
        console.print("[dim]No templates registered.[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Template Name", style="cyan", no_wrap=True)
    for name in names:
        table.add_row(name)
    console.print(table)
    console.print("\nTip: Run `prompt-registry template render <name> --set key=value`")


# ======================================================================================
# COMMAND: render
# ======================================================================================
@template_app.command("render")
def render(
    name: str = typer.Argument(..., help="Template name to render"),
    config_file: Path = typer.Option(DEFAULT_CONFIG, "--file", "-f", help="Path to registry.yml"),
    assignments: Optional[List[str]] = typer.Option(None, "--set", "-s", help="Template argument as key=value"),
    as_json: bool = typer.Option(False, "--json", help="Print the result mapping as JSON"),
):
    """Render a template to stdout."""
    from prompt_registry.cli import load_registry

    log = CliLogger("template render")
    args = _parse_assignments(assignments)
    registry = load_registry(config_file, log)

    try:
        result = registry.render(name, args)
    except TemplateNotFoundError:
        log.error(f"Template '{name}' not found")
        console.print("Run `prompt-registry template list` to see available templates")
        raise typer.Exit(code=1)
    except RenderError as e:
        log.error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        sys.stdout.write(json.dumps(result, ensure_ascii=False) + "\n")
    else:
        sys.stdout.write(result["prompt"])
