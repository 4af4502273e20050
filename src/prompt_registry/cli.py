# src/prompt_registry/cli.py
import typer
import yaml
from pathlib import Path
from pydantic import ValidationError
from rich.console import Console

from .config import build_registry, load_config
from .errors import TemplateRegistryError
from .logging_utils import CliLogger, print_header
from .templates.registry import TemplateRegistry

console = Console()
app = typer.Typer(help="Prompt Registry CLI")

DEFAULT_CONFIG = Path("registry.yml")


def version_callback(value: bool):
    if value:
        from prompt_registry import __version__
        console.print(f"Prompt Registry version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
):
    """Prompt Registry - named prompt templates."""
    pass


def load_registry(config_file: Path, log: CliLogger) -> TemplateRegistry:
    """Load a registry config and build the registry, exiting with code 1 on failure."""
    try:
        config = load_config(config_file)
    except FileNotFoundError:
        log.error(f"Config file not found: {config_file}")
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError) as e:
        log.error(f"Cannot read config {config_file}: {e}")
        raise typer.Exit(code=1)
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        log.error(f"Invalid config {config_file}: {e}")
        raise typer.Exit(code=1)

    try:
        return build_registry(config)
    except TemplateRegistryError as e:
        log.error(str(e))
        raise typer.Exit(code=1)


# ======================================================================================
# COMMAND: prompt-registry validate
# ======================================================================================
@app.command()
def validate(
    config_file: Path = typer.Option(DEFAULT_CONFIG, "--file", "-f", help="Path to registry.yml"),
):
    """Load every configured template and report parse or read failures."""
    print_header("Validating templates...")
    log = CliLogger("validate")

    registry = load_registry(config_file, log)
    for name in sorted(registry.list_names()):
        log.info(name, prefix="LOADED")
    if not len(registry):
        log.warning(f"No templates configured in {config_file}")
    log.success(f"All templates valid ({len(registry)} registered)")
    raise typer.Exit(code=0)


# ======================================================================================
# PLUGINS
# ======================================================================================
from .cli_plugins.template import template_app  # noqa: E402

app.add_typer(template_app, name="template")


# ======================================================================================
# ENTRYPOINT
# ======================================================================================
if __name__ == "__main__":
    app()
