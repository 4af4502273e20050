# src/prompt_registry/logging_utils.py

from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.text import Text

console = Console()


class CliLogger:
    """Timestamped console output for CLI commands."""

    def __init__(self, command: str, out: Optional[Console] = None):
        self.command = command
        self.console = out or console

    def _get_timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _line(self, label: str, label_style: str, message: str, style: str = "") -> None:
        text = Text()
        text.append(f"{self._get_timestamp()} ", style="dim")
        if label:
            text.append(f"{label} ", style=label_style)
        text.append(message, style=style)
        self.console.print(text)

    def info(self, message: str, prefix: str = ""):
        self._line(prefix, "cyan", message)

    def success(self, message: str):
        self._line("OK", "bold green", message)

    def warning(self, message: str):
        self._line("WARN", "bold yellow", message, style="yellow")

    def error(self, message: str):
        self._line("ERROR", "bold red", message, style="red")


def print_header(subtitle: str = ""):
    """Prints the prompt-registry banner."""
    console.print()
    console.print("[bold cyan]Prompt Registry[/bold cyan]", justify="left")
    if subtitle:
        console.print(f"   {subtitle}", style="dim")
    console.print()
