# tests/conftest.py
import pytest
from typer.testing import CliRunner

from prompt_registry.templates.registry import TemplateRegistry


@pytest.fixture
def cli_runner():
    """Provide a reusable CLI test runner for Prompt Registry."""
    return CliRunner()


@pytest.fixture
def registry():
    """A fresh, isolated registry per test."""
    return TemplateRegistry()


@pytest.fixture
def write_config(tmp_path):
    """Write a registry.yml into tmp_path and return its path."""
    def _write(content: str, filename: str = "registry.yml"):
        config_file = tmp_path / filename
        config_file.write_text(content, encoding="utf-8")
        return config_file
    return _write
