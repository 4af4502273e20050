"""
Template system package for prompt_registry.

Provides:
- TemplateRegistry: thread-safe store of named, pre-parsed templates
- RenderTemplate: signature of the renderer closures it hands out
- build_environment: the Jinja2 environment templates are parsed with
"""

from .engine import build_environment
from .registry import RenderTemplate, TemplateRegistry

__all__ = [
    "RenderTemplate",
    "TemplateRegistry",
    "build_environment",
]
