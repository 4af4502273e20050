"""prompt_registry - named prompt template registry."""

import threading
from typing import Optional

from .arguments import Arguments, to_arguments
from .errors import (
    DuplicateNameError,
    ParseError,
    RenderError,
    TemplateIOError,
    TemplateNotFoundError,
    TemplateRegistryError,
)
from .templates import RenderTemplate, TemplateRegistry

__version__ = "0.1.0"

_default_registry: Optional[TemplateRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> TemplateRegistry:
    """Process-wide shared registry, created on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = TemplateRegistry()
        return _default_registry


__all__ = [
    "Arguments",
    "DuplicateNameError",
    "ParseError",
    "RenderError",
    "RenderTemplate",
    "TemplateIOError",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "TemplateRegistryError",
    "get_default_registry",
    "to_arguments",
]
