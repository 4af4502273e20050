# src/prompt_registry/templates/registry.py
"""
Thread-safe registry of named, pre-parsed prompt templates.

A template is parsed once at registration. Callers get back a renderer
closure bound to the parsed template; the parsed form itself stays private.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from jinja2 import Template, TemplateSyntaxError

from ..arguments import to_arguments
from ..config import EngineConfig
from ..errors import (
    DuplicateNameError,
    ParseError,
    RenderError,
    TemplateIOError,
    TemplateNotFoundError,
)
from ..rwlock import ReadWriteLock
from .engine import build_environment

logger = logging.getLogger(__name__)

# renderer(prompt, args) -> {"prompt": rendered_text}
RenderTemplate = Callable[[str, Any], Dict[str, str]]

DEFAULT_EXTENSION = ".prompt"


def _make_renderer(name: str, tmpl: Template) -> RenderTemplate:
    def render(prompt: str, args: Any = None) -> Dict[str, str]:
        # prompt is part of the renderer signature but is not fed to the template
        try:
            context = to_arguments(args)
            text = tmpl.render(context)
        except Exception as exc:
            raise RenderError(name, exc) from exc
        return {"prompt": text}

    render.__name__ = f"render_{name}"
    return render


class TemplateRegistry:
    """Named templates, registered once and rendered many times."""

    def __init__(self, engine_config: Optional[EngineConfig] = None):
        self._env = build_environment(engine_config)
        self._templates: Dict[str, Template] = {}
        self._renderers: Dict[str, RenderTemplate] = {}
        self._lock = ReadWriteLock()

    def register(self, name: str, content: str) -> None:
        """
        Parse `content` and store it under `name`.

        Raises:
            ParseError: content is not valid template syntax.
            DuplicateNameError: `name` is already registered.
        """
        if not name:
            raise ValueError("template name must not be empty")

        try:
            tmpl = self._env.from_string(content)
        except TemplateSyntaxError as exc:
            raise ParseError(name, exc) from exc

        renderer = _make_renderer(name, tmpl)

        with self._lock.write_locked():
            if name in self._renderers:
                raise DuplicateNameError(name)
            self._templates[name] = tmpl
            self._renderers[name] = renderer

        logger.debug(f"Registered template '{name}'")

    def register_from_file(self, name: str, path: Union[str, Path]) -> None:
        """Read a template file (UTF-8) and register its contents under `name`."""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateIOError(path, exc, name=name) from exc
        self.register(name, content)

    def register_from_dir(
        self,
        directory: Union[str, Path],
        extension: str = DEFAULT_EXTENSION,
        recursive: bool = True,
    ) -> List[str]:
        """
        Register every `*<extension>` file under `directory`, named by file name.

        Returns the names registered, in sorted path order. The first failure
        is raised; templates registered before it stay registered. Names are
        bare file names, so the same file name in two subdirectories raises
        DuplicateNameError for the later path.
        """
        directory = Path(directory)
        if not directory.is_dir():
            cause = NotADirectoryError(f"not a directory: {directory}") if directory.exists() \
                else FileNotFoundError(f"no such directory: {directory}")
            raise TemplateIOError(directory, cause)

        pattern = f"*{extension}"
        files = directory.rglob(pattern) if recursive else directory.glob(pattern)

        names = []
        for file_path in sorted(p for p in files if p.is_file()):
            self.register_from_file(file_path.name, file_path)
            names.append(file_path.name)

        logger.debug(f"Loaded {len(names)} template(s) from {directory}")
        return names

    def lookup(self, name: str) -> Tuple[Optional[RenderTemplate], bool]:
        """Return (renderer, True) if `name` is registered, else (None, False)."""
        with self._lock.read_locked():
            renderer = self._renderers.get(name)
        return renderer, renderer is not None

    def list_names(self) -> List[str]:
        """Snapshot of all registered names; order is unspecified."""
        with self._lock.read_locked():
            return list(self._renderers)

    def render(self, name: str, args: Any = None, prompt: str = "") -> Dict[str, str]:
        """Look up `name` and render it in one step."""
        renderer, found = self.lookup(name)
        if not found:
            raise TemplateNotFoundError(name)
        return renderer(prompt, args)

    def __contains__(self, name: object) -> bool:
        with self._lock.read_locked():
            return name in self._renderers

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._renderers)
