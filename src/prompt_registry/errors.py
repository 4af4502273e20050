# src/prompt_registry/errors.py

from typing import Any, Optional


class TemplateRegistryError(Exception):
    """Base class for all template registry failures."""

    def __init__(self, message: str, name: Optional[str] = None, **kwargs: Any):
        super().__init__(message)
        self.name = name
        for key, value in kwargs.items():
            setattr(self, key, value)


class ParseError(TemplateRegistryError):
    """Raised when template source is not valid template syntax."""

    def __init__(self, name: str, cause: Exception):
        super().__init__(f"failed to parse template '{name}': {cause}", name=name, cause=cause)


class DuplicateNameError(TemplateRegistryError):
    """Raised when a name is registered twice."""

    def __init__(self, name: str):
        super().__init__(f"template '{name}' already registered", name=name)


class TemplateIOError(TemplateRegistryError):
    """Raised when a template file cannot be read."""

    def __init__(self, path: Any, cause: Exception, name: Optional[str] = None):
        super().__init__(
            f"failed to read template file '{path}': {cause}", name=name, path=path, cause=cause
        )


class RenderError(TemplateRegistryError):
    """Raised when a registered template fails to execute against its arguments."""

    def __init__(self, name: str, cause: Exception):
        super().__init__(f"failed to render template '{name}': {cause}", name=name, cause=cause)


class TemplateNotFoundError(TemplateRegistryError, KeyError):
    """Raised by the name-based render helpers when nothing is registered under a name."""

    def __init__(self, name: str):
        super().__init__(f"Template '{name}' not found", name=name)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
