# src/prompt_registry/config.py

import os
import re
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

_ENV_REF = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class EngineConfig(BaseModel):
    """Options passed to the Jinja2 environment."""
    strict_undefined: bool = True  # missing variables fail at render time
    trim_blocks: bool = False
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = True


class TemplateSource(BaseModel):
    name: str
    content: Optional[str] = None
    path: Optional[str] = None

    @field_validator('name')
    def validate_name(cls, v):
        if not v:
            raise ValueError("template name must not be empty")
        return v

    @model_validator(mode='after')
    def validate_exactly_one_source(self):
        """A template comes either inline or from a file, never both."""
        if (self.content is None) == (self.path is None):
            raise ValueError(f"template '{self.name}' needs exactly one of 'content' or 'path'")
        return self


class RegistryConfig(BaseModel):
    engine: EngineConfig = Field(default_factory=EngineConfig)
    template_dirs: List[str] = Field(default_factory=list)
    extension: str = ".prompt"
    templates: List[TemplateSource] = Field(default_factory=list)

    @field_validator('extension')
    def validate_extension(cls, v):
        if not v.startswith("."):
            raise ValueError("extension must start with '.'")
        return v


def _expand_env(text: str) -> str:
    """Replace ${VAR} with its environment value; unknown variables are left as-is."""
    return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), m.group(0)), text)


def _resolve(path: str, base_dir: Path) -> str:
    """Expand ${VAR} and ~ in a path field, then anchor it at base_dir. Inline content is never expanded."""
    candidate = Path(_expand_env(path)).expanduser()
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    return str(candidate)


def load_config(filepath: Union[str, Path]) -> RegistryConfig:
    """Load and validate a registry config from a YAML file."""
    import yaml

    load_dotenv()
    filepath = Path(filepath)

    with open(filepath, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f) or {}

    config = RegistryConfig(**config_dict)

    base_dir = filepath.resolve().parent
    config.template_dirs = [_resolve(d, base_dir) for d in config.template_dirs]
    for source in config.templates:
        if source.path is not None:
            source.path = _resolve(source.path, base_dir)
    return config


def build_registry(config: RegistryConfig):
    """Build a populated TemplateRegistry: directories first, then explicit templates."""
    from .templates.registry import TemplateRegistry

    registry = TemplateRegistry(config.engine)
    for directory in config.template_dirs:
        registry.register_from_dir(directory, extension=config.extension)
    for source in config.templates:
        if source.path is not None:
            registry.register_from_file(source.name, source.path)
        else:
            registry.register(source.name, source.content)
    return registry
