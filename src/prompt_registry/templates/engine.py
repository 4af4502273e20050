# src/prompt_registry/templates/engine.py
"""
Jinja2 wiring for the template registry.

The registry never defines template syntax itself; it parses with the
environment built here and executes the resulting ``jinja2.Template``.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from jinja2 import Environment, StrictUndefined, Undefined

from ..config import EngineConfig

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


def to_string(value: Any) -> str:
    return str(value)


def to_int(value: Any) -> int:
    """Best-effort integer conversion; unparseable values become 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0
    return 0


def split(value: str, sep: Optional[str] = None) -> List[str]:
    return value.split(sep)


def has_prefix(value: str, prefix: str) -> bool:
    return value.startswith(prefix)


def has_suffix(value: str, suffix: str) -> bool:
    return value.endswith(suffix)


def contains(value: Any, item: Any) -> bool:
    return item in value


def if_then_else(condition: Any, then: Any, otherwise: Any) -> Any:
    return then if condition else otherwise


def coalesce(*values: Any) -> Any:
    """Returns the first value that is neither None, undefined nor an empty string."""
    for value in values:
        if value is None or isinstance(value, Undefined):
            continue
        if isinstance(value, str) and value == "":
            continue
        return value
    return ""


def format_time(value: datetime, fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
    return value.strftime(fmt)


def now() -> datetime:
    return datetime.now()


HELPERS: Dict[str, Callable[..., Any]] = {
    "to_string": to_string,
    "to_int": to_int,
    "split": split,
    "has_prefix": has_prefix,
    "has_suffix": has_suffix,
    "contains": contains,
    "if_then_else": if_then_else,
    "coalesce": coalesce,
    "format_time": format_time,
}


def build_environment(config: Optional[EngineConfig] = None) -> Environment:
    """Create the Jinja2 environment templates are parsed and rendered with."""
    config = config or EngineConfig()

    env = Environment(
        undefined=StrictUndefined if config.strict_undefined else Undefined,
        autoescape=False,
        keep_trailing_newline=config.keep_trailing_newline,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )
    env.filters.update(HELPERS)
    env.globals.update(HELPERS)
    env.globals["now"] = now
    return env
