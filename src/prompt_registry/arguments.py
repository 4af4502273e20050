# src/prompt_registry/arguments.py

import dataclasses
from typing import Any, Dict, Mapping

from pydantic import BaseModel

# Key-value context handed to a template at render time
Arguments = Dict[str, Any]


def to_arguments(value: Any) -> Arguments:
    """
    Normalises a render context into a plain dict.

    Accepts None, any mapping, a pydantic model or a dataclass instance.
    """
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Cannot use {type(value).__name__} as template arguments")
