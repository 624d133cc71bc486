"""Suite registry public API."""
from .registry import (
    SuiteRegistry,
    clear_registry,
    describe,
    load_builtins,
    register_group,
    registry,
)

__all__ = [
    "SuiteRegistry",
    "registry",
    "describe",
    "register_group",
    "load_builtins",
    "clear_registry",
]
