"""Utility helpers for dynamic imports."""
from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType


def load_from_source(source: Path) -> ModuleType:
    """Execute the Python file at ``source`` as a fresh module and return it."""

    path = source.expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Suite source file not found: {path}")
    module_name = f"gcspec_suite_{path.stem}_{hash(str(path)) & 0xFFFF:x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Unable to load module from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module
