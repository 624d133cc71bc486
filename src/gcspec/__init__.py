"""gcspec package initialization."""
from __future__ import annotations

import importlib
import logging
import os

from .version import __version__

__all__ = [
    "__version__",
    "bootstrap",
    "collect",
    "describe",
    "expect",
    "WeakHandle",
]

logger = logging.getLogger(__name__)

_BOOTSTRAPPED = False


def bootstrap() -> None:
    """Initialize gcspec (idempotent)."""

    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return
    from .registry import load_builtins

    load_builtins()
    _load_plugins()
    _BOOTSTRAPPED = True


def _load_plugins() -> None:
    plugin_env = os.environ.get("GCSPEC_PLUGINS")
    if not plugin_env:
        return
    for item in plugin_env.split(","):
        module_name = item.strip()
        if not module_name:
            continue
        logger.debug("Loading plugin %s", module_name)
        module = importlib.import_module(module_name)
        register = getattr(module, "register", None)
        if callable(register):
            register()


from .core import WeakHandle, collect, expect  # noqa: E402
from .registry import describe  # noqa: E402
