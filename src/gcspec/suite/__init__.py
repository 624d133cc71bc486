"""Run file loading and execution."""

from .loader import apply_options, load_config
from .models import CollectorConfig, RunConfig, RunOptions, SuiteSource
from .runner import build_collector, load_suites, run_config

__all__ = [
    "CollectorConfig",
    "RunConfig",
    "RunOptions",
    "SuiteSource",
    "apply_options",
    "build_collector",
    "load_config",
    "load_suites",
    "run_config",
]
