"""Data models for the YAML run file."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence


@dataclass(frozen=True)
class CollectorConfig:
    name: str = "host"
    passes: Optional[int] = None


@dataclass(frozen=True)
class SuiteSource:
    """A suite to import: either a Python file or a dotted module name."""

    path: Optional[Path] = None
    module: Optional[str] = None

    def label(self) -> str:
        return str(self.path) if self.path is not None else str(self.module)


@dataclass(frozen=True)
class RunConfig:
    suites: Sequence[SuiteSource] = field(default_factory=tuple)
    builtins: bool = True
    collector: CollectorConfig = field(default_factory=CollectorConfig)
    isolate: bool = True
    base_dir: Path = field(default_factory=Path.cwd)


@dataclass(frozen=True)
class RunOptions:
    """CLI overrides applied on top of a :class:`RunConfig`."""

    suites: Sequence[str] = field(default_factory=tuple)
    builtins: Optional[bool] = None
    collector: Optional[str] = None
    passes: Optional[int] = None
    isolate: Optional[bool] = None
