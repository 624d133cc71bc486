"""YAML loader and validation for run files."""
from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from .models import CollectorConfig, RunConfig, RunOptions, SuiteSource

logger = logging.getLogger(__name__)

RUN_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "suites": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "builtins": {"type": "boolean"},
        "collector": {
            "type": ["string", "object"],
            "minLength": 1,
            "additionalProperties": False,
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "passes": {"type": "integer", "minimum": 1},
            },
        },
        "isolate": {"type": "boolean"},
    },
}
_validator = Draft7Validator(RUN_SCHEMA)


def load_config(path: str) -> RunConfig:
    """Load and validate a run file."""
    config_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValueError("Run file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Run file schema validation failed: {messages}")
    base = config_path.parent
    suites = tuple(parse_suite(str(item), base) for item in raw.get("suites", []) or [])
    _reject_duplicates(suites)
    logger.debug("Loaded run file %s with %d suite(s)", config_path, len(suites))
    return RunConfig(
        suites=suites,
        builtins=bool(raw.get("builtins", True)),
        collector=_parse_collector(raw.get("collector")),
        isolate=bool(raw.get("isolate", True)),
        base_dir=base,
    )


def apply_options(config: RunConfig, options: RunOptions) -> RunConfig:
    """Return ``config`` with CLI overrides applied."""
    extra = tuple(parse_suite(item, Path.cwd()) for item in options.suites)
    suites = tuple(config.suites) + extra
    _reject_duplicates(suites)
    collector = config.collector
    if options.collector is not None or options.passes is not None:
        if options.passes is not None and options.passes < 1:
            raise ValueError("passes must be at least 1")
        collector = CollectorConfig(
            name=_collector_name(options.collector) if options.collector is not None else collector.name,
            passes=options.passes if options.passes is not None else collector.passes,
        )
    return dataclasses.replace(
        config,
        suites=suites,
        builtins=config.builtins if options.builtins is None else options.builtins,
        collector=collector,
        isolate=config.isolate if options.isolate is None else options.isolate,
    )


def parse_suite(value: str, base: Path) -> SuiteSource:
    text = value.strip()
    if not text:
        raise ValueError("Suite entries cannot be empty")
    if text.endswith(".py") or "/" in text or "\\" in text:
        path = Path(text).expanduser()
        if not path.is_absolute():
            path = base / path
        return SuiteSource(path=path.resolve())
    return SuiteSource(module=text)


def _parse_collector(raw: Any) -> CollectorConfig:
    if raw is None:
        return CollectorConfig()
    if isinstance(raw, str):
        return CollectorConfig(name=_collector_name(raw))
    passes: Optional[int] = raw.get("passes")
    return CollectorConfig(name=_collector_name(str(raw.get("name", "host"))), passes=passes)


def _collector_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise ValueError("collector name cannot be blank")
    return name


def _reject_duplicates(suites: tuple[SuiteSource, ...]) -> None:
    seen: set[str] = set()
    for suite in suites:
        label = suite.label()
        if label in seen:
            raise ValueError(f"Duplicate suite entry '{label}'")
        seen.add(label)
