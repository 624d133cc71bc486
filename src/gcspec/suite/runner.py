"""Executor for run files."""
from __future__ import annotations

import importlib
import logging
import sys
from typing import List

import click

from gcspec.core import CaseResult, GCTrigger, HostCollector, SpecRunner, TestGroup, collector_manager
from gcspec.registry import load_builtins, registry
from gcspec.registry.builtins import WEAKREF_GROUP
from gcspec.reporting import TerminalReporter
from gcspec.utils import load_from_source

from .models import CollectorConfig, RunConfig

logger = logging.getLogger(__name__)


def run_config(config: RunConfig, *, use_color: bool = True, list_only: bool = False) -> int:
    """Execute every selected group; returns process exit code (0 success, 1 failures).

    Groups and modules registered while loading the run's suites are dropped
    again once the run finishes, so the same run file can be executed twice
    in one process.
    """

    collector = build_collector(config.collector)
    groups_before = set(registry.names())
    modules_before = set(sys.modules)
    results: List[CaseResult] = []
    try:
        if config.builtins and WEAKREF_GROUP not in registry:
            load_builtins()
        load_suites(config)
        groups = _select_groups(config)
        if list_only:
            for group in groups:
                click.echo(group.name)
                for case in group:
                    click.echo(f"  {case.name}")
            return 0
        if not any(len(group) for group in groups):
            click.echo("No cases to run.")
            return 1
        reporter = TerminalReporter(use_color=use_color, collector_name=collector.name)
        reporter.on_start(groups)
        runner = SpecRunner(collector=collector, isolate=config.isolate)
        results = runner.run_all(groups, on_result=reporter.on_case_result)
        reporter.on_complete(results)
    finally:
        for name in set(registry.names()) - groups_before:
            registry.unregister(name)
        suite_modules = tuple(str(suite.module) for suite in config.suites if suite.module)
        for module_name in set(sys.modules) - modules_before:
            if module_name.startswith("gcspec_suite_") or _is_within(module_name, suite_modules):
                sys.modules.pop(module_name, None)
    return 0 if all(result.passed for result in results) else 1


def build_collector(config: CollectorConfig) -> GCTrigger:
    collector = collector_manager.get(config.name)
    if config.passes is None:
        return collector
    if not isinstance(collector, HostCollector):
        raise ValueError(f"passes is only supported by the '{HostCollector.name}' collector")
    return HostCollector(passes=config.passes)


def load_suites(config: RunConfig) -> None:
    for suite in config.suites:
        logger.debug("Loading suite %s", suite.label())
        if suite.path is not None:
            load_from_source(suite.path)
        else:
            importlib.import_module(str(suite.module))


def _is_within(module_name: str, packages: tuple[str, ...]) -> bool:
    return any(module_name == name or module_name.startswith(f"{name}.") for name in packages)


def _select_groups(config: RunConfig) -> List[TestGroup]:
    groups: List[TestGroup] = []
    for group in registry:
        if group.name == WEAKREF_GROUP and not config.builtins:
            continue
        groups.append(group)
    return groups
