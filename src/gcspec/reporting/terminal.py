"""Terminal reporter rendering progress and summaries."""
from __future__ import annotations

import time
from typing import Sequence

import click

from gcspec.core import CaseResult, TestGroup


STATUS_COLORS = {
    "passed": "green",
    "failed": "red",
}


class TerminalReporter:
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True, collector_name: str = "host") -> None:
        self._use_color = use_color
        self._collector_name = collector_name
        self._start_time = 0.0
        self._current_group: str | None = None
        self._failures: list[tuple[int, CaseResult]] = []

    def on_start(self, groups: Sequence[TestGroup]) -> None:
        self._start_time = time.perf_counter()
        self._current_group = None
        self._failures.clear()
        total = sum(len(group) for group in groups)
        click.echo(
            self._styled(
                f"Starting run: {total} case(s) in {len(groups)} group(s) collector={self._collector_name}",
                force_color="cyan",
            )
        )

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        if result.group != self._current_group:
            self._current_group = result.group
            click.echo(result.group)
        ms = result.duration_s * 1000
        status_text = self._styled(result.status.upper())
        click.echo(f"  [{index}/{total}] {result.case_name} -> {status_text} ({ms:.2f} ms)")
        if not result.passed:
            self._failures.append((index, result))
            self._print_failure_details(result, indent="      ")

    def on_complete(self, results: Sequence[CaseResult]) -> None:
        duration = time.perf_counter() - self._start_time
        total = len(results)
        passed = sum(1 for result in results if result.passed)
        failed = total - passed
        click.echo(
            self._styled(
                f"Summary: total={total} passed={passed} failed={failed} duration={duration:.2f}s",
                force_color="green" if failed == 0 else "red",
            )
        )
        if self._failures:
            click.echo(self._styled("Failure details:", force_color="red"))
            for index, result in self._failures:
                click.echo(f"  [{index}] {result.identifier()} -> {result.status}")
                self._print_failure_details(result, indent="    ")

    def _styled(self, text: str, *, force_color: str | None = None) -> str:
        if not self._use_color:
            return text
        color = force_color or STATUS_COLORS.get(text.lower(), None)
        if color:
            return click.style(text, fg=color)
        return text

    def _print_failure_details(self, result: CaseResult, *, indent: str = "    ") -> None:
        click.echo(f"{indent}kind: {result.failure_kind or 'unknown'} checks={result.checks}")
        if result.failure_reason:
            click.echo(f"{indent}reason: {result.failure_reason}")
