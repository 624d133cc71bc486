"""Registers a collector that echoes each pass.

Usage: PYTHONPATH=examples/collector_plugin GCSPEC_PLUGINS=plugin gcspec run --collector verbose
"""
import gc

import click

from gcspec.core import collector_manager


class VerboseCollector:
    name = "verbose"

    def collect(self) -> None:
        reclaimed = gc.collect()
        click.echo(f"[verbose collector] reclaimed {reclaimed} object(s)")


def register() -> None:
    collector_manager.register(VerboseCollector())
