"""Collection triggers used to make reclamation observable inside a case."""
from __future__ import annotations

import contextlib
import gc
import logging
from typing import Dict, Iterable, Iterator, Optional, Protocol

logger = logging.getLogger(__name__)


class GCTrigger(Protocol):
    """Protocol all collectors must follow."""

    name: str

    def collect(self) -> None:
        ...


class HostCollector:
    """Forces a full collection of the interpreter's garbage collector.

    Objects without cycles are already freed by reference counting when their
    last strong reference goes away; the extra passes reclaim cycles whose
    finalizers release further objects.
    """

    name = "host"

    def __init__(self, passes: int = 2) -> None:
        if passes < 1:
            raise ValueError("passes must be at least 1")
        self.passes = passes

    def collect(self) -> None:
        total = 0
        for attempt in range(1, self.passes + 1):
            reclaimed = gc.collect()
            total += reclaimed
            if reclaimed == 0:
                break
        logger.debug("host collection reclaimed %d object(s) in %d pass(es)", total, attempt)


class CollectorManager:
    """Registry for collectors keyed by name, plus the active collector slot."""

    def __init__(self) -> None:
        self._collectors: Dict[str, GCTrigger] = {}
        self._active: Optional[GCTrigger] = None

    def register(self, collector: GCTrigger) -> None:
        if collector.name in self._collectors:
            raise ValueError(f"Collector '{collector.name}' already registered")
        self._collectors[collector.name] = collector

    def unregister(self, name: str) -> None:
        self._collectors.pop(name, None)

    def get(self, name: str) -> GCTrigger:
        try:
            return self._collectors[name]
        except KeyError as exc:
            available = ", ".join(sorted(self._collectors)) or "none"
            raise KeyError(f"No collector registered as {name!r} (available: {available})") from exc

    def names(self) -> Iterable[str]:
        return tuple(self._collectors.keys())

    def active(self) -> GCTrigger:
        if self._active is not None:
            return self._active
        return self.get(HostCollector.name)

    @contextlib.contextmanager
    def use(self, collector: GCTrigger) -> Iterator[GCTrigger]:
        previous = self._active
        self._active = collector
        try:
            yield collector
        finally:
            self._active = previous


collector_manager = CollectorManager()
collector_manager.register(HostCollector())


def use_collector(collector: GCTrigger) -> "contextlib.AbstractContextManager[GCTrigger]":
    """Install ``collector`` as the target of :func:`collect` within a block."""

    return collector_manager.use(collector)


def collect() -> None:
    """Request a collection cycle from the active collector."""

    collector_manager.active().collect()
