from __future__ import annotations

from unittest import mock

import pytest

from gcspec.core import CollectorManager, HostCollector, collect, collector_manager, use_collector


class CountingCollector:
    name = "counting"

    def __init__(self) -> None:
        self.calls = 0

    def collect(self) -> None:
        self.calls += 1


def test_host_collector_is_registered_by_default() -> None:
    assert "host" in collector_manager.names()
    assert isinstance(collector_manager.get("host"), HostCollector)


def test_host_collector_stops_when_nothing_reclaimed() -> None:
    collector = HostCollector(passes=5)
    with mock.patch("gcspec.core.collector.gc.collect", side_effect=[3, 0, 7]) as fake:
        collector.collect()
    assert fake.call_count == 2


def test_host_collector_honours_pass_limit() -> None:
    collector = HostCollector(passes=2)
    with mock.patch("gcspec.core.collector.gc.collect", return_value=1) as fake:
        collector.collect()
    assert fake.call_count == 2


def test_host_collector_rejects_zero_passes() -> None:
    with pytest.raises(ValueError):
        HostCollector(passes=0)


def test_manager_rejects_duplicate_names() -> None:
    manager = CollectorManager()
    manager.register(CountingCollector())
    with pytest.raises(ValueError):
        manager.register(CountingCollector())


def test_manager_unknown_name_lists_available() -> None:
    manager = CollectorManager()
    manager.register(CountingCollector())
    with pytest.raises(KeyError) as exc:
        manager.get("missing")
    assert "counting" in str(exc.value)


def test_use_collector_routes_module_hook() -> None:
    counting = CountingCollector()
    with use_collector(counting):
        collect()
        collect()
    assert counting.calls == 2
    assert isinstance(collector_manager.active(), HostCollector)
