from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest

import gcspec
from gcspec.core import collector_manager
from gcspec.registry import registry

PLUGIN_SOURCE = """
from gcspec.core import collector_manager
from gcspec.registry import describe


class NullCollector:
    name = "plugin-null"

    def collect(self):
        pass


def register():
    collector_manager.register(NullCollector())
    describe("plugin group").add("noop", lambda: None)
"""

EXAMPLE_DIR = Path(__file__).resolve().parents[1] / "examples" / "collector_plugin"


@pytest.fixture
def fresh_bootstrap(monkeypatch):
    monkeypatch.setattr(gcspec, "_BOOTSTRAPPED", False)
    yield
    collector_manager.unregister("plugin-null")
    collector_manager.unregister("verbose")
    registry.unregister("plugin group")


def test_bootstrap_registers_plugin_modules(tmp_path: Path, monkeypatch, fresh_bootstrap) -> None:
    (tmp_path / "gcspec_test_plugin.py").write_text(textwrap.dedent(PLUGIN_SOURCE), encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, "gcspec_test_plugin", raising=False)
    monkeypatch.setenv("GCSPEC_PLUGINS", " gcspec_test_plugin , ")
    gcspec.bootstrap()
    assert "plugin-null" in collector_manager.names()
    assert registry.get("plugin group").names() == ("noop",)
    assert gcspec._BOOTSTRAPPED


def test_bootstrap_is_idempotent(tmp_path: Path, monkeypatch, fresh_bootstrap) -> None:
    (tmp_path / "gcspec_test_plugin.py").write_text(textwrap.dedent(PLUGIN_SOURCE), encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, "gcspec_test_plugin", raising=False)
    monkeypatch.setenv("GCSPEC_PLUGINS", "gcspec_test_plugin")
    gcspec.bootstrap()
    gcspec.bootstrap()
    assert list(collector_manager.names()).count("plugin-null") == 1


def test_example_collector_plugin(monkeypatch, fresh_bootstrap, capsys) -> None:
    monkeypatch.syspath_prepend(str(EXAMPLE_DIR))
    monkeypatch.delitem(sys.modules, "plugin", raising=False)
    monkeypatch.setenv("GCSPEC_PLUGINS", "plugin")
    gcspec.bootstrap()
    collector_manager.get("verbose").collect()
    assert "[verbose collector] reclaimed" in capsys.readouterr().out
