from __future__ import annotations

import pytest

from gcspec.core import SpecRunner
from gcspec.registry import SuiteRegistry, registry
from gcspec.registry.builtins import WEAKREF_GROUP, build_weakref_group


def test_builtin_group_is_registered() -> None:
    assert WEAKREF_GROUP in registry
    names = registry.get(WEAKREF_GROUP).names()
    assert names[:6] == (
        "should exist",
        "get should work",
        "deref should work",
        "should throw when constructed with zero parameters",
        "should throw when constructed with primitive parameters",
        "should be clearable",
    )


def test_builtin_group_passes_on_host() -> None:
    results = SpecRunner().run(build_weakref_group())
    failures = [(result.case_name, result.failure_reason) for result in results if not result.passed]
    assert failures == []


def test_describe_registers_group_in_order() -> None:
    local = SuiteRegistry()
    first = local.describe("first")
    first.add("a", lambda: None)
    local.register_group("second", [("b", lambda: None)])
    assert local.names() == ("first", "second")
    assert local.get("second").names() == ("b",)


def test_duplicate_group_rejected() -> None:
    local = SuiteRegistry()
    local.describe("same")
    with pytest.raises(ValueError):
        local.describe("same")


def test_unknown_group_raises_key_error() -> None:
    with pytest.raises(KeyError):
        SuiteRegistry().get("missing")
