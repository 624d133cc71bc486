"""Core harness pieces exposed at the package level."""
from .assertions import (
    AssertionEngine,
    CheckRecord,
    DefinedCheck,
    EqualityCheck,
    Expectation,
    NullCheck,
    ThrowCheck,
    assert_defined,
    assert_equal,
    assert_null,
    assert_throws,
    assertion_engine,
    expect,
)
from .collector import CollectorManager, GCTrigger, HostCollector, collect, collector_manager, use_collector
from .handles import WeakHandle
from .models import CaseState, TestCase, TestGroup
from .results import CaseResult
from .runner import SpecRunner

__all__ = [
    "AssertionEngine",
    "CaseResult",
    "CaseState",
    "CheckRecord",
    "CollectorManager",
    "DefinedCheck",
    "EqualityCheck",
    "Expectation",
    "GCTrigger",
    "HostCollector",
    "NullCheck",
    "SpecRunner",
    "TestCase",
    "TestGroup",
    "ThrowCheck",
    "WeakHandle",
    "assert_defined",
    "assert_equal",
    "assert_null",
    "assert_throws",
    "assertion_engine",
    "collect",
    "collector_manager",
    "expect",
    "use_collector",
]
