from __future__ import annotations

import pytest

from gcspec.core import (
    CaseState,
    SpecRunner,
    TestCase,
    TestGroup,
    WeakHandle,
    collect,
    expect,
)
from gcspec.core.runner import CaseExecution
from gcspec.errors import HarnessError, InvalidArgument


class CountingCollector:
    name = "counting"

    def __init__(self) -> None:
        self.calls = 0

    def collect(self) -> None:
        self.calls += 1


def _group(*cases) -> TestGroup:
    group = TestGroup(name="group")
    for name, body in cases:
        group.add(name, body)
    return group


def _fail() -> None:
    expect(1).to_equal(2)


def _boom() -> None:
    raise RuntimeError("boom")


def _invalid() -> None:
    WeakHandle(0)


def test_cases_run_in_insertion_order() -> None:
    order: list[str] = []
    group = _group(
        ("c", lambda: order.append("c")),
        ("a", lambda: order.append("a")),
        ("b", lambda: order.append("b")),
    )
    results = SpecRunner(isolate=False).run(group)
    assert order == ["c", "a", "b"]
    assert [result.case_name for result in results] == ["c", "a", "b"]
    assert all(result.passed for result in results)


def test_failure_does_not_abort_group() -> None:
    group = _group(("fails", _fail), ("boom", _boom), ("invalid", _invalid), ("ok", lambda: None))
    results = SpecRunner(isolate=False).run(group)
    assert [result.status for result in results] == ["failed", "failed", "failed", "passed"]
    assert [result.failure_kind for result in results] == ["assertion", "unhandled", "invalid_argument", None]
    assert "expected 1 to equal 2" in (results[0].failure_reason or "")
    assert results[1].failure_reason == "RuntimeError: boom"


def test_keyboard_interrupt_propagates() -> None:
    def interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        SpecRunner(isolate=False).run(_group(("interrupt", interrupt)))


def test_isolation_collects_before_each_case() -> None:
    collector = CountingCollector()
    group = _group(("one", lambda: None), ("two", lambda: None))
    SpecRunner(collector=collector).run(group)
    assert collector.calls == 2


def test_collect_hook_uses_runner_collector() -> None:
    collector = CountingCollector()
    SpecRunner(collector=collector, isolate=False).run(_group(("hook", collect)))
    assert collector.calls == 1


def test_result_counts_checks() -> None:
    def two_checks() -> None:
        expect(1).to_equal(1)
        expect(None).to_be_null()

    results = SpecRunner(isolate=False).run(_group(("checks", two_checks)))
    assert results[0].checks == 2


def test_on_result_reports_progress() -> None:
    seen: list[tuple[str, int, int]] = []
    first = _group(("a", lambda: None))
    second = TestGroup(name="second")
    second.add("b", lambda: None)
    SpecRunner(isolate=False).run_all(
        [first, second],
        on_result=lambda result, index, total: seen.append((result.identifier(), index, total)),
    )
    assert seen == [("group > a", 1, 2), ("second > b", 2, 2)]


def test_weak_handle_scenario_through_runner() -> None:
    class Target:
        pass

    def scenario() -> None:
        obj = Target()
        handle = WeakHandle(obj)
        obj = None
        collect()
        expect(handle.get()).to_be_null()

    results = SpecRunner().run(_group(("collected", scenario)))
    assert results[0].passed, results[0].failure_reason


def test_case_execution_rejects_reentry() -> None:
    execution = CaseExecution(TestCase(name="c", body=lambda: None))
    execution.transition(CaseState.RUNNING)
    execution.transition(CaseState.PASSED)
    assert execution.state.terminal
    with pytest.raises(HarnessError):
        execution.transition(CaseState.RUNNING)


def test_case_execution_cannot_skip_running() -> None:
    execution = CaseExecution(TestCase(name="c", body=lambda: None))
    with pytest.raises(HarnessError):
        execution.transition(CaseState.FAILED)


def test_group_rejects_duplicate_case_names() -> None:
    group = TestGroup(name="dup")
    group.add("same", lambda: None)
    with pytest.raises(ValueError):
        group.add("same", lambda: None)


def test_group_decorator_registers_case() -> None:
    group = TestGroup(name="decorated")

    @group.it("works")
    def body() -> None:
        pass

    assert group.names() == ("works",)
    assert group.cases[0].body is body


class FailingCollector:
    name = "failing"

    def collect(self) -> None:
        raise RuntimeError("collector down")


def test_isolation_collector_error_fails_only_that_case() -> None:
    group = _group(("one", lambda: None), ("two", lambda: None))
    results = SpecRunner(collector=FailingCollector()).run(group)
    assert [result.status for result in results] == ["failed", "failed"]
    assert [result.failure_kind for result in results] == ["unhandled", "unhandled"]
    assert results[0].failure_reason == "RuntimeError: collector down"


def test_generic_harness_errors_are_unhandled() -> None:
    def raw() -> None:
        raise HarnessError("raw")

    def invalid() -> None:
        raise InvalidArgument("bad target")

    results = SpecRunner(isolate=False).run(_group(("raw", raw), ("invalid", invalid)))
    assert [result.failure_kind for result in results] == ["unhandled", "invalid_argument"]
    assert results[0].failure_reason == "HarnessError: raw"
    assert results[1].failure_reason == "bad target"
