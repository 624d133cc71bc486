"""Spec runner executing grouped cases sequentially."""
from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Sequence

from gcspec.errors import AssertionFailed, HarnessError, InvalidArgument, UnhandledFailure

from .assertions import assertion_engine
from .collector import GCTrigger, collector_manager
from .models import ALLOWED_TRANSITIONS, CaseState, TestCase, TestGroup
from .results import CaseResult

logger = logging.getLogger(__name__)

ResultCallback = Callable[[CaseResult, int, int], None]


class CaseExecution:
    """Tracks one case through PENDING -> RUNNING -> PASSED/FAILED."""

    def __init__(self, case: TestCase) -> None:
        self.case = case
        self.state = CaseState.PENDING

    def transition(self, target: CaseState) -> None:
        if target not in ALLOWED_TRANSITIONS[self.state]:
            raise HarnessError(
                f"Case '{self.case.name}' cannot move from {self.state.value} to {target.value}"
            )
        self.state = target


class SpecRunner:
    """Executes the cases of each group strictly in declaration order."""

    def __init__(
        self,
        *,
        collector: Optional[GCTrigger] = None,
        isolate: bool = True,
    ) -> None:
        self._collector = collector
        self._isolate = isolate

    @property
    def collector(self) -> GCTrigger:
        return self._collector or collector_manager.active()

    def run(self, group: TestGroup, *, on_result: Optional[ResultCallback] = None) -> List[CaseResult]:
        return self.run_all([group], on_result=on_result)

    def run_all(
        self,
        groups: Sequence[TestGroup],
        *,
        on_result: Optional[ResultCallback] = None,
    ) -> List[CaseResult]:
        results: List[CaseResult] = []
        total = sum(len(group) for group in groups)
        collector = self.collector
        with collector_manager.use(collector):
            for group in groups:
                logger.debug("Running group %r (%d case(s))", group.name, len(group))
                for case in group:
                    result = self._execute_case(group, CaseExecution(case), collector)
                    results.append(result)
                    if on_result:
                        on_result(result, len(results), total)
        return results

    def _execute_case(self, group: TestGroup, execution: CaseExecution, collector: GCTrigger) -> CaseResult:
        case = execution.case
        assertion_engine.begin_case()
        execution.transition(CaseState.RUNNING)
        start = time.perf_counter()
        failure: Optional[HarnessError] = None
        try:
            if self._isolate:
                collector.collect()
            case.body()
        except (AssertionFailed, InvalidArgument) as exc:
            failure = exc
        except Exception as exc:
            failure = UnhandledFailure.wrap(exc)
        duration = time.perf_counter() - start
        checks = len(assertion_engine.records)
        if failure is None:
            execution.transition(CaseState.PASSED)
            logger.debug("%s > %s passed (%d check(s))", group.name, case.name, checks)
            return CaseResult(
                group=group.name,
                case_name=case.name,
                status=execution.state.value,
                duration_s=duration,
                checks=checks,
            )
        execution.transition(CaseState.FAILED)
        logger.debug("%s > %s failed: %s", group.name, case.name, failure)
        return CaseResult(
            group=group.name,
            case_name=case.name,
            status=execution.state.value,
            duration_s=duration,
            failure_reason=str(failure) or type(failure).__name__,
            failure_kind=failure.kind,
            checks=checks,
        )
