"""Core dataclasses shared across gcspec subsystems."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Tuple

CaseBody = Callable[[], Any]


class CaseState(str, enum.Enum):
    """Lifecycle of a single case within a run."""

    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (CaseState.PASSED, CaseState.FAILED)


ALLOWED_TRANSITIONS = {
    CaseState.PENDING: (CaseState.RUNNING,),
    CaseState.RUNNING: (CaseState.PASSED, CaseState.FAILED),
    CaseState.PASSED: (),
    CaseState.FAILED: (),
}


@dataclass(frozen=True)
class TestCase:
    """Named zero-argument body registered within a group."""

    __test__ = False

    name: str
    body: CaseBody


@dataclass
class TestGroup:
    """Ordered collection of cases; insertion order is execution order."""

    __test__ = False

    name: str
    cases: List[TestCase] = field(default_factory=list)

    def add(self, name: str, body: CaseBody) -> TestCase:
        if not name:
            raise ValueError("Case name cannot be empty")
        if any(case.name == name for case in self.cases):
            raise ValueError(f"Case '{name}' already registered in group '{self.name}'")
        case = TestCase(name=name, body=body)
        self.cases.append(case)
        return case

    def it(self, name: str) -> Callable[[CaseBody], CaseBody]:
        """Decorator registering the decorated function as a case."""

        def decorator(body: CaseBody) -> CaseBody:
            self.add(name, body)
            return body

        return decorator

    def names(self) -> Tuple[str, ...]:
        return tuple(case.name for case in self.cases)

    def __iter__(self) -> Iterator[TestCase]:
        return iter(tuple(self.cases))

    def __len__(self) -> int:
        return len(self.cases)
