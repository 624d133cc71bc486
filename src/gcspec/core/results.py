"""Result data structures produced by the spec runner."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import CaseState


@dataclass
class CaseResult:
    """Outcome of executing a single test case."""

    group: str
    case_name: str
    status: str
    duration_s: float
    failure_reason: Optional[str] = None
    failure_kind: Optional[str] = None
    checks: int = 0

    @property
    def passed(self) -> bool:
        return self.status == CaseState.PASSED.value

    def identifier(self) -> str:
        return f"{self.group} > {self.case_name}"
