"""Typed expectations and the engine that evaluates them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

from gcspec.errors import AssertionFailed

Procedure = Callable[[], Any]


@dataclass(frozen=True)
class EqualityCheck:
    actual: Any
    expected: Any
    identity: bool = False


@dataclass(frozen=True)
class NullCheck:
    actual: Any


@dataclass(frozen=True)
class DefinedCheck:
    actual: Any


@dataclass(frozen=True)
class ThrowCheck:
    procedure: Procedure
    expected: Optional[Union[Type[BaseException], Tuple[Type[BaseException], ...]]] = None


Check = Union[EqualityCheck, NullCheck, DefinedCheck, ThrowCheck]


@dataclass(frozen=True)
class CheckRecord:
    """Outcome of evaluating a single check."""

    kind: str
    passed: bool
    message: str = ""


def _check_equality(check: EqualityCheck) -> Tuple[bool, str]:
    if check.identity:
        ok = check.actual is check.expected
        return ok, f"expected {check.actual!r} to be {check.expected!r}"
    ok = check.actual == check.expected
    return ok, f"expected {check.actual!r} to equal {check.expected!r}"


def _check_null(check: NullCheck) -> Tuple[bool, str]:
    return check.actual is None, f"expected None, got {check.actual!r}"


def _check_defined(check: DefinedCheck) -> Tuple[bool, str]:
    return check.actual is not None, "expected a defined value, got None"


def _check_throws(check: ThrowCheck) -> Tuple[bool, str]:
    try:
        check.procedure()
    except Exception as exc:
        if check.expected is None or isinstance(exc, check.expected):
            return True, ""
        return False, f"expected {_type_names(check.expected)} to be raised, got {type(exc).__name__}: {exc}"
    return False, "no failure raised"


def _type_names(expected: Any) -> str:
    if isinstance(expected, tuple):
        return " or ".join(item.__name__ for item in expected)
    return expected.__name__


_HANDLERS: Dict[type, Tuple[str, Callable[[Any], Tuple[bool, str]]]] = {
    EqualityCheck: ("equality", _check_equality),
    NullCheck: ("null", _check_null),
    DefinedCheck: ("defined", _check_defined),
    ThrowCheck: ("throws", _check_throws),
}


class AssertionEngine:
    """Evaluates checks and keeps a record of each outcome."""

    def __init__(self) -> None:
        self._records: List[CheckRecord] = []

    def evaluate(self, check: Check) -> None:
        try:
            kind, handler = _HANDLERS[type(check)]
        except KeyError as exc:
            raise TypeError(f"Unsupported check type {type(check).__name__}") from exc
        passed, message = handler(check)
        self._records.append(CheckRecord(kind=kind, passed=passed, message="" if passed else message))
        if not passed:
            raise AssertionFailed(message)

    def assert_equal(self, actual: Any, expected: Any) -> None:
        self.evaluate(EqualityCheck(actual, expected))

    def assert_null(self, actual: Any) -> None:
        self.evaluate(NullCheck(actual))

    def assert_defined(self, actual: Any) -> None:
        self.evaluate(DefinedCheck(actual))

    def assert_throws(self, procedure: Procedure, expected: Any = None) -> None:
        self.evaluate(ThrowCheck(procedure, expected))

    def begin_case(self) -> None:
        self._records.clear()

    @property
    def records(self) -> List[CheckRecord]:
        return list(self._records)


assertion_engine = AssertionEngine()


def assert_equal(actual: Any, expected: Any) -> None:
    assertion_engine.assert_equal(actual, expected)


def assert_null(actual: Any) -> None:
    assertion_engine.assert_null(actual)


def assert_defined(actual: Any) -> None:
    assertion_engine.assert_defined(actual)


def assert_throws(procedure: Procedure, expected: Any = None) -> None:
    assertion_engine.assert_throws(procedure, expected)


class Expectation:
    """Fluent wrapper building typed checks for ``actual``."""

    def __init__(self, actual: Any, engine: AssertionEngine) -> None:
        self._actual = actual
        self._engine = engine

    def to_be(self, expected: Any) -> None:
        self._engine.evaluate(EqualityCheck(self._actual, expected, identity=True))

    def to_equal(self, expected: Any) -> None:
        self._engine.evaluate(EqualityCheck(self._actual, expected))

    def to_be_null(self) -> None:
        self._engine.evaluate(NullCheck(self._actual))

    def to_be_defined(self) -> None:
        self._engine.evaluate(DefinedCheck(self._actual))

    def to_throw(self, expected: Any = None) -> None:
        if not callable(self._actual):
            raise TypeError("to_throw() requires a callable")
        self._engine.evaluate(ThrowCheck(self._actual, expected))


def expect(actual: Any) -> Expectation:
    return Expectation(actual, assertion_engine)
