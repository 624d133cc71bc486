"""Suite registry implementation."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, Sequence, Tuple

from gcspec.core import TestGroup
from gcspec.core.models import CaseBody


class SuiteRegistry:
    """Stores test groups by name and preserves registration order."""

    def __init__(self) -> None:
        self._groups: Dict[str, TestGroup] = {}

    def describe(self, name: str) -> TestGroup:
        """Create and register an empty group to be filled with ``@group.it``."""

        return self.register(TestGroup(name=name))

    def register(self, group: TestGroup) -> TestGroup:
        if not group.name:
            raise ValueError("Group name cannot be empty")
        if group.name in self._groups:
            raise ValueError(f"Group '{group.name}' already registered")
        self._groups[group.name] = group
        return group

    def register_group(self, name: str, cases: Sequence[Tuple[str, CaseBody]]) -> TestGroup:
        group = TestGroup(name=name)
        for case_name, body in cases:
            group.add(case_name, body)
        return self.register(group)

    def update_or_register(self, group: TestGroup) -> TestGroup:
        self._groups[group.name] = group
        return group

    def get(self, name: str) -> TestGroup:
        try:
            return self._groups[name]
        except KeyError as exc:
            raise KeyError(f"Group '{name}' is not registered") from exc

    def unregister(self, name: str) -> None:
        self._groups.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return name in self._groups

    def __iter__(self) -> Iterator[TestGroup]:
        return iter(tuple(self._groups.values()))

    def names(self) -> Iterable[str]:
        return tuple(self._groups.keys())


registry = SuiteRegistry()


def describe(name: str) -> TestGroup:
    return registry.describe(name)


def register_group(name: str, cases: Sequence[Tuple[str, CaseBody]]) -> TestGroup:
    return registry.register_group(name, cases)


def clear_registry() -> None:
    registry._groups.clear()


def load_builtins() -> None:
    from . import builtins  # noqa: WPS433

    registry.update_or_register(builtins.build_weakref_group())
