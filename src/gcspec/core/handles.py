"""Weak handle mirroring the semantics of a runtime ``WeakRef``."""
from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Optional

from gcspec.errors import InvalidArgument

logger = logging.getLogger(__name__)

_MISSING: Any = object()

CollectCallback = Callable[["WeakHandle"], None]


class WeakHandle:
    """Non-owning reference to a target object.

    ``get`` and ``deref`` are aliases and observe the same state. Once the
    handle reads as absent, either because ``clear`` was called or because
    the host reclaimed the target, it stays absent.
    """

    __slots__ = ("_ref", "_cleared", "_on_collect", "__weakref__")

    def __init__(self, target: Any = _MISSING, *, on_collect: Optional[CollectCallback] = None) -> None:
        if target is _MISSING:
            raise InvalidArgument("WeakHandle requires a target argument")
        if target is None:
            raise InvalidArgument("WeakHandle target cannot be None")
        self._on_collect = on_collect
        self._cleared = False
        try:
            self._ref: Optional[weakref.ref] = weakref.ref(target, self._finalize)
        except TypeError as exc:
            raise InvalidArgument(
                f"WeakHandle target must be weakly referenceable, got {type(target).__name__}"
            ) from exc

    @classmethod
    def create(cls, target: Any = _MISSING, *, on_collect: Optional[CollectCallback] = None) -> "WeakHandle":
        return cls(target, on_collect=on_collect)

    def get(self) -> Any:
        ref = self._ref
        if ref is None:
            return None
        target = ref()
        if target is None:
            self._latch()
        return target

    deref = get

    def clear(self) -> None:
        """Drop the reference; any pending collect callback is cancelled."""

        self._latch()
        self._on_collect = None

    @property
    def alive(self) -> bool:
        return self.get() is not None

    @property
    def cleared(self) -> bool:
        if not self._cleared and self._ref is not None and self._ref() is None:
            self._latch()
        return self._cleared

    def _latch(self) -> None:
        self._ref = None
        self._cleared = True

    def _finalize(self, _ref: weakref.ref) -> None:
        self._latch()
        callback = self._on_collect
        self._on_collect = None
        if callback is None:
            return
        try:
            callback(self)
        except Exception:
            logger.warning("on_collect callback for %r raised", self, exc_info=True)

    def __repr__(self) -> str:
        state = "cleared" if self._cleared else "live"
        return f"<WeakHandle {state} at {id(self):#x}>"
