"""Built-in conformance group for weak handles."""
from __future__ import annotations

from gcspec.core import TestGroup, WeakHandle, collect, expect

WEAKREF_GROUP = "WeakRef"

PRIMITIVES = (None, 0, 1.5, "text", True, b"bytes", ())


class Probe:
    """Plain weakly referenceable object used as a handle target."""


def should_exist() -> None:
    expect(WeakHandle).to_be_defined()


def get_should_work() -> None:
    obj = Probe()
    handle = WeakHandle(obj)

    obj = None
    collect()

    expect(handle.get()).to_be_null()


def deref_should_work() -> None:
    obj = Probe()
    handle = WeakHandle(obj)

    obj = None
    collect()

    expect(handle.deref()).to_be_null()


def should_throw_with_zero_parameters() -> None:
    expect(lambda: WeakHandle()).to_throw(TypeError)


def should_throw_with_primitive_parameters() -> None:
    for primitive in PRIMITIVES:
        expect(lambda: WeakHandle(primitive)).to_throw(TypeError)


def should_be_clearable() -> None:
    obj = Probe()
    handle = WeakHandle(obj)

    handle.clear()

    expect(handle.get()).to_be_null()
    expect(handle.deref()).to_be_null()


def should_return_live_target() -> None:
    obj = Probe()
    handle = WeakHandle.create(obj)

    collect()

    expect(handle.get()).to_be(obj)
    expect(handle.deref()).to_be(obj)


def should_notify_on_collect() -> None:
    collected = []
    obj = Probe()
    handle = WeakHandle(obj, on_collect=collected.append)

    obj = None
    collect()

    expect(len(collected)).to_equal(1)
    expect(collected[0]).to_be(handle)


def build_weakref_group() -> TestGroup:
    group = TestGroup(name=WEAKREF_GROUP)
    group.add("should exist", should_exist)
    group.add("get should work", get_should_work)
    group.add("deref should work", deref_should_work)
    group.add("should throw when constructed with zero parameters", should_throw_with_zero_parameters)
    group.add("should throw when constructed with primitive parameters", should_throw_with_primitive_parameters)
    group.add("should be clearable", should_be_clearable)
    group.add("should return a live target", should_return_live_target)
    group.add("should notify when the target is collected", should_notify_on_collect)
    return group
