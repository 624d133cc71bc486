"""Specs for a cache that must not keep its values alive."""
import weakref

from gcspec import WeakHandle, collect, describe, expect


class Image:
    def __init__(self, name):
        self.name = name


class Node:
    def __init__(self):
        self.peer = None


cache = describe("WeakValueDictionary cache")


@cache.it("drops entries once values are collected")
def _drops_entries():
    store = weakref.WeakValueDictionary()
    image = Image("logo")
    store["logo"] = image
    handle = WeakHandle(image)

    image = None
    collect()

    expect(handle.get()).to_be_null()
    expect("logo" in store).to_equal(False)


@cache.it("keeps values that are still referenced")
def _keeps_live_values():
    store = weakref.WeakValueDictionary()
    image = Image("banner")
    store["banner"] = image

    collect()

    expect(store.get("banner")).to_be(image)


cycles = describe("Reference cycles")


@cycles.it("reclaims unreachable cycles")
def _reclaims_cycles():
    first, second = Node(), Node()
    first.peer, second.peer = second, first
    handle = WeakHandle(first)

    first = second = None
    collect()

    expect(handle.deref()).to_be_null()
