from typing import Optional, TypeVar

import deal
from immutables import Map as _Map

from alist.contract import postcondition, precondition
from alist.entry import Entry
from alist.exception import (
    DuplicateKeyError,
    KeyNotFoundError,
    NullKeyError,
    PostconditionError,
    key_data,
)
from alist.interfaces import IAssociativeContainer

K = TypeVar("K")
V = TypeVar("V")


def _key_given(coll: "AssociativeContainer", k, *args, **kwargs) -> None:
    if k is None:
        raise NullKeyError("Key may not be None", key_data(k))


def _key_present(coll: "AssociativeContainer", k, *args, **kwargs) -> None:
    _key_given(coll, k)
    if not coll.has_key(k):
        raise KeyNotFoundError("Key not found", key_data(k))


def _key_absent(coll: "AssociativeContainer", k, *args, **kwargs) -> None:
    _key_given(coll, k)
    if coll.has_key(k):
        raise DuplicateKeyError("Key already present", key_data(k))


def _created_empty(coll: "AssociativeContainer", result) -> None:
    if coll.size() != 0:
        raise PostconditionError(
            "New container is not empty", _Map({"size": coll.size()})
        )


def _empty_iff_sizeless(coll: "AssociativeContainer", result: bool) -> None:
    if result != (coll.size() == 0):
        raise PostconditionError(
            "Emptiness disagrees with size",
            _Map({"is_empty": result, "size": coll.size()}),
        )


def _holds_value(coll: "AssociativeContainer", k, v, result) -> None:
    if not coll.has_key(k):
        raise PostconditionError("Key missing after put", key_data(k))
    stored = coll.get(k)
    if stored is not v and stored != v:
        raise PostconditionError("Stored value differs after put", key_data(k))


def _key_removed(coll: "AssociativeContainer", k, result) -> None:
    if coll.has_key(k):
        raise PostconditionError("Key still present after remove", key_data(k))


class AssociativeContainer(IAssociativeContainer[K, V]):
    """A mutable associative container backed by a list of entries.

    Every operation performs a linear scan comparing keys by identity, then by
    ``==``, so keys need not be hashable. Entries are kept in insertion order.

    Contract violations are raised as :py:class:`alist.exception.ContractViolation`
    subclasses and leave the container unchanged. Unlike a ``dict``, putting a
    key which is already present is an error rather than an overwrite; callers
    must :py:meth:`remove` the existing entry first."""

    __slots__ = ("_entries",)

    @deal.ensure(postcondition(_created_empty))
    def __init__(self) -> None:
        self._entries: list[Entry[K, V]] = []

    def __repr__(self):
        entries = ", ".join(f"{e.key!r}: {e.value!r}" for e in self._entries)
        return f"{type(self).__name__}({{{entries}}})"

    @deal.ensure(postcondition(_empty_iff_sizeless))
    def is_empty(self) -> bool:
        return self.size() == 0

    def size(self) -> int:
        return len(self._entries)

    @deal.pre(precondition(_key_present))
    def get(self, k: K) -> V:
        """Return the value associated with `k`.

        Raise `KeyNotFoundError` if `k` is not present. Use `val_at` for a lookup
        which falls back to a default instead."""
        entry = self.entry(k)
        if entry is None:
            raise KeyNotFoundError("Key not found", key_data(k))
        return entry.value

    @deal.pre(precondition(_key_absent))
    @deal.ensure(postcondition(_holds_value))
    def put(self, k: K, v: V) -> None:
        """Associate `k` with `v`, appending a new entry.

        Raise `DuplicateKeyError` if `k` is already present."""
        self._entries.append(Entry(k, v))

    @deal.pre(precondition(_key_present))
    @deal.ensure(postcondition(_key_removed))
    def remove(self, k: K) -> None:
        """Remove every entry whose key matches `k`."""
        self._entries = [entry for entry in self._entries if not entry.matches(k)]

    @deal.pre(precondition(_key_given))
    def has_key(self, k: K) -> bool:
        return any(entry.matches(k) for entry in self._entries)

    @deal.pre(precondition(_key_given))
    def val_at(self, k: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value associated with `k`, or `default` if `k` is absent."""
        entry = self.entry(k)
        if entry is None:
            return default
        return entry.value

    @deal.pre(precondition(_key_given))
    def entry(self, k: K) -> Optional[Entry[K, V]]:
        for entry in self._entries:
            if entry.matches(k):
                return entry
        return None


def new() -> AssociativeContainer:
    """Creates a new, empty associative container."""
    return AssociativeContainer()
