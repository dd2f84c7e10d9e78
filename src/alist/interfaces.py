from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import Generic, Optional, TypeVar

from alist.entry import Entry

K = TypeVar("K")
V = TypeVar("V")


class ICounted(Sized, ABC):
    """``ICounted`` is a marker interface for types which can produce their length.

    Associative containers are ``ICounted``, though the length is only cheap to
    produce because the entries are held in a list."""

    __slots__ = ()


class IAssociativeContainer(ICounted, Generic[K, V]):
    """``IAssociativeContainer`` types map unique keys onto values.

    Keys are compared by equality. Every operation taking a key rejects ``None``
    and callers are expected to check :py:meth:`has_key` before calling
    :py:meth:`get` or :py:meth:`remove`.

    ``IAssociativeContainer`` types provide no iteration API.

    .. seealso::

       :py:class:`alist.container.AssociativeContainer`"""

    __slots__ = ()

    # Not iterable, despite __getitem__
    __iter__ = None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, k) -> bool:
        return self.has_key(k)

    def __getitem__(self, k: K) -> V:
        return self.get(k)

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError()

    @abstractmethod
    def get(self, k: K) -> V:
        raise NotImplementedError()

    @abstractmethod
    def put(self, k: K, v: V) -> None:
        raise NotImplementedError()

    @abstractmethod
    def remove(self, k: K) -> None:
        raise NotImplementedError()

    @abstractmethod
    def has_key(self, k: K) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def val_at(self, k: K, default: Optional[V] = None) -> Optional[V]:
        raise NotImplementedError()

    @abstractmethod
    def entry(self, k: K) -> Optional[Entry[K, V]]:
        raise NotImplementedError()
