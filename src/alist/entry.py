from typing import Generic, TypeVar

import attr

K = TypeVar("K")
V = TypeVar("V")


@attr.frozen
class Entry(Generic[K, V]):
    """A single key-value pair stored in an associative container."""

    key: K
    value: V

    def matches(self, k) -> bool:
        """Return True if `k` names this entry, comparing by identity and then by
        equality the way the builtin containers do."""
        return self.key is k or self.key == k
