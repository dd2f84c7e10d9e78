from typing import Any

import attr
from immutables import Map as _Map


@attr.define(repr=False, str=False, slots=False)
class ContractViolation(Exception):
    """Base class for every error raised when a container contract is broken.

    ``data`` is an immutable map of contextual information about the violation,
    typically holding the offending ``key``."""

    message: str
    data: "_Map[str, Any]" = attr.field(factory=_Map)

    def __repr__(self):
        return (
            f"alist.exception.{type(self).__name__}"
            f"({self.message!r}, {dict(self.data)!r})"
        )

    def __str__(self):
        return f"{self.message} {dict(self.data)!r}"


class NullKeyError(ContractViolation, ValueError):
    """Raised when ``None`` is supplied as a key."""


class KeyNotFoundError(ContractViolation, KeyError):
    """Raised when a lookup or removal names a key which is not present."""


class DuplicateKeyError(ContractViolation, ValueError):
    """Raised when inserting a key which is already present."""


class PostconditionError(ContractViolation, AssertionError):
    """Raised when an operation fails to uphold one of its own guarantees.

    Unlike the other errors, this always indicates a defect in the container
    rather than in the caller."""


def key_data(k: Any) -> "_Map[str, Any]":
    """Return the ``data`` map describing the key involved in a violation."""
    return _Map({"key": k})
