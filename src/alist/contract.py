"""Glue between the container's contract checks and `deal`.

A check is a plain function which raises a
:py:class:`alist.exception.ContractViolation` when its condition does not hold.
:py:func:`precondition` and :py:func:`postcondition` adapt such a check into a
validator for ``deal.pre`` or ``deal.ensure``, which lets the typed error
propagate to the caller unchanged."""

import functools
import logging
import os
from typing import Callable

from alist.exception import ContractViolation

logger = logging.getLogger(__name__)

CHECK_POSTCONDITIONS_ENVVAR = "ALIST_CHECK_POSTCONDITIONS"

Check = Callable[..., None]
Validator = Callable[..., bool]


def postconditions_enabled() -> bool:
    """Return True if postconditions should be verified after each call.

    Postconditions are checked unless `ALIST_CHECK_POSTCONDITIONS` is set to
    anything other than `true`. Preconditions are always checked, since they
    are what turns caller mistakes into errors."""
    return os.getenv(CHECK_POSTCONDITIONS_ENVVAR, "true").lower() == "true"


def _run(kind: str, check: Check, *args, **kwargs) -> bool:
    try:
        check(*args, **kwargs)
    except ContractViolation as e:
        logger.debug(f"{kind} {check.__name__} violated: {e}")
        raise
    return True


def precondition(check: Check) -> Validator:
    """Adapt `check` into a `deal.pre` validator."""

    @functools.wraps(check)
    def _precondition(*args, **kwargs) -> bool:
        return _run("Precondition", check, *args, **kwargs)

    return _precondition


def postcondition(check: Check) -> Validator:
    """Adapt `check` into a `deal.ensure` validator, which is skipped entirely
    while postconditions are disabled.

    `deal.ensure` passes the return value of the decorated function as the
    ``result`` keyword argument."""

    @functools.wraps(check)
    def _postcondition(*args, **kwargs) -> bool:
        if not postconditions_enabled():
            return True
        return _run("Postcondition", check, *args, **kwargs)

    return _postcondition
