import logging

import deal
import pytest

from alist import contract
from alist.exception import ContractViolation, NullKeyError, PostconditionError


def _positive(n: int) -> None:
    if n <= 0:
        raise ContractViolation("Must be positive")


def _doubled(n: int, result: int) -> None:
    if result != n * 2:
        raise PostconditionError("Result was not doubled")


@deal.pre(contract.precondition(_positive))
@deal.ensure(contract.postcondition(_doubled))
def double(n: int) -> int:
    return n * 2


@deal.ensure(contract.postcondition(_doubled))
def triple(n: int) -> int:
    return n * 3


class TestPostconditionsEnabled:
    def test_enabled_by_default(self, monkeypatch):
        monkeypatch.delenv(contract.CHECK_POSTCONDITIONS_ENVVAR, raising=False)
        assert True is contract.postconditions_enabled()

    @pytest.mark.parametrize("v", ["true", "TRUE", "True"])
    def test_enabled(self, monkeypatch, v: str):
        monkeypatch.setenv(contract.CHECK_POSTCONDITIONS_ENVVAR, v)
        assert True is contract.postconditions_enabled()

    @pytest.mark.parametrize("v", ["false", "0", "", "no"])
    def test_disabled(self, monkeypatch, v: str):
        monkeypatch.setenv(contract.CHECK_POSTCONDITIONS_ENVVAR, v)
        assert False is contract.postconditions_enabled()


class TestPrecondition:
    def test_validator_returns_true(self):
        assert True is contract.precondition(_positive)(1)

    def test_validator_keeps_name(self):
        assert "_positive" == contract.precondition(_positive).__name__

    def test_satisfied(self):
        assert 4 == double(2)

    def test_typed_error_propagates(self):
        with pytest.raises(ContractViolation) as e:
            double(0)

        assert "Must be positive" == e.value.message

    def test_body_not_run_on_violation(self):
        calls = []

        @deal.pre(contract.precondition(_positive))
        def f(n):
            calls.append(n)

        with pytest.raises(ContractViolation):
            f(-1)

        assert [] == calls

    def test_keyword_arguments(self):
        assert 6 == double(n=3)
        with pytest.raises(ContractViolation):
            double(n=-3)

    def test_subclass_errors_propagate(self):
        def no_none(x):
            if x is None:
                raise NullKeyError("Key may not be None")

        @deal.pre(contract.precondition(no_none))
        def f(x):
            return x

        assert 1 == f(1)
        with pytest.raises(NullKeyError):
            f(None)

    def test_wraps(self):
        assert "double" == double.__name__


class TestPostcondition:
    def test_violated(self, monkeypatch):
        monkeypatch.setenv(contract.CHECK_POSTCONDITIONS_ENVVAR, "true")
        with pytest.raises(PostconditionError):
            triple(2)

    def test_disabled(self, monkeypatch):
        monkeypatch.setenv(contract.CHECK_POSTCONDITIONS_ENVVAR, "false")
        assert 6 == triple(2)

    def test_skipped_validator_returns_true(self, monkeypatch):
        monkeypatch.setenv(contract.CHECK_POSTCONDITIONS_ENVVAR, "false")
        assert True is contract.postcondition(_doubled)(2, result=5)

    def test_receives_arguments_and_result(self, monkeypatch):
        monkeypatch.setenv(contract.CHECK_POSTCONDITIONS_ENVVAR, "true")
        seen = []

        def record(a, b=0, result=None):
            seen.append((a, b, result))

        @deal.ensure(contract.postcondition(record))
        def add(a, b=0):
            return a + b

        assert 3 == add(1, b=2)
        assert [(1, 2, 3)] == seen


def test_violations_are_logged_once(caplog, monkeypatch):
    monkeypatch.setenv(contract.CHECK_POSTCONDITIONS_ENVVAR, "true")
    caplog.set_level(logging.DEBUG, logger="alist.contract")

    with pytest.raises(ContractViolation):
        double(-1)
    with pytest.raises(PostconditionError):
        triple(1)

    messages = [r.getMessage() for r in caplog.records]
    assert 2 == len(messages)
    assert messages[0].startswith("Precondition _positive violated")
    assert messages[1].startswith("Postcondition _doubled violated")
