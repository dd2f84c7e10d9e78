import pytest

from alist import container as acont


@pytest.fixture(params=[3, 4, 5])
def pickle_protocol(request) -> int:
    return request.param


@pytest.fixture
def coll() -> acont.AssociativeContainer:
    c = acont.new()
    c.put("a", 1)
    c.put("b", 2)
    return c


@pytest.fixture
def strict_postconditions(monkeypatch):
    monkeypatch.setenv("ALIST_CHECK_POSTCONDITIONS", "true")
