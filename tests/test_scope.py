import pytest

from cub.scope import ScopeExit, make_scope_exit


def test_executes_code_when_exiting_scope():
    state = {"exited": False}

    def mark():
        state["exited"] = True

    guard = make_scope_exit(mark)
    assert isinstance(guard, ScopeExit)
    with guard as entered:
        assert entered is guard
        assert state["exited"] is False

    assert state["exited"] is True


def test_runs_on_exception_and_does_not_swallow():
    calls = []
    with pytest.raises(KeyError):
        with ScopeExit(lambda: calls.append(1)):
            raise KeyError("x")
    assert calls == [1]


def test_enter_returns_guard():
    guard = make_scope_exit(lambda: None)
    with guard as entered:
        assert entered is guard