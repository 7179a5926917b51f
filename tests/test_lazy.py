import pytest

from specmath.lazy import LazyPtr, LazyValue, make_lazy, make_lazy_ptr


def _counting(result):
    calls = []

    def build():
        calls.append(1)
        return result

    return build, calls


def test_lazy_value_builds_once():
    build, calls = _counting([1, 2])
    lazy = LazyValue(build)
    first = lazy.get()
    second = lazy.get()
    assert first == [1, 2]
    assert first is second
    assert len(calls) == 1


def test_lazy_value_not_built_before_access():
    build, calls = _counting("x")
    lazy = LazyValue(build)
    assert not lazy
    assert calls == []
    assert lazy.get() == "x"
    assert lazy


def test_lazy_value_caches_none():
    build, calls = _counting(None)
    lazy = make_lazy(build)
    assert lazy.get() is None
    assert lazy.get() is None
    assert len(calls) == 1


def test_make_lazy_returns_value():
    assert make_lazy(lambda: 25.0).get() == 25.0


def test_lazy_ptr_builds_once():
    target = {"k": 1}
    build, calls = _counting(target)
    lazy = LazyPtr(build)
    first = lazy.get()
    second = lazy.get()
    assert first == {"k": 1}
    assert first is target
    assert second is target
    assert len(calls) == 1


def test_lazy_ptr_none_raises():
    lazy = make_lazy_ptr(lambda: None)
    with pytest.raises(RuntimeError, match="Incorrect constructor in LazyPtr"):
        lazy.get()


def test_lazy_ptr_retries_after_failure():
    build, calls = _counting(None)
    lazy = LazyPtr(build)
    for _ in range(2):
        with pytest.raises(RuntimeError):
            lazy.get()
    assert len(calls) == 2