import threading

import pytest

from envbind.override import current_overrides, overridden, with_override


def test_outside_override_is_none():
    assert current_overrides() is None


def test_override_visible_and_restored():
    seen = {}

    def callback():
        seen.update(current_overrides())
        return "done"

    result = with_override(callback, "FOO", "abc", "DUMMY", "24", "FAKE_LIST", "1,2,3")
    assert result == "done"
    assert seen == {"FOO": "abc", "DUMMY": "24", "FAKE_LIST": "1,2,3"}
    assert current_overrides() is None


def test_nested_overrides_use_innermost():
    seen = []

    def inner():
        seen.append(dict(current_overrides()))

    def outer():
        seen.append(dict(current_overrides()))
        with_override(inner, "FOO", "other", "DUMMY", "24")
        seen.append(dict(current_overrides()))

    with_override(outer, "FOO", "testing")
    assert seen == [
        {"FOO": "testing"},
        {"FOO": "other", "DUMMY": "24"},
        {"FOO": "testing"},
    ]
    assert current_overrides() is None


def test_odd_arguments_raise():
    with pytest.raises(ValueError):
        with_override(lambda: None, "FOO")


def test_context_manager_restores_on_error():
    with pytest.raises(RuntimeError):
        with overridden("A", "1"):
            assert current_overrides() == {"A": "1"}
            raise RuntimeError("boom")
    assert current_overrides() is None


def test_threads_see_their_own_values():
    ready = threading.Event()
    results = {}
    lock = threading.Lock()

    def worker(idx):
        value = f"sentence {idx}"

        def callback():
            ready.wait()
            return current_overrides()["CONCURRENT_STRING"]

        seen = with_override(callback, "CONCURRENT_STRING", value)
        with lock:
            results[idx] = seen

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(100)]
    for thread in threads:
        thread.start()
    ready.set()
    for thread in threads:
        thread.join()

    assert len(results) == 100
    for idx, seen in results.items():
        assert seen == f"sentence {idx}"
    assert current_overrides() is None