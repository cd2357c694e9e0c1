"""run_independent_tasks and partition."""

from __future__ import annotations

import pytest

from railway import err, ok, partition, run_independent_tasks

pytestmark = pytest.mark.unit


def test_all_success_keeps_order() -> None:
    result = run_independent_tasks([lambda: ok(1), lambda: ok(2), lambda: ok(3)])
    assert result == ok([1, 2, 3])


def test_mixed_collects_every_failure() -> None:
    result = run_independent_tasks([lambda: ok(1), lambda: err("a"), lambda: err("b")])
    assert result == err(["a", "b"])


def test_all_failure_preserves_task_order() -> None:
    result = run_independent_tasks([lambda: err("x"), lambda: err("y")])
    assert result == err(["x", "y"])


def test_empty_task_list_succeeds() -> None:
    assert run_independent_tasks([]) == ok([])


def test_every_task_runs_once_after_failures() -> None:
    calls: list[int] = []

    def task(n: int, fail: bool):
        def run():
            calls.append(n)
            return err(n) if fail else ok(n)

        return run

    run_independent_tasks([task(0, True), task(1, False), task(2, True), task(3, False)])

    assert calls == [0, 1, 2, 3]


def test_task_exceptions_propagate() -> None:
    def broken():
        raise RuntimeError("task bug")

    with pytest.raises(RuntimeError, match="task bug"):
        run_independent_tasks([lambda: ok(1), broken])


def test_partition_splits_by_variant() -> None:
    assert partition([ok(1), err("a"), ok(2), err("b")]) == ([1, 2], ["a", "b"])


def test_partition_accepts_iterators() -> None:
    assert partition(iter([])) == ([], [])
