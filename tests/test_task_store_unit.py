import dataclasses
import random

import pytest

from ratatodo import Status, Task
from ratatodo.application.task_store import IndexOutOfRange, TaskStore


def make_store(n):
    store = TaskStore()
    for i in range(n):
        store.insert(f"task {i}", f"detail {i}", Status.UPCOMING)
    return store


def titles(store):
    return [t.title for t in store.tasks]


class TestInsertAndUpdate:
    def test_insert_appends_and_returns_index(self):
        store = make_store(2)
        idx = store.insert("third", "", Status.ACTIVE)
        assert idx == 2
        assert titles(store) == ["task 0", "task 1", "third"]
        assert store.get(2).status is Status.ACTIVE

    def test_insert_does_not_touch_selection(self):
        store = make_store(1)
        assert store.selection is None
        store.insert("x", "", Status.UPCOMING)
        assert store.selection is None
        store.select_next()
        store.insert("y", "", Status.UPCOMING)
        assert store.selection == 0

    def test_update_replaces_text_and_keeps_status(self):
        store = make_store(2)
        store.select_next()
        store.cycle_status_selected()
        store.update(0, "renamed", "new detail")
        task = store.get(0)
        assert (task.title, task.detail, task.status) == ("renamed", "new detail", Status.ACTIVE)
        assert len(store) == 2

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_update_out_of_range_raises(self, index):
        store = make_store(2)
        with pytest.raises(IndexOutOfRange):
            store.update(index, "t", "d")

    def test_index_out_of_range_is_an_index_error(self):
        with pytest.raises(IndexError):
            TaskStore().update(0, "t", "d")

    def test_store_accepts_initial_tasks(self):
        store = TaskStore([Task("a"), Task("b", "x", Status.COMPLETED)])
        assert titles(store) == ["a", "b"]
        assert store.selection is None
        assert store.status_counts() == {Status.UPCOMING: 1, Status.ACTIVE: 0, Status.COMPLETED: 1}


class TestSelection:
    def test_empty_store_keeps_selection_absent(self):
        store = TaskStore()
        store.select_next()
        assert store.selection is None
        store.select_previous()
        assert store.selection is None

    def test_first_next_selects_first_and_first_previous_selects_last(self):
        store = make_store(3)
        store.select_next()
        assert store.selection == 0
        store = make_store(3)
        store.select_previous()
        assert store.selection == 2

    def test_wraparound(self):
        store = make_store(3)
        store.select_previous()
        store.select_next()
        assert store.selection == 0
        store.select_previous()
        assert store.selection == 2

    def test_random_walk_always_valid(self):
        rng = random.Random(1234)
        for size in range(1, 6):
            store = make_store(size)
            for _ in range(200):
                rng.choice([store.select_next, store.select_previous])()
                assert store.selection is not None
                assert 0 <= store.selection < size

    def test_selected_task(self):
        store = make_store(2)
        assert store.selected_task() is None
        store.select_previous()
        assert store.selected_task().title == "task 1"


class TestDelete:
    def test_delete_without_selection_is_noop(self):
        store = make_store(2)
        store.delete_selected()
        assert titles(store) == ["task 0", "task 1"]

    def test_delete_only_task_clears_selection(self):
        store = make_store(1)
        store.select_next()
        store.delete_selected()
        assert len(store) == 0
        assert store.selection is None

    def test_delete_middle_keeps_numeric_index(self):
        store = make_store(3)
        store.select_next()
        store.select_next()
        store.delete_selected()
        assert titles(store) == ["task 0", "task 2"]
        assert store.selection == 1
        assert store.selected_task().title == "task 2"

    def test_delete_last_clamps_to_new_last(self):
        store = make_store(3)
        store.select_previous()
        store.delete_selected()
        assert titles(store) == ["task 0", "task 1"]
        assert store.selection == 1

    @pytest.mark.parametrize("size", [2, 3, 5])
    def test_delete_any_position_leaves_valid_selection(self, size):
        for pos in range(size):
            store = make_store(size)
            for _ in range(pos + 1):
                store.select_next()
            store.delete_selected()
            assert len(store) == size - 1
            assert store.selection is not None
            assert 0 <= store.selection < size - 1

    def test_delete_until_empty(self):
        store = make_store(4)
        store.select_next()
        while len(store):
            store.delete_selected()
        assert store.selection is None


class TestCycleStatus:
    def test_cycle_without_selection_is_noop(self):
        store = make_store(1)
        store.cycle_status_selected()
        assert store.get(0).status is Status.UPCOMING

    def test_three_cycles_restore_status(self):
        store = make_store(2)
        store.select_previous()
        seen = []
        for _ in range(3):
            store.cycle_status_selected()
            seen.append(store.get(1).status)
        assert seen == [Status.ACTIVE, Status.COMPLETED, Status.UPCOMING]
        assert store.get(0).status is Status.UPCOMING

    def test_status_counts(self):
        store = make_store(3)
        store.select_next()
        store.cycle_status_selected()
        assert store.status_counts() == {Status.UPCOMING: 2, Status.ACTIVE: 1, Status.COMPLETED: 0}


def test_tasks_snapshot_is_immutable_view():
    store = make_store(1)
    snapshot = store.tasks
    store.insert("more", "", Status.UPCOMING)
    assert len(snapshot) == 1
    assert len(store) == 2
    assert [t.title for t in store] == ["task 0", "more"]


class TestReadOnlyTasks:
    def test_tasks_handed_out_cannot_be_mutated(self):
        store = make_store(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            store.get(0).title = "changed"
        assert store.get(0).title == "task 0"

    def test_update_and_cycle_replace_the_stored_task(self):
        store = make_store(1)
        before = store.get(0)
        store.select_next()
        store.cycle_status_selected()
        store.update(0, "renamed", "d")
        assert (before.title, before.status) == ("task 0", Status.UPCOMING)
        assert (store.get(0).title, store.get(0).status) == ("renamed", Status.ACTIVE)
