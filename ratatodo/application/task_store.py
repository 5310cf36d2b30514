"""Ordered task collection with a single optional selection cursor."""

import logging
from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ratatodo.status import Status
from ratatodo.task import Task

logger = logging.getLogger("ratatodo.store")


class IndexOutOfRange(IndexError):
    """Raised when a store operation receives a position that does not exist."""


class TaskStore:
    """Tasks in manual curation order plus the highlighted position.

    Position is the only address a task has. ``selection`` is either ``None``
    or a valid index once any public method returns.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])
        self._selection: Optional[int] = None

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def selection(self) -> Optional[int]:
        return self._selection

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def selected_task(self) -> Optional[Task]:
        if self._selection is None:
            return None
        return self._tasks[self._selection]

    def status_counts(self) -> Dict[Status, int]:
        counts = {status: 0 for status in Status}
        for task in self._tasks:
            counts[task.status] += 1
        return counts

    # -------------------- mutation --------------------
    def insert(self, title: str, detail: str, status: Status) -> int:
        self._tasks.append(Task(title=title, detail=detail, status=status))
        index = len(self._tasks) - 1
        logger.debug("inserted task #%s (%s)", index, status.label)
        return index

    def update(self, index: int, title: str, detail: str) -> None:
        self._check_index(index)
        self._tasks[index] = replace(self._tasks[index], title=title, detail=detail)
        logger.debug("updated task #%s", index)

    def delete_selected(self) -> None:
        if self._selection is None:
            return
        removed = self._selection
        del self._tasks[removed]
        if not self._tasks:
            self._selection = None
        else:
            self._selection = min(removed, len(self._tasks) - 1)
        logger.debug("deleted task #%s, selection now %s", removed, self._selection)

    def select_next(self) -> None:
        if not self._tasks:
            self._selection = None
            return
        if self._selection is None:
            self._selection = 0
        else:
            self._selection = (self._selection + 1) % len(self._tasks)

    def select_previous(self) -> None:
        if not self._tasks:
            self._selection = None
            return
        if self._selection is None:
            self._selection = len(self._tasks) - 1
        else:
            self._selection = (self._selection - 1) % len(self._tasks)

    def cycle_status_selected(self) -> None:
        task = self.selected_task()
        if task is None:
            return
        updated = replace(task, status=task.status.next())
        self._tasks[self._selection] = updated
        logger.debug("task #%s status %s -> %s", self._selection, task.status.label, updated.status.label)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRange(f"task index {index} out of range (size {len(self._tasks)})")


__all__ = ["IndexOutOfRange", "TaskStore"]
