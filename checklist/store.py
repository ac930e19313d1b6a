"""In-memory checklist with load-on-open and save-on-close."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .domain import Task
from .drive import SaveResult, TaskFile

logger = logging.getLogger(__name__)


class ChecklistStore:
    """Owns the task collection and its file.

    Ids are assigned from ``max(loaded ids) + 1`` and only ever go up, so an
    id freed by a removal is not handed out again in the same session.
    Callers get copies of tasks, never the live records.
    """

    def __init__(self, path: Path | str) -> None:
        self._file = TaskFile(path)
        self._tasks: List[Task] = self._file.load()
        self._next_id = max((t.id for t in self._tasks), default=0) + 1

    def __enter__(self) -> 'ChecklistStore':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def path(self) -> Path:
        return self._file.path

    @property
    def next_id(self) -> int:
        return self._next_id

    def _find(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add_task(self, text: str) -> Task:
        task = Task(id=self._next_id, text=text)
        self._next_id += 1
        self._tasks.append(task)
        return replace(task)

    def remove_task(self, task_id: int) -> bool:
        task = self._find(task_id)
        if task is None:
            return False
        self._tasks.remove(task)
        return True

    def toggle_task(self, task_id: int) -> bool:
        task = self._find(task_id)
        if task is None:
            return False
        task.toggle_complete()
        return True

    def rename_task(self, task_id: int, text: str) -> bool:
        task = self._find(task_id)
        if task is None:
            return False
        task.set_text(text)
        return True

    def list_tasks(self) -> List[Task]:
        return [replace(t) for t in self._tasks]

    def close(self) -> SaveResult:
        """Persist the collection. Failures are logged, not raised."""
        result = self._file.save(self._tasks)
        if not result.ok:
            logger.error("Error saving tasks: %s", result.error)
        return result


__all__ = ["ChecklistStore"]
