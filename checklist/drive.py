"""Persistence helpers for saving and loading checklists from disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .domain import Task
from .schema import RecordError, format_record, parse_record

logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    """Outcome of :meth:`TaskFile.save`; ``error`` is set on failure."""

    path: Path
    count: int = 0
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TaskFile:
    """Flat-file storage for one checklist, one record per line.

    Bound to a single path for its whole life. Instances cannot be copied;
    the owning store is the only holder.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def load(self) -> List[Task]:
        """Return the tasks stored at ``path``.

        A missing or unreadable file yields an empty list. Reading stops at
        the first line that is not a valid record. Only ``\n`` ends a line,
        and bytes that are not UTF-8 are kept as surrogates so that
        :meth:`save` writes them back unchanged.
        """
        tasks: List[Task] = []
        try:
            f = self._path.open("r", encoding="utf-8", errors="surrogateescape", newline="\n")
        except OSError as e:
            logger.debug("No checklist loaded from %s: %s", self._path, e)
            return tasks
        with f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    tasks.append(parse_record(line))
                except RecordError:
                    break
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save_or_raise(self, tasks: Iterable[Task]) -> int:
        """Write ``tasks`` to ``path``, replacing its content.

        Raises :class:`OSError` if the file cannot be opened or written.
        Returns the number of records written.
        """
        count = 0
        with self._path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            for task in tasks:
                f.write(format_record(task) + "\n")
                count += 1
        logger.debug("Saved %d tasks to %s", count, self._path)
        return count

    def save(self, tasks: Iterable[Task]) -> SaveResult:
        """Write ``tasks`` to ``path`` and report failures as a value."""
        try:
            count = self.save_or_raise(tasks)
        except OSError as e:
            return SaveResult(path=self._path, error=e)
        return SaveResult(path=self._path, count=count)


__all__ = ["SaveResult", "TaskFile"]
