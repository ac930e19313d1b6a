from __future__ import annotations

from .domain import Task


class RecordError(ValueError):
    """Raised when a line does not hold a valid task record."""


def parse_record(line: str) -> Task:
    """Parse one ``<id> <completed> <text>`` line into a :class:`Task`.

    ``id`` and ``completed`` are whitespace-delimited integers. A single
    separator character follows the flag and the remainder of the line is
    taken verbatim as the text, so the text may contain spaces. A nonzero
    flag marks the task completed.
    """
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    fields = []
    pos = 0
    for _ in range(2):
        while pos < len(line) and line[pos].isspace():
            pos += 1
        start = pos
        if pos < len(line) and line[pos] in "+-":
            pos += 1
        while pos < len(line) and line[pos].isdigit():
            pos += 1
        token = line[start:pos]
        try:
            fields.append(int(token))
        except ValueError:
            raise RecordError(f"not a task record: {line!r}") from None

    task_id, completed = fields
    # skip exactly one separator after the flag
    text = line[pos + 1:]
    return Task(id=task_id, text=text, completed=completed != 0)


def format_record(task: Task) -> str:
    """Return the record line for ``task`` without a trailing newline."""
    return f"{task.id} {1 if task.completed else 0} {task.text}"


__all__ = ["RecordError", "parse_record", "format_record"]
