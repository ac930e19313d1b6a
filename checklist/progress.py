"""Rendering utilities for checklist listings.

The listing shows one row per task in stored order::

    === CHECKLIST ===
    [1] [ ] Buy milk
    [2] [X] Finish report
    =================

:func:`render_summary` adds a one-line completion summary with a text
progress bar.
"""

from __future__ import annotations

from typing import Sequence

from .domain import Task

HEADER = "=== CHECKLIST ==="
EMPTY_MESSAGE = "No tasks in the checklist."


def display_text(text: str) -> str:
    """Return ``text`` with undecodable bytes shown as ``\\xNN`` escapes."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def render_task(task: Task) -> str:
    mark = "[X]" if task.completed else "[ ]"
    return f"[{task.id}] {mark} {display_text(task.text)}"


def render_checklist(tasks: Sequence[Task]) -> str:
    """Return the listing for ``tasks`` or the empty message."""
    if not tasks:
        return EMPTY_MESSAGE
    lines = [HEADER]
    lines.extend(render_task(t) for t in tasks)
    lines.append("=" * len(HEADER))
    return "\n".join(lines)


def completion_percent(tasks: Sequence[Task]) -> float:
    """Return the share of completed tasks as a percentage (0 when empty)."""
    if not tasks:
        return 0.0
    done = sum(1 for t in tasks if t.completed)
    return done / len(tasks) * 100


def progress_bar(percent: float, width: int = 20) -> str:
    """Return a ``#``/``-`` bar of ``width`` characters."""
    percent = max(0.0, min(float(percent), 100.0))
    filled = int(round(percent / 100 * width))
    return "#" * filled + "-" * (width - filled)


def render_summary(tasks: Sequence[Task]) -> str:
    done = sum(1 for t in tasks if t.completed)
    pct = completion_percent(tasks)
    return f"{done}/{len(tasks)} done [{progress_bar(pct)}] {pct:.0f}%"


__all__ = [
    "display_text",
    "render_task",
    "render_checklist",
    "completion_percent",
    "progress_bar",
    "render_summary",
]
