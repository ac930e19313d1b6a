"""Checklist Manager core package."""

from .domain import Task, Checklist
from .drive import SaveResult, TaskFile
from .progress import render_checklist, render_summary, progress_bar
from .store import ChecklistStore

__all__ = [
    "Task",
    "Checklist",
    "SaveResult",
    "TaskFile",
    "ChecklistStore",
    "render_checklist",
    "render_summary",
    "progress_bar",
]
