"""Interactive numeric menu over a :class:`ChecklistStore`."""

from __future__ import annotations

import logging

import typer

from .progress import render_checklist
from .store import ChecklistStore

logger = logging.getLogger(__name__)

MENU = """
--- Checklist Manager ---
1. Add Task
2. Remove Task
3. Toggle Task
4. List Tasks
5. Exit"""

ADD, REMOVE, TOGGLE, LIST, EXIT = 1, 2, 3, 4, 5

NOT_FOUND = "Task not found!"


class Menu:
    def __init__(self, store: ChecklistStore):
        self.store = store

    def run(self) -> None:
        """Read choices until ``5`` or end of input.

        Saving is left to the owner of the store.
        """
        try:
            while True:
                typer.echo(MENU)
                raw = typer.prompt("Choice", default="", show_default=False).strip()
                try:
                    choice = int(raw)
                except ValueError:
                    choice = None
                if choice == EXIT:
                    typer.echo("Saving and exiting...")
                    return
                self.dispatch(choice)
        except typer.Abort:
            logger.debug("Input closed, leaving menu")
            typer.echo("\nSaving and exiting...")

    def dispatch(self, choice) -> None:
        if choice == ADD:
            self._add()
        elif choice == REMOVE:
            self._remove()
        elif choice == TOGGLE:
            self._toggle()
        elif choice == LIST:
            typer.echo("\n" + render_checklist(self.store.list_tasks()))
        else:
            typer.echo("Invalid choice!")

    def _add(self) -> None:
        text = typer.prompt("Enter task description", default="", show_default=False)
        self.store.add_task(text)
        typer.echo("Task added successfully!")

    def _remove(self) -> None:
        task_id = typer.prompt("Enter task ID to remove", type=int)
        if self.store.remove_task(task_id):
            typer.echo("Task removed successfully!")
        else:
            typer.echo(NOT_FOUND)

    def _toggle(self) -> None:
        task_id = typer.prompt("Enter task ID to toggle", type=int)
        if self.store.toggle_task(task_id):
            typer.echo("Task status toggled!")
        else:
            typer.echo(NOT_FOUND)


__all__ = ["Menu"]
