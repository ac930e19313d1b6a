import logging
from pathlib import Path

import typer

from .domain import Checklist
from .menu import Menu, NOT_FOUND
from .progress import display_text, render_checklist, render_summary
from .store import ChecklistStore

app = typer.Typer(help="Checklist Manager CLI")

CHECKLIST_FILE = "checklist.txt"
EXPORT_FORMATS = ("yaml", "json")


def open_store(path: Path) -> ChecklistStore:
    """Load the checklist at ``path``; abort with exit code 1 on failure."""
    try:
        return ChecklistStore(path)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _store(ctx: typer.Context) -> ChecklistStore:
    return open_store(ctx.obj["file"])


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    file: Path = typer.Option(CHECKLIST_FILE, "--file", "-f", envvar="CHECKLIST_FILE", help="Checklist file to use."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Manage a checklist. Without a command, start the interactive menu."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    ctx.obj = {"file": file}
    if ctx.invoked_subcommand is None:
        store = open_store(file)
        with store:
            Menu(store).run()


@app.command("list")
def list_(ctx: typer.Context, summary: bool = typer.Option(False, "--summary", help="Show completion summary.")):
    """Show all tasks."""
    store = _store(ctx)
    tasks = store.list_tasks()
    typer.echo(render_checklist(tasks))
    if summary and tasks:
        typer.echo(render_summary(tasks))


def _commit(store: ChecklistStore) -> None:
    """Save ``store``; exit with code 1 if the file cannot be written."""
    result = store.close()
    if not result.ok:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)


def _single_line(text: str) -> str:
    if "\n" in text:
        raise typer.BadParameter("Task text must be a single line")
    return text


@app.command()
def add(ctx: typer.Context, text: str):
    """Add a task."""
    text = _single_line(text)
    store = _store(ctx)
    task = store.add_task(text)
    _commit(store)
    typer.echo(f"Added task {task.id}")


@app.command()
def remove(ctx: typer.Context, task_id: int):
    """Remove a task by id."""
    store = _store(ctx)
    if not store.remove_task(task_id):
        typer.echo(NOT_FOUND, err=True)
        raise typer.Exit(code=1)
    _commit(store)
    typer.echo(f"Removed task {task_id}")


@app.command()
def toggle(ctx: typer.Context, task_id: int):
    """Flip the completion flag of a task."""
    store = _store(ctx)
    if not store.toggle_task(task_id):
        typer.echo(NOT_FOUND, err=True)
        raise typer.Exit(code=1)
    _commit(store)
    typer.echo(f"Toggled task {task_id}")


@app.command()
def rename(ctx: typer.Context, task_id: int, new_text: str):
    """Replace the text of a task."""
    new_text = _single_line(new_text)
    store = _store(ctx)
    if not store.rename_task(task_id, new_text):
        typer.echo(NOT_FOUND, err=True)
        raise typer.Exit(code=1)
    _commit(store)
    typer.echo(f"Renamed task {task_id} -> {display_text(new_text)}")


@app.command()
def export(ctx: typer.Context, fmt: str = typer.Option("yaml", "--format", help="yaml or json")):
    """Print the checklist as YAML or JSON."""
    if fmt not in EXPORT_FORMATS:
        raise typer.BadParameter(f"Unknown format: {fmt}")
    checklist = Checklist(tasks=_store(ctx).list_tasks())
    typer.echo(checklist.to_yaml() if fmt == "yaml" else checklist.to_json())


if __name__ == "__main__":
    app()
