from pathlib import Path

from typer.testing import CliRunner

from checklist.cli import app
from checklist.menu import Menu
from checklist.store import ChecklistStore

runner = CliRunner()


def _run(path: Path, keys: str):
    return runner.invoke(app, ["--file", str(path)], input=keys)


def test_add_list_exit_saves(tmp_path: Path) -> None:
    path = tmp_path / "checklist.txt"
    result = _run(path, "1\nBuy milk\n4\n5\n")
    assert result.exit_code == 0
    assert "Task added successfully!" in result.output
    assert "[1] [ ] Buy milk" in result.output
    assert "Saving and exiting..." in result.output
    assert path.read_text() == "1 0 Buy milk\n"


def test_toggle_and_remove(tmp_path: Path) -> None:
    path = tmp_path / "checklist.txt"
    path.write_text("1 0 Buy milk\n2 1 Finish report\n")
    result = _run(path, "3\n1\n2\n2\n5\n")
    assert result.exit_code == 0
    assert "Task status toggled!" in result.output
    assert "Task removed successfully!" in result.output
    assert path.read_text() == "1 1 Buy milk\n"


def test_unknown_id_reports_not_found(tmp_path: Path) -> None:
    path = tmp_path / "checklist.txt"
    result = _run(path, "2\n7\n3\n7\n5\n")
    assert result.exit_code == 0
    assert result.output.count("Task not found!") == 2


def test_invalid_choice_reprompts(tmp_path: Path) -> None:
    path = tmp_path / "checklist.txt"
    result = _run(path, "9\nabc\n4\n5\n")
    assert result.exit_code == 0
    assert result.output.count("Invalid choice!") == 2
    assert "No tasks in the checklist." in result.output


def test_non_integer_id_is_asked_again(tmp_path: Path) -> None:
    path = tmp_path / "checklist.txt"
    path.write_text("1 0 Buy milk\n")
    result = _run(path, "3\nxyz\n1\n5\n")
    assert result.exit_code == 0
    assert "Task status toggled!" in result.output
    assert path.read_text() == "1 1 Buy milk\n"


def test_end_of_input_saves(tmp_path: Path) -> None:
    path = tmp_path / "checklist.txt"
    result = _run(path, "1\nCall mom\n")
    assert result.exit_code == 0
    assert path.read_text() == "1 0 Call mom\n"


def test_save_failure_does_not_change_exit_code(tmp_path: Path) -> None:
    path = tmp_path / "missing" / "checklist.txt"
    result = _run(path, "1\nx\n5\n")
    assert result.exit_code == 0
    assert "Error saving tasks" in result.output


def test_dispatch_invalid_choice(tmp_path: Path, capsys) -> None:
    menu = Menu(ChecklistStore(tmp_path / "checklist.txt"))
    menu.dispatch(None)
    menu.dispatch(6)
    assert capsys.readouterr().out.count("Invalid choice!") == 2
