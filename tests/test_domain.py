import json

import yaml

from checklist.domain import Task, Checklist


def test_new_task_is_open():
    task = Task(id=1, text="Buy milk")
    assert task.completed is False


def test_toggle_flips_back_and_forth():
    task = Task(id=1, text="Buy milk")
    task.toggle_complete()
    assert task.completed is True
    task.toggle_complete()
    assert task.completed is False


def test_set_text_replaces_text():
    task = Task(id=1, text="Buy milk")
    task.set_text("Buy oat milk")
    assert task.text == "Buy oat milk"


def test_no_validation_on_fields():
    task = Task(id=-3, text="")
    assert task.id == -3
    assert task.text == ""


def test_checklist_json_yaml():
    checklist = Checklist(tasks=[Task(1, "Buy milk"), Task(2, "Finish report", True)])
    expected = {
        "tasks": [
            {"id": 1, "completed": False, "text": "Buy milk"},
            {"id": 2, "completed": True, "text": "Finish report"},
        ]
    }
    assert json.loads(checklist.to_json()) == expected
    assert yaml.safe_load(checklist.to_yaml()) == expected


def test_empty_checklist():
    assert Checklist().to_dict() == {"tasks": []}
