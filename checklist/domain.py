from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Any
import json
import yaml


@dataclass
class Task:
    """A single checklist entry.

    No validation is applied: empty text, negative or duplicate ids are
    accepted as given. Uniqueness of ids is the store's business.
    """

    id: int
    text: str
    completed: bool = False

    def toggle_complete(self) -> None:
        self.completed = not self.completed

    def set_text(self, text: str) -> None:
        self.text = text

    def to_dict(self) -> dict:
        return {'id': self.id, 'completed': self.completed, 'text': self.text}


@dataclass
class Checklist:
    """Ordered collection of tasks, used for structured export."""

    tasks: List[Task] = field(default_factory=list)

    def to_dict(self) -> dict:
        data: dict[str, Any] = {'tasks': [t.to_dict() for t in self.tasks]}
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def to_yaml(self) -> str:
        return yaml.dump(self.to_dict(), sort_keys=False)
