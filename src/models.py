"""Data models for the web to-do list.

Only exposes the Task dataclass. Field names are snake_case in Python;
the persisted JSON keeps the camelCase keys ("dueDate", "completedAt")
so existing data files stay readable.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional

UNCATEGORIZED = "Uncategorized"


@dataclass
class Task:
    """A single to-do entry.

    Fields:
        task: Single-line name, never empty once stored.
        done: Completion flag.
        category: Free-form label ("Uncategorized" when none was given).
        due_date: "YYYY-MM-DD" or empty string (not validated).
        completed_at: "YYYY-MM-DD" while done, None otherwise.
    """
    task: str
    done: bool = False
    category: str = UNCATEGORIZED
    due_date: str = ""
    completed_at: Optional[str] = None

    def toggle(self) -> None:
        """Flip done; stamp today on completion, clear on reopen."""
        self.done = not self.done
        self.completed_at = date.today().isoformat() if self.done else None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        return cls(
            task=str(raw.get("task") or ""),
            done=bool(raw.get("done", False)),
            category=raw.get("category", UNCATEGORIZED),
            due_date=raw.get("dueDate") or "",
            completed_at=raw.get("completedAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "task": self.task,
            "done": self.done,
            "category": self.category,
            "dueDate": self.due_date,
            "completedAt": self.completed_at,
        }

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(task={self.task}, category={self.category}, done={self.done})"
