"""Persistence helpers (load/save) for the to-do list.

The whole list is stored as one pretty-printed JSON array and overwritten
in place on every mutation.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = Path('todos.json')

TaskEntry = Dict[str, Any]


class Storage:
    def __init__(self, path: Union[str, Path] = DEFAULT_TASKS_FILE):
        self.path = Path(path)

    def load_tasks(self) -> List[TaskEntry]:
        """Load the task list from disk.

        Missing or blank file -> empty list. Malformed JSON raises
        json.JSONDecodeError; a document that is not an array raises
        ValueError. Both are meant to abort startup.
        """
        if not self.path.exists():
            logger.info("No task file at %s; starting empty", self.path)
            return []
        raw = self.path.read_text(encoding='utf-8')
        if not raw.strip():
            return []
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"{self.path}: expected a JSON array of tasks, got {type(data).__name__}")
        logger.info("Loaded %d tasks from %s", len(data), self.path)
        return data

    def save_tasks(self, tasks: List[TaskEntry]) -> None:
        """Persist the full list (2-space indent, UTF-8). Errors propagate."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(tasks, f, indent=2, ensure_ascii=False)
        logger.debug("Saved %d tasks to %s", len(tasks), self.path)
