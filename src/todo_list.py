"""In-memory task list: loading, positional mutations, listing queries.

Tasks are addressed by their position in the list; deleting a task
shifts every later task down by one. Query methods return
(index, task) pairs so views can link back to the absolute position
even when showing a filtered or re-ordered page.
"""
import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from models import Task, UNCATEGORIZED
from queries import get_categories

logger = logging.getLogger(__name__)

Entry = Tuple[int, Task]

LINE_BREAK_RE = re.compile(r"\r?\n")

SORT_KEYS: Dict[str, Callable[[Task], str]] = {
    'category': lambda t: t.category or '',
    'dueDate': lambda t: t.due_date or '',
    'completedAt': lambda t: t.completed_at or '',
}
STATUS_FILTERS: Dict[str, Callable[[Task], bool]] = {
    'done': lambda t: t.done,
    'undone': lambda t: not t.done,
}


def clean_line(value: str) -> str:
    """Drop line breaks, then trim surrounding whitespace."""
    return LINE_BREAK_RE.sub('', value).strip()


def clean_category(value: Optional[str]) -> str:
    return clean_line(value or UNCATEGORIZED)


class TodoList:
    def __init__(self, entries: Optional[Iterable[Mapping[str, Any]]] = None):
        self.tasks: List[Task] = []
        if entries:
            self.tasks = [Task.from_dict(raw) for raw in entries]

    def __len__(self) -> int:
        return len(self.tasks)

    # -------------------- lookup --------------------
    def _in_range(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self.tasks)

    def get(self, index: Optional[int]) -> Optional[Task]:
        return self.tasks[index] if self._in_range(index) else None

    def entries(self) -> List[Entry]:
        return list(enumerate(self.tasks))

    def categories(self) -> List[str]:
        return get_categories(self.tasks)

    # -------------------- task operations --------------------
    def add(self, task: Task) -> int:
        task.done = False
        task.completed_at = None
        self.tasks.append(task)
        return len(self.tasks) - 1

    def toggle(self, index: Optional[int]) -> bool:
        """Flip completion of the task at index; False if there is none."""
        task = self.get(index)
        if task is None:
            logger.debug("toggle ignored, no task at index %s", index)
            return False
        task.toggle()
        return True

    def remove(self, index: Optional[int]) -> bool:
        if not self._in_range(index):
            logger.debug("remove ignored, no task at index %s", index)
            return False
        del self.tasks[index]
        return True

    def update(self, index: Optional[int], name: str, category: str, due_date: str) -> None:
        """Replace name/category/due date in place.

        Unlike toggle/remove this is not a no-op for an unknown index:
        it raises IndexError (negative or missing positions included). done and
        completed_at are left alone.
        """
        if index is None or index < 0:
            raise IndexError(f'task index out of range: {index}')
        task = self.tasks[index]
        task.task = name
        task.category = category
        task.due_date = due_date

    # -------------------- queries --------------------
    def search(self, keyword: str) -> List[Entry]:
        """Case-sensitive substring match on the task name."""
        return [(i, t) for i, t in enumerate(self.tasks) if keyword in t.task]

    def filter(self, category: Optional[str] = None, status: Optional[str] = None) -> List[Entry]:
        match_status = STATUS_FILTERS.get(status or '', lambda t: True)
        return [
            (i, t) for i, t in enumerate(self.tasks)
            if (not category or t.category == category) and match_status(t)
        ]

    def sort(self, key: Optional[str]) -> List[Entry]:
        """Stable ascending sort; unknown keys keep list order."""
        entries = self.entries()
        sort_key = SORT_KEYS.get(key or '')
        if sort_key is None:
            return entries
        return sorted(entries, key=lambda e: sort_key(e[1]))

    # -------------------- serialization --------------------
    def to_dicts(self) -> List[Dict[str, Any]]:
        return [t.to_dict() for t in self.tasks]

    def __str__(self) -> str:
        done = sum(1 for t in self.tasks if t.done)
        return f'{len(self.tasks)} tasks, {done} done'
