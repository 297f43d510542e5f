from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

_NAME_RE = re.compile(r'<span class="name">(.*?)</span>')


def task_entry(
    name: str,
    *,
    category: str = "Work",
    done: bool = False,
    due_date: str = "",
    completed_at: str | None = None,
) -> dict[str, Any]:
    """A task as it appears in the JSON file."""
    return {
        "task": name,
        "done": done,
        "category": category,
        "dueDate": due_date,
        "completedAt": completed_at,
    }


def listed_names(html: str) -> list[str]:
    """Task names in the order the listing page shows them."""
    return _NAME_RE.findall(html)


def read_saved(path: Path) -> list[dict[str, Any]]:
    return json.loads(path.read_text(encoding="utf-8"))
