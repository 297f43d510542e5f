"""Pure helpers shared by every listing route: paging, categories, links."""
from __future__ import annotations
import math
import re
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar
from urllib.parse import urlencode

from models import Task

PAGE_SIZE = 10
FILTER_KEYS: Tuple[str, ...] = ("q", "category", "status")
LEADING_INT_RE = re.compile(r"\s*[+-]?\d+")

T = TypeVar("T")


def paginate(items: Sequence[T], page: int) -> Tuple[List[T], int]:
    """Return (items on `page`, total page count).

    Pages are 1-based. A page outside 1..total_pages gives an empty
    slice rather than being clamped.
    """
    total_pages = max(1, math.ceil(len(items) / PAGE_SIZE))
    start = (page - 1) * PAGE_SIZE
    if start < 0:
        return [], total_pages
    return list(items[start:start + PAGE_SIZE]), total_pages


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Leading integer of a form/query value ("2abc" -> 2, "1.0" -> 1).

    None when the value is missing or does not start with digits.
    """
    if raw is None:
        return None
    match = LEADING_INT_RE.match(raw)
    return int(match.group(0)) if match else None


def parse_page(raw: Optional[str]) -> int:
    """Query-string page number; missing, zero or non-numeric -> 1."""
    return parse_int(raw) or 1


def get_categories(tasks: Iterable[Task]) -> List[str]:
    """Distinct categories in order of first appearance."""
    seen: dict[str, None] = {}
    for t in tasks:
        seen.setdefault(t.category, None)
    return list(seen)


def build_query(filters: Mapping[str, Optional[str]], sort_key: Optional[str], page: int) -> str:
    """Rebuild a listing query string: q, category, status, key, page."""
    params: List[Tuple[str, str]] = []
    for name in FILTER_KEYS:
        value = filters.get(name)
        if value:
            params.append((name, value))
    if sort_key:
        params.append(("key", sort_key))
    params.append(("page", str(page)))
    return urlencode(params)
