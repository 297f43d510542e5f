"""HTTP routes for the to-do list.

Listing routes render index.html with one page of (index, task) pairs.
Mutating routes persist the whole list and redirect home. A rejected
add/update sets the app-wide error message; the next home page render
shows it once and clears it, whichever client asks.
"""
import logging
from typing import Dict, List, Optional, Tuple

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from models import Task
from queries import build_query, paginate, parse_int, parse_page
from storage import Storage
from todo_list import Entry, TodoList, clean_category, clean_line

logger = logging.getLogger(__name__)

todos_bp = Blueprint('todos', __name__)

TASK_REQUIRED = 'Task name is required.'


def _todos() -> TodoList:
    return current_app.extensions['todo_list']


def _persist() -> None:
    storage: Storage = current_app.extensions['todo_storage']
    storage.save_tasks(_todos().to_dicts())


def _read_task_form() -> Tuple[str, str, str]:
    """(name, category, due date) from the submitted form, sanitized."""
    name = clean_line(request.form.get('task', ''))
    category = clean_category(request.form.get('category'))
    due_date = request.form.get('dueDate') or ''
    return name, category, due_date


def _home():
    return redirect(url_for('todos.index'))


def _reject():
    logger.info("Rejected %s: empty task name", request.path)
    current_app.extensions['todo_error'] = TASK_REQUIRED
    return _home()


def _render_listing(entries: List[Entry], filters: Dict[str, Optional[str]],
                    error_message: Optional[str] = None):
    page = parse_page(request.args.get('page'))
    paged, total_pages = paginate(entries, page)
    return render_template(
        'index.html',
        todos=paged,
        error_message=error_message,
        categories=_todos().categories(),
        # the listing links never carry a sort key, /sort included
        sort_key=None,
        current_page=page,
        total_pages=total_pages,
        filters=filters,
        build_query=build_query,
    )


# -------------------- listing --------------------
@todos_bp.route('/')
def index():
    error_message = current_app.extensions.get('todo_error')
    response = _render_listing(_todos().entries(), {}, error_message=error_message)
    current_app.extensions['todo_error'] = None
    return response


@todos_bp.route('/search')
def search():
    keyword = request.args.get('q', '')
    return _render_listing(_todos().search(keyword), {'q': keyword})


@todos_bp.route('/filter')
def filter_tasks():
    category = request.args.get('category')
    status = request.args.get('status')
    return _render_listing(_todos().filter(category, status), {'category': category, 'status': status})


@todos_bp.route('/sort')
def sort_tasks():
    return _render_listing(_todos().sort(request.args.get('key')), {})


# -------------------- mutations --------------------
@todos_bp.route('/add', methods=['POST'])
def add():
    name, category, due_date = _read_task_form()
    if not name:
        return _reject()
    index = _todos().add(Task(task=name, category=category, due_date=due_date))
    _persist()
    logger.info("Added task #%d %r (%s)", index, name, category)
    return _home()


@todos_bp.route('/toggle', methods=['POST'])
def toggle():
    index = parse_int(request.form.get('index'))
    if _todos().toggle(index):
        _persist()
    return _home()


@todos_bp.route('/delete', methods=['POST'])
def delete():
    index = parse_int(request.form.get('index'))
    if _todos().remove(index):
        _persist()
        logger.info("Deleted task #%d", index)
    return _home()


@todos_bp.route('/edit/<index>')
def edit(index: str):
    position = parse_int(index)
    todo = _todos().get(position)
    if todo is None:
        return _home()
    return render_template('edit.html', todo=todo, index=position)


@todos_bp.route('/update/<index>', methods=['POST'])
def update(index: str):
    name, category, due_date = _read_task_form()
    if not name:
        return _reject()
    # unguarded: an unknown or unparsable index raises IndexError
    position = parse_int(index)
    _todos().update(position, name, category, due_date)
    _persist()
    logger.info("Updated task #%d", position)
    return _home()
