"""
Task operations - validation plus one load/modify/save cycle against the store.
Raises TaskValidationError / TaskNotFoundError; routes map them to 400 / 404.
"""

from typing import List, Optional
from utils.clock import utcnow
from .errors import TaskNotFoundError, TaskValidationError
from .models import STATUSES, Task
import logging

logger = logging.getLogger(__name__)

def _check_status(status, message="Invalid status"):
    if status not in STATUSES:
        raise TaskValidationError(message)

def _find(tasks, task_id):
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i, t
    raise TaskNotFoundError()

def _touch(task):
    # wall clock may step backwards; updated_at never precedes created_at
    task.updated_at = max(utcnow(), task.created_at)

def create_task(store, data: dict) -> Task:
    description = data.get("description")
    if not description or not isinstance(description, str):
        raise TaskValidationError("Description is required")

    status = data.get("status")
    if status is None:
        status = "todo"
    _check_status(status)

    now = utcnow()
    task = Task(description=description, status=status, created_at=now, updated_at=now)

    tasks = store.load()
    tasks.append(task)
    store.save(tasks)

    logger.info("Created task %s", task.to_json())
    return task

def list_tasks(store, status: Optional[str] = None) -> List[Task]:
    """All tasks in stored order, or only those whose status matches"""
    tasks = store.load()
    if not status:
        return tasks
    _check_status(status, "Invalid status filter")
    return [t for t in tasks if t.status == status]

def update_task(store, task_id: str, data: dict) -> Task:
    """
    Full update (PUT). description/status overwrite the stored values when
    present and non-empty; anything else in the body is ignored.
    """
    description = data.get("description")
    status = data.get("status")
    if description and not isinstance(description, str):
        raise TaskValidationError("Invalid description")
    if status:
        _check_status(status)

    tasks = store.load()
    _, task = _find(tasks, task_id)

    if description:
        task.description = description
    if status:
        task.status = status
    _touch(task)

    store.save(tasks)
    logger.info("Updated task %s", task.to_json())
    return task

def set_status(store, task_id: str, status) -> Task:
    # status is validated before the lookup: a bad status on an unknown id is a 400
    _check_status(status)

    tasks = store.load()
    _, task = _find(tasks, task_id)
    task.status = status
    _touch(task)

    store.save(tasks)
    logger.info("Patched task %s to status %s", task_id, status)
    return task

def delete_task(store, task_id: str) -> Task:
    tasks = store.load()
    i, task = _find(tasks, task_id)
    del tasks[i]
    store.save(tasks)
    logger.info("Deleted task %s", task_id)
    return task
