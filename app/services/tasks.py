# app/services/tasks.py
#
# Task store: the to-do list from the first prototype.

from typing import List, Optional

from sqlalchemy.orm import Session

from app.logging_setup import get_logger
from app.schemas import TaskCreate
from models import Task

logger = get_logger(__name__)


def list_tasks(db: Session) -> List[Task]:
    """All tasks in insertion order."""
    return db.query(Task).order_by(Task.record_id.asc()).all()


def create_task(db: Session, payload: TaskCreate) -> Task:
    task = Task(text=payload.text, is_completed=payload.is_completed)
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info(f"Added task #{task.record_id}")
    return task


def set_task_completed(db: Session, record_id: int, is_completed: bool = True) -> Optional[Task]:
    """Mark a task done (or not done). Returns None when the task doesn't exist."""
    task = db.get(Task, record_id)
    if task is None:
        return None
    task.is_completed = is_completed
    db.commit()
    db.refresh(task)
    return task
