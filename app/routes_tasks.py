# routes_tasks.py
"""
To-do task endpoints (list, add, mark completed).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.auth import AuthSession, require_session
from app.deps import get_db
from app.schemas import TaskCreate, TaskRead
from app.services import tasks as task_service

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskRead])
def list_tasks(
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_session),
):
    return task_service.list_tasks(db)


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def add_task(
    payload: TaskCreate,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_session),
):
    return task_service.create_task(db, payload)


@router.post("/{record_id}/complete", response_model=TaskRead)
def complete_task(
    record_id: int,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_session),
):
    task = task_service.set_task_completed(db, record_id, True)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task
