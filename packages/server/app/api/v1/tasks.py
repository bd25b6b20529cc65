"""
Task endpoints: board listing, CRUD, drag-and-drop moves, assignment, archive.

Status columns: Backlog → In Progress → Review → Done → Historico
- Create, update, delete and archive require the X-Board-Password header.
- Move, assign and the review flag are open so drag and drop stays fast.
- Status and priority are free text on the way in and canonical on the way out.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_board_password
from app.core.config import Settings, get_settings
from app.core.database import get_session
from app.services.tasks import TaskStore
from taskboard_shared.schemas.tasks import (
    ArchiveResult,
    OkResult,
    ReviewFlagResult,
    TaskAssign,
    TaskAssignResult,
    TaskCreate,
    TaskCreated,
    TaskMove,
    TaskMoveResult,
    TaskRead,
    TaskUpdate,
)

router = APIRouter()


def get_task_store(
    session: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> TaskStore:
    return TaskStore(session, settings.board_config())


# ---------------------------------------------------------------------------
# Task CRUD
# ---------------------------------------------------------------------------


@router.get("/", response_model=List[TaskRead])
async def list_tasks_endpoint(store: TaskStore = Depends(get_task_store)):
    """List every task on the board in storage order."""
    return await store.list_tasks()


@router.post("/", response_model=TaskCreated, status_code=201)
async def create_task_endpoint(
    task_in: TaskCreate,
    password: Optional[str] = Depends(get_board_password),
    store: TaskStore = Depends(get_task_store),
):
    """Create a new task and return its id."""
    task_id = await store.create_task(task_in, password)
    await store.session.commit()
    return TaskCreated(id=task_id)


@router.post("/archive", response_model=ArchiveResult)
async def archive_completed_endpoint(
    password: Optional[str] = Depends(get_board_password),
    store: TaskStore = Depends(get_task_store),
):
    """Move every done task to Historico."""
    count = await store.archive_completed(password)
    await store.session.commit()
    return ArchiveResult(count=count)


@router.get("/{task_id}", response_model=TaskRead)
async def get_task_endpoint(task_id: int, store: TaskStore = Depends(get_task_store)):
    """Get a single task."""
    return await store.get_task(task_id)


@router.put("/{task_id}", response_model=OkResult)
async def update_task_endpoint(
    task_id: int,
    task_in: TaskUpdate,
    password: Optional[str] = Depends(get_board_password),
    store: TaskStore = Depends(get_task_store),
):
    """Overwrite a task's editable fields."""
    await store.update_task(task_in.model_copy(update={"id": task_id}), password)
    await store.session.commit()
    return OkResult()


@router.delete("/{task_id}", response_model=OkResult)
async def delete_task_endpoint(
    task_id: int,
    password: Optional[str] = Depends(get_board_password),
    store: TaskStore = Depends(get_task_store),
):
    """Permanently delete a task."""
    await store.delete_task(task_id, password)
    await store.session.commit()
    return OkResult()


# ---------------------------------------------------------------------------
# Drag and drop
# ---------------------------------------------------------------------------


@router.post("/{task_id}/move", response_model=TaskMoveResult)
async def move_task_endpoint(
    task_id: int,
    body: TaskMove,
    store: TaskStore = Depends(get_task_store),
):
    """Change only the status of a task."""
    status = await store.move_status(task_id, body.status)
    await store.session.commit()
    return TaskMoveResult(status=status)


@router.post("/{task_id}/assign", response_model=TaskAssignResult)
async def assign_task_endpoint(
    task_id: int,
    body: TaskAssign,
    store: TaskStore = Depends(get_task_store),
):
    """Add a person to the task's assignees."""
    assignee, changed = await store.assign(task_id, body.name)
    await store.session.commit()
    return TaskAssignResult(assignee=assignee, changed=changed)


@router.post("/{task_id}/review-flag", response_model=ReviewFlagResult)
async def toggle_review_flag_endpoint(
    task_id: int,
    store: TaskStore = Depends(get_task_store),
):
    """Flip the task's needs-review flag."""
    needs_review = await store.toggle_review_flag(task_id)
    await store.session.commit()
    return ReviewFlagResult(needs_review=needs_review)
