"""
Task service layer: the board's task store.

Handles:
- Listing tasks in storage order with read-time coercion
- Create/update/delete gated by the shared board password
- Drag-and-drop status moves, assignment and review flag (no password)
- Bulk archive of done tasks to Historico
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import structlog
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.auth import check_password
from app.core.config import BoardConfig
from app.core.errors import NotFoundError, StoreUnavailableError, ValidationError
from app.models.base import next_timestamp
from app.models.task import IdSequence, Task
from taskboard_shared.schemas.common import (
    TaskStatus,
    is_done_status,
    normalize_priority,
    normalize_status,
)
from taskboard_shared.schemas.tasks import TaskCreate, TaskRead, TaskUpdate

log = structlog.get_logger()

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

# Largest id a SQL INTEGER column can hold
MAX_TASK_ID = 2**63 - 1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def format_timestamp(value: Optional[datetime]) -> str:
    """Fixed-width UTC timestamp, so string order matches time order."""
    if value is None:
        return ""
    return value.strftime(TIMESTAMP_FORMAT)


def split_assignees(assignee: Optional[str]) -> list[str]:
    return [name.strip() for name in (assignee or "").split(",") if name.strip()]


def to_task_read(task: Task, position: int) -> TaskRead:
    """Convert a Task row to its wire shape; ``position`` is 1-based."""
    return TaskRead(
        id=task.id,
        title=task.title,
        description=task.description or "",
        status=normalize_status(task.status),
        priority=normalize_priority(task.priority),
        assignee=task.assignee or "",
        created_at=format_timestamp(task.created_at),
        updated_at=format_timestamp(task.updated_at),
        order=task.order or position,
        needs_review=task.needs_review is True,
    )


def _touch(task: Task) -> None:
    task.updated_at = next_timestamp(task.updated_at)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class TaskStore:
    """Task record access for one board.

    Lookups go by primary key. Each operation flushes its own writes; the
    caller owns the transaction and commits it.
    """

    SEQUENCE_NAME = "tasks"

    def __init__(self, session: AsyncSession, config: BoardConfig):
        self.session = session
        self.config = config
        self.log = log.bind(board=config.title)

    async def _get_or_404(self, task_id: Optional[int]) -> Task:
        if not task_id:
            raise ValidationError("Task id is required.")
        if task_id < 1 or task_id > MAX_TASK_ID:
            raise NotFoundError("Task not found.")
        task = await self.session.get(Task, task_id)
        if task is None:
            raise NotFoundError("Task not found.")
        return task

    async def _next_id(self) -> int:
        max_id = await self.session.scalar(select(func.max(Task.id)))
        sequence = await self.session.get(IdSequence, self.SEQUENCE_NAME)
        if sequence is None:
            sequence = IdSequence(name=self.SEQUENCE_NAME, last_value=0)
        next_id = max(max_id or 0, sequence.last_value) + 1
        sequence.last_value = next_id
        self.session.add(sequence)
        return next_id

    # --- Reads ---

    async def list_tasks(self) -> list[TaskRead]:
        try:
            result = await self.session.execute(select(Task).order_by(Task.id))
            tasks = list(result.scalars().all())
        except SQLAlchemyError:
            self.log.exception("task.list_failed")
            raise StoreUnavailableError("Could not load tasks.")

        return [
            to_task_read(task, position)
            for position, task in enumerate(tasks, start=1)
            if task.id
        ]

    async def get_task(self, task_id: Optional[int]) -> TaskRead:
        task = await self._get_or_404(task_id)
        position = await self.session.scalar(
            select(func.count()).select_from(Task).where(Task.id <= task.id)
        )
        return to_task_read(task, position or 1)

    # --- Password-gated writes ---

    async def create_task(self, task_in: TaskCreate, credential: Optional[str]) -> int:
        check_password(self.config, credential)
        if not (task_in.title or "").strip():
            raise ValidationError("Title is required.")

        now = next_timestamp()
        task = Task(
            id=await self._next_id(),
            title=task_in.title,
            description=task_in.description or "",
            status=normalize_status(task_in.status).value,
            priority=normalize_priority(task_in.priority).value,
            assignee=task_in.assignee or "",
            created_at=now,
            updated_at=now,
            order=1,
            needs_review=task_in.needs_review is True,
        )
        self.session.add(task)
        await self.session.flush()

        self.log.info("task.created", task_id=task.id, status=task.status, priority=task.priority)
        return task.id

    async def update_task(self, task_in: TaskUpdate, credential: Optional[str]) -> Task:
        check_password(self.config, credential)
        task = await self._get_or_404(task_in.id)
        if not (task_in.title or "").strip():
            raise ValidationError("Title is required.")

        task.title = task_in.title
        task.description = task_in.description or ""
        task.status = normalize_status(task_in.status).value
        task.priority = normalize_priority(task_in.priority).value
        task.assignee = task_in.assignee or ""
        task.needs_review = task_in.needs_review is True
        _touch(task)

        self.session.add(task)
        await self.session.flush()
        self.log.info("task.updated", task_id=task.id, status=task.status)
        return task

    async def delete_task(self, task_id: Optional[int], credential: Optional[str]) -> None:
        check_password(self.config, credential)
        task = await self._get_or_404(task_id)
        await self.session.delete(task)
        await self.session.flush()
        self.log.info("task.deleted", task_id=task_id)

    async def archive_completed(self, credential: Optional[str]) -> int:
        """Move every done task to Historico and clear its review flag."""
        check_password(self.config, credential)
        result = await self.session.execute(select(Task).order_by(Task.id))

        count = 0
        for task in result.scalars().all():
            if not is_done_status(task.status):
                continue
            task.status = TaskStatus.HISTORICO.value
            task.needs_review = False
            _touch(task)
            self.session.add(task)
            count += 1

        await self.session.flush()
        self.log.info("task.archived", count=count)
        return count

    # --- Open writes (no password, used by drag and drop) ---

    async def move_status(self, task_id: Optional[int], new_status: Optional[str]) -> TaskStatus:
        task = await self._get_or_404(task_id)
        status = normalize_status(new_status)
        old_status = task.status

        task.status = status.value
        _touch(task)
        self.session.add(task)
        await self.session.flush()

        self.log.info("task.moved", task_id=task.id, from_status=old_status, to_status=status.value)
        return status

    async def assign(self, task_id: Optional[int], name: Optional[str]) -> tuple[str, bool]:
        """Add ``name`` to the task's assignees. Returns (assignee, changed)."""
        task = await self._get_or_404(task_id)
        name = (name or "").strip()
        if not name:
            raise ValidationError("Assignee name is required.")

        names = split_assignees(task.assignee)
        if name in names:
            return task.assignee, False

        names.append(name)
        task.assignee = ", ".join(names)
        _touch(task)
        self.session.add(task)
        await self.session.flush()

        self.log.info("task.assigned", task_id=task.id, assignee=name)
        return task.assignee, True

    async def toggle_review_flag(self, task_id: Optional[int]) -> bool:
        task = await self._get_or_404(task_id)
        task.needs_review = not task.needs_review
        _touch(task)
        self.session.add(task)
        await self.session.flush()

        self.log.info("task.review_flag", task_id=task.id, needs_review=task.needs_review)
        return task.needs_review
