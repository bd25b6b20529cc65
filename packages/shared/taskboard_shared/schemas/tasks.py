"""Task-related Pydantic schemas for shared use across server and frontend codegen.

Wire names are camelCase (``needsReview``, ``createdAt``) because the kanban
page reads them directly; Python code uses the snake_case attributes.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, StrictBool
from pydantic.alias_generators import to_camel

from .common import TaskPriority, TaskStatus


class BoardModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ---------------------------------------------------------------------------
# Task CRUD
# ---------------------------------------------------------------------------

class TaskBase(BoardModel):
    # Status and priority are free text here; the store normalizes them.
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    assignee: Optional[str] = None
    # Only a JSON true sets the flag; "yes", 1 and "true" are rejected
    needs_review: StrictBool = False


class TaskCreate(TaskBase):
    pass


class TaskUpdate(TaskBase):
    id: Optional[int] = None


class TaskRead(BoardModel):
    id: int
    title: str
    description: str = ""
    status: TaskStatus
    priority: TaskPriority
    assignee: str = ""
    created_at: str
    updated_at: str
    order: int
    needs_review: bool = False


class TaskCreated(BoardModel):
    id: int


class OkResult(BoardModel):
    ok: bool = True


# ---------------------------------------------------------------------------
# Single-field mutations
# ---------------------------------------------------------------------------

class TaskMove(BoardModel):
    """Request body for POST /tasks/{taskId}/move."""
    status: Optional[str] = None


class TaskMoveResult(OkResult):
    status: TaskStatus


class TaskAssign(BoardModel):
    """Request body for POST /tasks/{taskId}/assign."""
    name: Optional[str] = None


class TaskAssignResult(OkResult):
    assignee: str
    changed: bool


class ReviewFlagResult(OkResult):
    needs_review: bool


class ArchiveResult(BoardModel):
    count: int
