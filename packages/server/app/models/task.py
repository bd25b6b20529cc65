"""Task model."""

from typing import Optional

from sqlmodel import Field, SQLModel

from .base import TimestampMixin


class Task(TimestampMixin, SQLModel, table=True):
    __tablename__ = "tasks"

    # Assigned by the store, never by the database
    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        sa_column_kwargs={"autoincrement": False},
    )
    title: str = Field(nullable=False)
    description: str = Field(default="", nullable=False)
    status: str = Field(nullable=False, default="Backlog")  # Backlog | In Progress | Review | Done | Historico
    priority: str = Field(nullable=False, default="Medium")  # Low | Medium | High
    assignee: str = Field(default="", nullable=False)  # comma-separated names
    order: Optional[int] = Field(default=1)
    needs_review: bool = Field(default=False, nullable=False)


class IdSequence(SQLModel, table=True):
    """Highest identifier ever issued per table, so deleted ids stay retired."""

    __tablename__ = "id_sequences"

    name: str = Field(primary_key=True)
    last_value: int = Field(default=0, nullable=False)
