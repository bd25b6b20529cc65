"""Canonical board enumerations and the free-text normalizers that feed them."""

import re
from enum import Enum
from typing import Optional


class TaskStatus(str, Enum):
    BACKLOG = "Backlog"
    IN_PROGRESS = "In Progress"
    REVIEW = "Review"
    DONE = "Done"
    HISTORICO = "Historico"


class TaskPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Display order of the board columns
STATUS_ORDER: list["TaskStatus"] = [
    TaskStatus.BACKLOG,
    TaskStatus.IN_PROGRESS,
    TaskStatus.REVIEW,
    TaskStatus.DONE,
    TaskStatus.HISTORICO,
]

DEFAULT_STATUS = TaskStatus.BACKLOG
DEFAULT_PRIORITY = TaskPriority.MEDIUM


# ---------------------------------------------------------------------------
# Synonym tables (English / Spanish), keyed by lowercase-trimmed text
# ---------------------------------------------------------------------------

_STATUS_SYNONYMS: dict[TaskStatus, tuple[str, ...]] = {
    TaskStatus.BACKLOG: ("backlog", "pendiente", "por hacer", "todo", "to do"),
    TaskStatus.IN_PROGRESS: (
        "in progress", "in-progress", "doing",
        "progreso", "en curso", "haciendo",
    ),
    TaskStatus.REVIEW: ("review", "in review", "revisión", "revision"),
    TaskStatus.DONE: (
        "done", "completed", "complete", "finished",
        "hecho", "finalizado", "terminado", "completo", "completado",
    ),
    TaskStatus.HISTORICO: (
        "historico", "histórico", "almacen", "almacén", "archive", "archived",
    ),
}

_PRIORITY_SYNONYMS: dict[TaskPriority, tuple[str, ...]] = {
    TaskPriority.LOW: ("low", "baja"),
    TaskPriority.MEDIUM: ("medium", "media"),
    TaskPriority.HIGH: ("high", "alta"),
}

STATUS_LOOKUP: dict[str, TaskStatus] = {
    key: status for status, keys in _STATUS_SYNONYMS.items() for key in keys
}
PRIORITY_LOOKUP: dict[str, TaskPriority] = {
    key: priority for priority, keys in _PRIORITY_SYNONYMS.items() for key in keys
}

# Done words that still count when decorated ("Hecho ✅", "done (ok)")
_DONE_WORD = re.compile(r"\b(?:done|hecho)\b", re.IGNORECASE)


def _text(value: Optional[object]) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _key(value: Optional[object]) -> str:
    return " ".join(_text(value).split()).lower()


def normalize_status(value: Optional[object]) -> TaskStatus:
    """Map free text to a canonical status; unknown input becomes Backlog."""
    if isinstance(value, TaskStatus):
        return value
    return STATUS_LOOKUP.get(_key(value), DEFAULT_STATUS)


def normalize_priority(value: Optional[object]) -> TaskPriority:
    """Map free text to a canonical priority; unknown input becomes Medium."""
    if isinstance(value, TaskPriority):
        return value
    return PRIORITY_LOOKUP.get(_key(value), DEFAULT_PRIORITY)


def is_done_status(value: Optional[object]) -> bool:
    """Whether a stored status means "done", tolerating decoration around it.

    Exact synonyms go through the lookup table first; otherwise only the
    words "done" and "hecho" count when decorated, so "not finished" stays
    open. Historico never matches.
    """
    text = _text(value).strip()
    if not text:
        return False
    if STATUS_LOOKUP.get(_key(text)) == TaskStatus.DONE:
        return True
    return _DONE_WORD.search(text) is not None

