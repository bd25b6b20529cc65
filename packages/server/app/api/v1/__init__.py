"""
API v1 Router

Task endpoints live under /tasks.
"""

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from taskboard_shared.schemas.common import STATUS_ORDER
from . import tasks

router = APIRouter()

router.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])


@router.get("/", tags=["API"])
async def api_root(settings: Settings = Depends(get_settings)):
    """API root — returns version, board title, board columns and available endpoints."""
    return {
        "api": "v1",
        "version": "0.1.0",
        "board": settings.board_title,
        "columns": [status.value for status in STATUS_ORDER],
        "endpoints": [
            "/tasks",
            "/tasks/archive",
            "/tasks/{taskId}",
            "/tasks/{taskId}/move",
            "/tasks/{taskId}/assign",
            "/tasks/{taskId}/review-flag",
        ],
    }
