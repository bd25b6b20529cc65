"""
Shared-secret check for the board's write operations.

The board uses a single static password sent in the ``X-Board-Password``
header. It is compared for exact equality; it is not a token, it is not
hashed and it is never rotated.
"""

from __future__ import annotations

import secrets
from typing import Optional

import structlog
from fastapi import Security
from fastapi.security import APIKeyHeader

from app.core.config import BoardConfig
from app.core.errors import AuthorizationError

log = structlog.get_logger()

PASSWORD_HEADER = "X-Board-Password"

board_password_header = APIKeyHeader(name=PASSWORD_HEADER, auto_error=False)


def check_password(config: BoardConfig, credential: Optional[str]) -> None:
    """Raise AuthorizationError unless ``credential`` equals the board password."""
    if credential is None or not secrets.compare_digest(
        credential.encode(), config.password.encode()
    ):
        log.warning("auth.password_rejected", supplied=credential is not None)
        raise AuthorizationError("Incorrect password.")


async def get_board_password(
    credential: Optional[str] = Security(board_password_header),
) -> Optional[str]:
    """FastAPI dependency: the raw password header, checked later by the store."""
    return credential
