"""
Application configuration loaded from environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class BoardConfig(BaseModel):
    """Per-board settings handed to the task store at construction."""

    password: str
    title: str = "Task Board"


class Settings(BaseSettings):
    """Task board server configuration."""

    model_config = SettingsConfigDict(env_prefix="TASKBOARD_", env_file=".env", extra="ignore")

    # Database
    database_url: str = "sqlite+aiosqlite:///./taskboard.db"

    # Board
    board_password: str = "CHANGE_ME_IN_PRODUCTION"
    board_title: str = "Task Board"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Logging
    log_level: str = "info"
    log_format: Literal["json", "text"] = "json"

    def board_config(self) -> BoardConfig:
        return BoardConfig(password=self.board_password, title=self.board_title)


@lru_cache
def get_settings() -> Settings:
    return Settings()
