from functools import lru_cache
import json
from pathlib import Path

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from planner.core.exceptions import ConfigurationError
from planner.schemas.grid import GridWindow


BACKEND_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    # Resolve to backend/.env so `uvicorn --app-dir backend` works from any cwd.
    model_config = SettingsConfigDict(
        env_file=str(BACKEND_ENV_FILE),
        env_file_encoding="utf-8",
        env_prefix="PLANNER_",
    )

    project_name: str = "Timetable Planner API"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    grid_start_hour: int = 9
    grid_end_hour: int = 18
    grid_slot_minutes: int = 60
    suggestion_max_results: int = 3

    max_request_size_bytes: int = 1_000_000

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                try:
                    parsed = json.loads(stripped)
                    if isinstance(parsed, list):
                        return [str(item).strip() for item in parsed if str(item).strip()]
                except json.JSONDecodeError:
                    pass
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    def default_grid(self) -> GridWindow:
        try:
            return GridWindow(
                start_hour=self.grid_start_hour,
                end_hour=self.grid_end_hour,
                slot_minutes=self.grid_slot_minutes,
            )
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid default grid window: {exc.errors()[0]['msg']}") from exc


@lru_cache
def get_settings() -> Settings:
    return Settings()
