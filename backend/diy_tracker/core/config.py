from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "DIY Project Tracker"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    # Snapshot storage
    store_backend: Literal["file", "redis", "memory"] = "file"  # env: STORE_BACKEND
    store_path: str = "diy-project-store.json"  # env: STORE_PATH
    store_key: str = "diy-project-store"  # env: STORE_KEY (redis key)
    redis_url: str = "redis://localhost:6379"

    # Insert the two demo projects into an empty store on startup
    seed_demo_projects: bool = False  # env: SEED_DEMO_PROJECTS


@lru_cache
def get_settings() -> Settings:
    return Settings()
