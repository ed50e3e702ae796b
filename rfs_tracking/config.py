from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    database_url: str = "sqlite+aiosqlite:///./rfs_tracking.db"
    app_name: str = "RFS Tracking API"
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = False
    top_scenarios_limit: int = Field(default=10, ge=1, le=10)
    create_tables: bool = True  # skip when the schema is managed by alembic
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()
