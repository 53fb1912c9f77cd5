from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App Config
    app_name: str = "Task Tracker API"
    app_version: str = "1.0.0"
    env: str = Field(default="local", validation_alias="APP_ENV")
    log_level: str = "INFO"
    log_format: str = Field(default="", description="json | console. Empty selects by environment.")

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Persistence
    database_url: str = Field(
        default="sqlite:///./runtime_data/tasks.db",
        description="SQLAlchemy URL of the task store",
    )
    database_echo: bool = False

    model_config = SettingsConfigDict(env_file=None, extra="ignore", populate_by_name=True)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
