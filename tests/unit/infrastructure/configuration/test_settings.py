from task_tracker.infrastructure.configuration.main_settings import Settings
from task_tracker.infrastructure.configuration.resolution.container import build_container


def test_defaults(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)

    settings = Settings()

    assert settings.app_name == "Task Tracker API"
    assert settings.env == "local"
    assert settings.database_url == "sqlite:///./runtime_data/tasks.db"
    assert settings.is_sqlite


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://tasks@db/tasks")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.env == "prod"
    assert settings.log_level == "DEBUG"
    assert not settings.is_sqlite


def test_build_container_creates_schema(settings):
    container = build_container(settings)

    assert container.task_service.repository is container.repository
    assert container.repository.find_all() == []
    container.engine.dispose()
