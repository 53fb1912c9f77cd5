import pytest
from fastapi.testclient import TestClient

from task_tracker.core.domain.task import Task, TaskPriority, TaskStatus
from task_tracker.infrastructure.configuration.main_settings import Settings
from task_tracker.infrastructure.configuration.resolution.container import (
    build_container_with_repository,
)
from task_tracker.infrastructure.entrypoints.api.app_factory import create_app
from task_tracker.infrastructure.fakes.in_memory_task_repository import InMemoryTaskRepository


@pytest.fixture
def settings(tmp_path):
    return Settings(
        app_name="Task Tracker Test",
        app_version="9.9.9",
        database_url=f"sqlite:///{tmp_path / 'runtime_data' / 'tasks.db'}",
    )


@pytest.fixture
def client(settings):
    """Full stack client over a SQLite file in tmp_path."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def memory_repository():
    return InMemoryTaskRepository()


@pytest.fixture
def memory_client(settings, memory_repository):
    app = create_app(settings, build_container_with_repository(settings, memory_repository))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_task():
    return Task(
        title="Complete project",
        description="Wire the API",
        status=TaskStatus.TODO,
        priority=TaskPriority.HIGH,
    )
