"""Explicit dependency container, built once at process start."""

from dataclasses import dataclass

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from task_tracker.core.application.ports.task_repository_port import TaskRepositoryPort
from task_tracker.core.application.services.task_service import TaskService
from task_tracker.infrastructure.configuration.main_settings import Settings
from task_tracker.infrastructure.repositories.sqlalchemy import (
    SqlAlchemyTaskRepository,
    build_engine,
    build_session_factory,
    init_schema,
)


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    repository: TaskRepositoryPort
    task_service: TaskService
    engine: Engine | None = None
    session_factory: sessionmaker[Session] | None = None


def build_container(settings: Settings) -> AppContainer:
    engine = build_engine(settings)
    init_schema(engine)
    session_factory = build_session_factory(engine)
    repository = SqlAlchemyTaskRepository(session_factory)
    return AppContainer(
        settings=settings,
        repository=repository,
        task_service=TaskService(repository),
        engine=engine,
        session_factory=session_factory,
    )


def build_container_with_repository(settings: Settings, repository: TaskRepositoryPort) -> AppContainer:
    """Wire the service over an already-built store, e.g. a test double."""
    return AppContainer(settings=settings, repository=repository, task_service=TaskService(repository))
