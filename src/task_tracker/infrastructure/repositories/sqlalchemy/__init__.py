from task_tracker.infrastructure.repositories.sqlalchemy.database import (
    build_engine,
    build_session_factory,
    init_schema,
)
from task_tracker.infrastructure.repositories.sqlalchemy.sqlalchemy_task_repository import (
    SqlAlchemyTaskRepository,
)
from task_tracker.infrastructure.repositories.sqlalchemy.task_record import Base, TaskRecord

__all__ = [
    "Base",
    "SqlAlchemyTaskRepository",
    "TaskRecord",
    "build_engine",
    "build_session_factory",
    "init_schema",
]
