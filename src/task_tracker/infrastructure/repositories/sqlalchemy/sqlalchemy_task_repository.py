from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from task_tracker.core.application.ports.task_repository_port import TaskRepositoryPort
from task_tracker.core.domain.task import Task, TaskPriority, TaskStatus
from task_tracker.infrastructure.observability.logger_factory_service import get_logger
from task_tracker.infrastructure.repositories.sqlalchemy.task_record import TaskRecord

logger = get_logger(__name__)

# Integer primary keys are stored as signed 64-bit values
MIN_TASK_ID = -(2**63)
MAX_TASK_ID = 2**63 - 1


class SqlAlchemyTaskRepository(TaskRepositoryPort):
    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with self.session_factory() as session:
            try:
                yield session
                session.commit()
            except Exception as e:
                session.rollback()
                logger.error("Task store session error", error_type=type(e).__name__, error_details=str(e))
                raise

    def find_all(self) -> list[Task]:
        with self._session() as session:
            records = session.scalars(select(TaskRecord).order_by(TaskRecord.id)).all()
            return [self._to_domain(r) for r in records]

    def find_by_id(self, task_id: int) -> Task | None:
        with self._session() as session:
            record = session.get(TaskRecord, task_id) if _in_id_range(task_id) else None
            return self._to_domain(record) if record is not None else None

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        with self._session() as session:
            query = select(TaskRecord).where(TaskRecord.status == status.value).order_by(TaskRecord.id)
            return [self._to_domain(r) for r in session.scalars(query).all()]

    def save(self, task: Task) -> Task:
        with self._session() as session:
            record = session.get(TaskRecord, task.id) if task.id is not None else None
            if record is None:
                record = TaskRecord(id=task.id)
                session.add(record)
            record.title = task.title
            record.description = task.description
            record.status = task.status.value
            record.priority = task.priority.value
            session.flush()
            return self._to_domain(record)

    def delete_by_id(self, task_id: int) -> None:
        with self._session() as session:
            record = session.get(TaskRecord, task_id) if _in_id_range(task_id) else None
            if record is not None:
                session.delete(record)

    @staticmethod
    def _to_domain(record: TaskRecord) -> Task:
        return Task(
            id=record.id,
            title=record.title,
            description=record.description,
            status=TaskStatus(record.status),
            priority=TaskPriority(record.priority),
        )


def _in_id_range(task_id: int) -> bool:
    """Ids the store cannot represent can never match a row."""
    return MIN_TASK_ID <= task_id <= MAX_TASK_ID
