from dataclasses import replace

import structlog

from task_tracker.core.application.ports.task_repository_port import TaskRepositoryPort
from task_tracker.core.domain.exceptions import TaskNotFoundError, ValidationFailedError
from task_tracker.core.domain.task import Task, TaskPatch, TaskStatus

logger = structlog.get_logger()


class TaskService:
    """Orchestrates the task store. Failures are raised, never suppressed."""

    def __init__(self, repository: TaskRepositoryPort):
        self.repository = repository

    def list_all(self) -> list[Task]:
        tasks = self.repository.find_all()
        logger.debug("Listed tasks", task_count=len(tasks))
        return tasks

    def list_by_status(self, status: TaskStatus) -> list[Task]:
        return self.repository.find_by_status(status)

    def get(self, task_id: int) -> Task:
        return self._require(task_id)

    def create(self, task: Task) -> Task:
        self._validate(task)
        created = self.repository.save(replace(task, id=None))
        logger.info("Task created", task_id=created.id, task_status=created.status.value)
        return created

    def update(self, task_id: int, patch: TaskPatch) -> Task:
        existing = self._require(task_id)
        candidate = existing.apply(patch)
        self._validate(candidate)
        updated = self.repository.save(candidate)
        logger.info("Task updated", task_id=task_id, changed_fields=sorted(patch.changes()))
        return updated

    def delete(self, task_id: int) -> None:
        self._require(task_id)
        self.repository.delete_by_id(task_id)
        logger.info("Task deleted", task_id=task_id)

    def _require(self, task_id: int) -> Task:
        task = self.repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    @staticmethod
    def _validate(task: Task) -> None:
        errors = task.validation_errors()
        if errors:
            raise ValidationFailedError(errors)
