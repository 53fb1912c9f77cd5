from abc import ABC, abstractmethod

from task_tracker.core.domain.task import Task, TaskStatus


class TaskRepositoryPort(ABC):
    @abstractmethod
    def find_all(self) -> list[Task]:
        """Returns every stored task in the store's default order."""

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task | None:
        pass

    @abstractmethod
    def find_by_status(self, status: TaskStatus) -> list[Task]:
        pass

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Inserts the task when it has no id, overwrites the stored row otherwise."""

    @abstractmethod
    def delete_by_id(self, task_id: int) -> None:
        pass
