from dataclasses import replace
from itertools import count

from task_tracker.core.application.ports.task_repository_port import TaskRepositoryPort
from task_tracker.core.domain.task import Task, TaskStatus


class InMemoryTaskRepository(TaskRepositoryPort):
    """Dict-backed task store. Returns copies so callers cannot mutate stored rows."""

    def __init__(self) -> None:
        self._rows: dict[int, Task] = {}
        self._ids = count(1)

    def find_all(self) -> list[Task]:
        return [replace(t) for _, t in sorted(self._rows.items())]

    def find_by_id(self, task_id: int) -> Task | None:
        task = self._rows.get(task_id)
        return replace(task) if task is not None else None

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self.find_all() if t.status == status]

    def save(self, task: Task) -> Task:
        stored = replace(task, id=task.id if task.id is not None else next(self._ids))
        self._rows[stored.id] = stored
        return replace(stored)

    def delete_by_id(self, task_id: int) -> None:
        self._rows.pop(task_id, None)
