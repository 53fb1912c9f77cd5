from __future__ import annotations

from dataclasses import dataclass, fields, replace

from task_tracker.core.domain.task.value_objects.task_priority import TaskPriority
from task_tracker.core.domain.task.value_objects.task_status import TaskStatus

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100


@dataclass
class TaskPatch:
    """Partial task used by updates. Fields left as None keep their stored value."""

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None

    def changes(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class Task:
    title: str
    status: TaskStatus
    priority: TaskPriority
    description: str | None = None
    id: int | None = None

    def validation_errors(self) -> list[str]:
        """
        Returns the constraint violations of this task, in field order.
        An empty list means the task may be persisted.
        """
        errors: list[str] = []
        title = self.title or ""
        if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
            errors.append(
                f"title: Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
            )
        if not isinstance(self.status, TaskStatus):
            allowed = ", ".join(s.value for s in TaskStatus)
            errors.append(f"status: Status must be one of {allowed}")
        if not isinstance(self.priority, TaskPriority):
            allowed = ", ".join(p.value for p in TaskPriority)
            errors.append(f"priority: Priority must be one of {allowed}")
        return errors

    def apply(self, patch: TaskPatch) -> Task:
        """Returns a copy with the patch's fields overwritten. The id is never touched."""
        return replace(self, **patch.changes())
