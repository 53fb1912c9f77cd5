from task_tracker.core.domain.task.value_objects.task_priority import TaskPriority
from task_tracker.core.domain.task.value_objects.task_status import TaskStatus

__all__ = ["TaskPriority", "TaskStatus"]
