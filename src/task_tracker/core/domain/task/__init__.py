from task_tracker.core.domain.task.task import TITLE_MAX_LENGTH, TITLE_MIN_LENGTH, Task, TaskPatch
from task_tracker.core.domain.task.value_objects import TaskPriority, TaskStatus

__all__ = [
    "TITLE_MAX_LENGTH",
    "TITLE_MIN_LENGTH",
    "Task",
    "TaskPatch",
    "TaskPriority",
    "TaskStatus",
]
