from task_tracker.core.application.ports.task_repository_port import TaskRepositoryPort

__all__ = ["TaskRepositoryPort"]
