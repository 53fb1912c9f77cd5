from task_tracker.infrastructure.configuration.main_settings import Settings

__all__ = ["Settings"]
