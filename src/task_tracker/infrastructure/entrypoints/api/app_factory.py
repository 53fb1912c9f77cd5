from fastapi import FastAPI

from task_tracker.infrastructure.configuration.main_settings import Settings
from task_tracker.infrastructure.configuration.resolution.container import (
    AppContainer,
    build_container,
)
from task_tracker.infrastructure.entrypoints.api.error_handlers import register_error_handlers
from task_tracker.infrastructure.entrypoints.api.root_router import build_root_router
from task_tracker.infrastructure.entrypoints.api.task_router import build_task_router
from task_tracker.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from task_tracker.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)

logger = get_logger(__name__)


def create_app(settings: Settings, container: AppContainer | None = None) -> FastAPI:
    configure_logging(settings)
    container = container or build_container(settings)
    logger.info(
        "Starting application",
        app_name=settings.app_name,
        app_version=settings.app_version,
        app_env=settings.env,
    )

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.container = container

    register_error_handlers(app)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(build_root_router(settings))
    app.include_router(build_task_router(container.task_service))

    return app
