from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from task_tracker.infrastructure.configuration.main_settings import Settings

TASK_ENDPOINTS = {
    "GET /api/tasks": "Get all tasks",
    "GET /api/tasks/{id}": "Get a task by id",
    "POST /api/tasks": "Create a task",
    "PUT /api/tasks/{id}": "Update a task",
    "DELETE /api/tasks/{id}": "Delete a task",
    "GET /health": "Health check",
    "GET /metrics": "Prometheus metrics",
}


def build_root_router(settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.get("/")
    def root() -> dict:
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "endpoints": TASK_ENDPOINTS,
        }

    @router.get("/health")
    def health_check() -> dict:
        return {
            "status": "ok",
            "service": settings.app_name,
            "version": settings.app_version,
        }

    @router.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return router
