from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from task_tracker.infrastructure.configuration.main_settings import Settings
from task_tracker.infrastructure.repositories.sqlalchemy.task_record import Base
from task_tracker.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)


def build_engine(settings: Settings) -> Engine:
    url = make_url(settings.database_url)
    kwargs: dict = {"echo": settings.database_echo, "pool_pre_ping": True}

    if settings.is_sqlite:
        # Requests are served from a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    logger.info("Creating database engine", database_backend=url.get_backend_name())
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_schema(engine: Engine) -> None:
    Base.metadata.create_all(engine)
