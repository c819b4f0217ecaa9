from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from starlette.requests import Request

from config.settings import Settings


def create_db_engine(settings: Settings) -> Engine:
    connect_args = {}
    if settings.db_url.startswith("sqlite"):
        # sync endpoints run in the thread pool
        connect_args = {"check_same_thread": False}

    # NullPool: every request opens its own connection and closes it when the session ends.
    # Nothing connects until the first query, so an unreachable database does not stop startup.
    return create_engine(settings.db_url, connect_args=connect_args, poolclass=NullPool)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(engine: Engine, settings: Settings) -> None:
    if settings.generate_schemas:
        from apps.collector.models import Base

        Base.metadata.create_all(engine)


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
