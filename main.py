import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from apps.collector.routers import router as collector_router
from config.db import create_db_engine, create_session_factory, init_db
from config.logging_config import setup_logging
from config.middleware import RequestLogMiddleware
from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    engine = create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_file, settings.log_info)
        init_db(engine, settings)
        logger.info("Collector started")
        yield
        engine.dispose()
        logger.info("Collector stopped")

    app = FastAPI(title="Miln playthrough collector", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.add_middleware(RequestLogMiddleware)
    app.include_router(collector_router)
    return app


app = create_app()
