import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from visitdesk.api.routes import api_router
from visitdesk.core.config import Settings, get_settings
from visitdesk.core.exceptions import register_exception_handlers
from visitdesk.core.logging import setup_logging
from visitdesk.db.base import Base
from visitdesk.db.session import build_session_factory, engine as default_engine
from visitdesk.middleware.request_context import RequestContextMiddleware
from visitdesk.services.local_storage import LocalStorage
from visitdesk.services.session_store import SessionStore
from visitdesk.services.visit_repository import VisitRequestRepository

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    settings = settings or get_settings()
    engine = engine or default_engine
    session_factory = build_session_factory(engine)
    setup_logging(logging.DEBUG if settings.DEBUG else logging.INFO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=engine)
        repository = VisitRequestRepository(LocalStorage(session_factory), key=settings.STORAGE_KEY)
        loaded = repository.load()
        logger.info("visit_requests loaded count=%d key=%s", len(loaded), settings.STORAGE_KEY)
        app.state.repository = repository
        app.state.session_store = SessionStore(delay_seconds=settings.AUTH_SIMULATED_DELAY_SECONDS)
        yield

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    return app


app = create_app()
