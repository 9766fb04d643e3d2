"""
WiFi billing backend — FastAPI application entry-point.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import make_url

from app.config import Settings, settings as default_settings
from app.billing import models  # noqa: F401  — register tables on Base
from app.billing.database import Base, create_db_engine, create_session_factory
from app.billing.errors import register_exception_handlers
from app.billing.workflow.notifier import ConsoleNotifier, Notifier

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: ensure data dir + tables exist
    settings = app.state.settings
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        data_dir = os.path.dirname(url.database)
        if data_dir:
            os.makedirs(data_dir, exist_ok=True)
    Base.metadata.create_all(bind=app.state.engine)
    logger.info("Database tables ready (%s)", settings.DATABASE_URL)
    yield
    logger.info("Shutting down")


def create_app(settings: Optional[Settings] = None, notifier: Optional[Notifier] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="WiFi Billing",
        description="Access package request → SMS payment code → confirmation → WiFi login",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.notifier = notifier or ConsoleNotifier()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    # ── Register routers ─────────────────────────────────────────────────
    from app.billing.routers.admin import router as admin_router
    from app.billing.routers.billing import router as billing_router

    app.include_router(billing_router, prefix="/api", tags=["Billing"])
    app.include_router(admin_router, tags=["Admin"])

    # Public portal files; mounted last so API routes take precedence
    app.mount(
        "/",
        StaticFiles(directory=settings.PUBLIC_DIR, html=True, check_dir=False),
        name="public",
    )
    return app


app = create_app()


def run() -> None:
    import uvicorn

    logger.info("WiFi Billing System running on port %d", default_settings.PORT)
    logger.info("Open: http://localhost:%d", default_settings.PORT)
    logger.info("Admin: http://localhost:%d/admin", default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
