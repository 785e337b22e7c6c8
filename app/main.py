import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from app.config import Settings, settings as default_settings
from app.core.errors import register_error_handlers
from app.db.session import build_engine, build_session_factory
from app.init_db import initialize_database
from app.routes import post


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Connect and sync the schema before accepting requests unless the
    # launcher already did; a failure here aborts startup.
    if not app.state.database_ready:
        await run_in_threadpool(initialize_database, app.state.engine)
        app.state.database_ready = True
    try:
        yield
    finally:
        app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    # One engine per application; routes reach it through get_db.
    engine = build_engine(settings.database_url, echo=settings.SQL_ECHO)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.database_ready = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(post.router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "OK", "message": "Server is running"}

    register_error_handlers(app)
    return app


app = create_app()
