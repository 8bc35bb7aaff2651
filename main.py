"""
Account service — application entry point.
"""

from __future__ import annotations

import logging
import pathlib
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.diagnostics import router as diagnostics_router
from api.middleware import register_middleware
from auth.routes import router as auth_router
from config.settings import config
from database.session import Database

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "asyncio", "uvicorn.access"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(database: Database | None = None) -> FastAPI:
    app = FastAPI(
        title="Dynamicfin Accounts",
        version="1.0.0",
        description="Signup, credential checks and the protected-route guard.",
    )
    app.state.db = database or Database.from_settings(config)

    # Before CORS: the last-added middleware is outermost, and CORS must wrap the guard.
    register_middleware(app)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(auth_router, prefix="/api/auth")
    app.include_router(diagnostics_router, prefix="/api/diagnostic-accounts")

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    static_dir = pathlib.Path(__file__).resolve().parent / "static"
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    @app.on_event("startup")
    async def on_startup():
        if config.auto_create_tables:
            logger.info("Ensuring database tables exist…")
            await app.state.db.create_all()
        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.db.dispose()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
