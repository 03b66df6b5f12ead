"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from letter_stats.interface.dependencies import shutdown, startup
from letter_stats.interface.error_handlers import register_error_handlers
from letter_stats.interface.routes import router


@asynccontextmanager
async def _http_client_lifespan(app: FastAPI) -> AsyncIterator[None]:
    await startup()
    try:
        yield
    finally:
        await shutdown()


def create_app() -> FastAPI:
    app = FastAPI(
        title="GitHub Letter Statistics",
        version="1.0.0",
        summary="Letter frequencies across a repository's JavaScript / TypeScript files.",
        lifespan=_http_client_lifespan,
    )
    register_error_handlers(app)
    app.include_router(router)
    return app
