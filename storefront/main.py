# storefront/main.py
# Run with: uvicorn storefront.main:app --port 3000

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings
from .database import Store, seeded_store
from .logging_config import setup_logging
from .routes import router

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _request_target(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def create_app(store: Optional[Store] = None, config: Optional[Settings] = None) -> FastAPI:
    """Build the app around ``store`` (seed data by default) and ``config``."""
    config = config or settings
    setup_logging(config.log_level)

    if store is None:
        store = seeded_store() if config.seed_data else Store()

    app = FastAPI(title=config.project_name)
    app.state.store = store

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, _request_target(request))
        return await call_next(request)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            {"error": exc.detail},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return PlainTextResponse("Something broke!", status_code=500)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
