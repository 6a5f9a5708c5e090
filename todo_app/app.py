"""FastAPI application setup for the todo app."""

import logging
import sys
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from . import __version__, routes
from .config import Settings
from .exceptions import TodoError, ValidationError
from .security import SECURITY_HEADERS, install_security_headers
from .store import TodoStore

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def create_app(settings: Optional[Settings] = None, store: Optional[TodoStore] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The store is owned by the app (``app.state.store``) and reaches the route
    handlers through dependency injection. Pass one in to control its
    contents; otherwise a new one is built from ``settings``.
    """
    settings = settings or Settings()
    if store is None:
        store = TodoStore.seeded() if settings.seed_todos else TodoStore()

    app = FastAPI(
        title="Todo App",
        description="Simple in-memory to-do API built with FastAPI",
        version=__version__,
    )
    app.state.settings = settings
    app.state.store = store

    install_security_headers(app)

    @app.exception_handler(TodoError)
    async def todo_error_handler(request: Request, exc: TodoError):
        logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # a missing, malformed or non-string task all mean the same thing to the client
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": ValidationError.message})

    # 500s are answered outside the http middleware, so headers are added here
    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": TodoError.message},
            headers=SECURITY_HEADERS,
        )

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(STATIC_DIR / "index.html", media_type="text/html")

    app.include_router(routes.router)

    return app


def main():
    """Entry point for the todo-app command."""
    import uvicorn

    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Starting todo app on %s:%d", settings.host, settings.port)

    try:
        uvicorn.run(
            create_app(settings),
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error("Server startup failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
