"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import bookinstances, genres
from api.views import templates
from db import init_db
from domain.errors import CatalogError
from domain.models import CATALOG_PREFIX
from settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _render_error(request: Request, status_code: int, message: str, detail: str | None = None):
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Error", "message": message, "status": status_code, "detail": detail},
        status_code=status_code,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map catalog errors and unmatched routes onto the error page."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        if exc.status_code == 404:
            logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
        detail = None
        if settings.DEBUG and exc.status_code >= 500:
            detail = repr(exc.__cause__ or exc)
        return _render_error(request, exc.status_code, exc.message, detail)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = "Not Found" if exc.status_code == 404 else str(exc.detail)
        return _render_error(request, exc.status_code, message)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Local Library",
        description="Server-rendered library catalog",
        version="0.1.0",
    )

    app.include_router(genres.router, prefix=CATALOG_PREFIX, tags=["genres"])
    app.include_router(bookinstances.router, prefix=CATALOG_PREFIX, tags=["bookinstances"])
    register_error_handlers(app)

    @app.get("/")
    async def root():
        return RedirectResponse(url=f"{CATALOG_PREFIX}/genres", status_code=302)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


@app.on_event("startup")
def startup_event():
    """Initialize database tables on startup."""
    init_db()
