from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
import traceback
from rekard import __version__
from rekard.core.config import settings
from rekard.core.database import engine, init_db
from rekard.core.exceptions import (
    RekardException,
    NotFoundError,
    ConflictError,
)
from rekard.repositories.deck_repository import SqlDeckRepository
from rekard.services.deck_store import DeckStore
from rekard.services.session_registry import SessionRegistry

# Import API router
from rekard.api.v1 import api_router

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


def create_app(store: DeckStore = None) -> FastAPI:
    """
    Build the API application.

    Args:
        store: Deck store to serve. When omitted, tables are created on startup
            and a store backed by the configured database is used.
    """
    app = FastAPI(title="Rekard API", version=__version__)

    # Add exception handler for validation errors to log details
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Log validation errors with full details for debugging."""
        body = await request.body()
        logger.error(f"Validation error on {request.method} {request.url.path}")
        logger.error(f"Validation errors: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": jsonable_errors(exc),
                "body": body.decode('utf-8') if body else None
            },
        )

    # Add exception handler for custom application exceptions
    @app.exception_handler(RekardException)
    async def rekard_exception_handler(request: Request, exc: RekardException):
        """Handle custom application exceptions."""
        if isinstance(exc, NotFoundError):
            status_code = status.HTTP_404_NOT_FOUND
        elif isinstance(exc, ConflictError):
            status_code = status.HTTP_409_CONFLICT
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        logger.warning(f"Application exception on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "type": type(exc).__name__},
        )

    # Add global exception handler for unhandled errors
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch all unhandled exceptions and answer with a 500."""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

        # In development, show full error details
        if settings.is_development:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": str(exc),
                    "type": type(exc).__name__,
                    "traceback": traceback.format_exc()
                },
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An internal server error occurred. Please try again later.",
                "type": "InternalServerError"
            },
        )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if store is not None:
        app.state.store = store
        app.state.sessions = SessionRegistry(
            store,
            max_sessions=settings.max_open_sessions,
            idle_timeout=settings.session_idle_timeout_seconds,
        )
    else:
        @app.on_event("startup")
        async def startup_event():
            """Initialize database and load the deck collection on startup."""
            init_db(engine)
            app.state.store = DeckStore(SqlDeckRepository(engine))
            app.state.sessions = SessionRegistry(
                app.state.store,
                max_sessions=settings.max_open_sessions,
                idle_timeout=settings.session_idle_timeout_seconds,
            )

    @app.get("/")
    async def root():
        return {
            "message": "Rekard API",
            "status": "running",
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc"
            }
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors without the raw exception objects pydantic attaches in ctx."""
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {k: str(v) for k, v in error["ctx"].items()}
        errors.append(error)
    return errors


app = create_app()
