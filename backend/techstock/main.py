"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from techstock.config import settings
from techstock.database import create_db_engine, create_session_factory
from techstock.exceptions import StorageError, TechStockError
from techstock.rate_limiter import limiter
from techstock.routers import auth, contact, suppliers
from techstock.schemas.common import ErrorDetail, ErrorResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the connection pool for the lifetime of the process."""
    engine = create_db_engine(settings.database_url)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info(f"Database engine created ({engine.url.get_backend_name()})")
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database engine disposed")


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details, path=request.url.path)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(mode="json"), headers=headers
    )


async def handle_domain_error(request: Request, exc: TechStockError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    return _error_response(request, exc.status_code, exc.code, exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        ErrorDetail(
            field=".".join(str(part) for part in err["loc"] if part != "body") or None,
            message=err["msg"],
        )
        for err in exc.errors()
    ]
    return _error_response(
        request, HTTPStatus.BAD_REQUEST, "ValidationError", "Invalid request", details
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(
        request,
        exc.status_code,
        HTTPStatus(exc.status_code).phrase.replace(" ", ""),
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def handle_rate_limit(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit hit on {request.url.path}: {exc.detail}")
    response = _error_response(
        request,
        HTTPStatus.TOO_MANY_REQUESTS,
        "TooManyRequests",
        f"Rate limit exceeded: {exc.detail}",
    )
    return request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)


async def handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Unhandled database error on {request.url.path}", exc_info=exc)
    storage_error = StorageError()
    return _error_response(
        request, storage_error.status_code, storage_error.code, storage_error.message
    )


def create_app() -> FastAPI:
    """Build the application with routers and error handlers registered."""
    app = FastAPI(
        title="TechStock API",
        description="Storefront backend: accounts, password recovery and administration",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add rate limiter to app state
    app.state.limiter = limiter

    app.add_exception_handler(RateLimitExceeded, handle_rate_limit)
    app.add_exception_handler(TechStockError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "TechStock API", "version": "0.1.0", "status": "running"}

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    app.include_router(auth.router, prefix="/api")
    app.include_router(suppliers.router, prefix="/api")
    app.include_router(contact.router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("techstock.main:app", host="0.0.0.0", port=8000, reload=True)
