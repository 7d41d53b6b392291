"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stampcard.adapter.error import ProviderError
from stampcard.application.usecase.admin import SeedAdminUserUseCase
from stampcard.domain.error import (
    BadRequestError,
    ConflictError,
    DomainError,
    DuplicateIdentityError,
    MailImmutableError,
    NotFoundError,
    StoreUnavailableError,
    UnauthorizedError,
    UsernameMismatchError,
    ValidationError,
)
from stampcard.interface.api.routes import admin, auth, health, profile, stamps
from stampcard.util.di.container import create_container, setup_di
from stampcard.util.error import ConfigurationError
from stampcard.util.observability import instrument_fastapi, instrument_httpx

# Most specific first; the first matching class wins
ERROR_STATUS: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (DuplicateIdentityError, status.HTTP_409_CONFLICT),
    (UsernameMismatchError, status.HTTP_401_UNAUTHORIZED),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_CONTENT),
    (MailImmutableError, status.HTTP_403_FORBIDDEN),
    (BadRequestError, status.HTTP_400_BAD_REQUEST),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (ProviderError, status.HTTP_502_BAD_GATEWAY),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (DomainError, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: Exception) -> int:
    """HTTP status code for an error raised by a use case."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _handle_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error=str(exc),
        )
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


async def _handle_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Route-level refusals share the error body of domain errors
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed the admin user before serving, close the container on shutdown."""
    container: AsyncContainer = app.state.dishka_container
    async with container() as request_container:
        seed_admin_user = await request_container.get(SeedAdminUserUseCase)
        seeded = await seed_admin_user.execute()
        logfire.info("Admin user ready", user_id=seeded.user_id)
    yield
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container when omitted

    Returns:
        Configured application
    """
    instrument_httpx()

    app_instance = FastAPI(
        title="Stamp Card API",
        description="Attendance stamp card with admin grants, local and Google login, and profiles",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Admin-Token"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    for error_type in (DomainError, ProviderError, ConfigurationError):
        app_instance.add_exception_handler(error_type, _handle_error)
    app_instance.add_exception_handler(StarletteHTTPException, _handle_http_error)

    app_instance.include_router(health.router)
    app_instance.include_router(stamps.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(profile.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
