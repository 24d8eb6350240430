"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from devsocial.domain.error import DomainError
from devsocial.interface.api.routes import (
    achievements,
    activity,
    friends,
    health,
    messages,
    users,
)
from devsocial.interface.error import status_for
from devsocial.util.di.container import create_container, setup_di
from devsocial.util.observability import instrument_fastapi


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error raised by a use case into a JSON response."""
    code = status_for(exc)
    if code >= 500:
        logfire.error(
            "Request failed", path=request.url.path, error=str(exc), kind=type(exc).__name__
        )
    else:
        logfire.info(
            "Request rejected", path=request.url.path, error=str(exc), kind=type(exc).__name__
        )
    return JSONResponse(
        status_code=code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container, the production container when omitted
    """
    app_instance = FastAPI(
        title="DevSocial API",
        description="Coding activity aggregation, friends presence and achievements",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    app_instance.add_exception_handler(DomainError, handle_domain_error)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(activity.router)
    app_instance.include_router(users.router)
    app_instance.include_router(friends.router)
    app_instance.include_router(achievements.router)
    app_instance.include_router(messages.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
