"""
Main entrypoint for the User Management API.

This module assembles the FastAPI application, sets up logging,
installs the error handlers that render failures in the response
envelope and includes the versioned router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn user_management_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.endpoints.users import INVALID_BODY
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .schemas.response import error_response
from .services.user_service import UserService


INVALID_USER_ID = "Invalid user ID format. Must be an Integer."

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render ``HTTPException`` (including unknown routes) as an error envelope."""
    response = error_response(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Map request validation failures to HTTP 400.

    A bad path parameter can only be the user id; anything else is a
    body that is not valid JSON or does not match the user schema.
    """
    errors = exc.errors()
    if any(err.get("loc", ())[:1] == ("path",) for err in errors):
        detail = INVALID_USER_ID
    else:
        detail = INVALID_BODY
    logger.warning("%s %s rejected: %s", request.method, request.url.path, detail)
    return error_response(detail, status.HTTP_400_BAD_REQUEST)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, resets the user store (seeding it with the
    demo users unless ``SEED_USERS`` is disabled), registers the error
    handlers and mounts the v1 routes under ``settings.api_prefix``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    UserService.reset(seed=settings.seed_users)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
