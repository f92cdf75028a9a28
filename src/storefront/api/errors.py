"""Mapping of storefront failures to HTTP responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.shared.errors import AuthorizationError, PersistenceError

logger = structlog.get_logger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"errors": exc.messages})


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "Not found"})


async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    logger.warning(
        "Rejected access to a resource owned by another user",
        path=request.url.path,
        resource=exc.resource,
        resource_id=exc.resource_id,
    )
    return JSONResponse(status_code=403, content={"detail": str(exc)})


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Storage failure", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "The request could not be completed"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(AuthorizationError, authorization_error_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
