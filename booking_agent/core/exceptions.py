"""Map failures onto the APIResponse envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from booking_agent.core.domain_exceptions import DomainException
from booking_agent.core.error_codes import ErrorCode
from booking_agent.core.middleware import get_request_id
from booking_agent.schemas.common import APIResponse

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, code: ErrorCode, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse.fail(code.value, message, get_request_id(request)).model_dump(),
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    return _error_response(request, exc.status_code, ErrorCode.VALIDATION_ERROR, str(exc.detail))


async def domain_exception_handler(request: Request, exc: DomainException):
    logger.info("Request rejected with %s: %s", exc.code.value, exc.message)
    return _error_response(request, exc.status_code, exc.code, exc.message)


async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Storage error while handling %s", request.url.path, exc_info=exc)
    return _error_response(request, 500, ErrorCode.STORAGE_ERROR, "Failed to save booking.")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
