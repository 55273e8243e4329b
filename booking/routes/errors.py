import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from booking.core.exceptions import AuthenticationRequired, NotFoundOrUnauthorized, ViolationError

logger = logging.getLogger(__name__)

DATABASE_UNAVAILABLE_DETAIL = 'Database unavailable. Verify DATABASE_URL and database credentials.'


def database_unavailable(exc: Exception) -> HTTPException:
    logger.exception('Database operation failed', exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=DATABASE_UNAVAILABLE_DETAIL,
    )


async def _authentication_required(_request: Request, exc: AuthenticationRequired) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={'detail': str(exc) or 'Authentication required.'},
        headers={'WWW-Authenticate': 'Bearer'},
    )


async def _not_found_or_unauthorized(_request: Request, exc: NotFoundOrUnauthorized) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={'detail': str(exc) or 'Not found.'},
    )


async def _violations(_request: Request, exc: ViolationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={'violations': [violation.to_dict() for violation in exc.violations]},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthenticationRequired, _authentication_required)
    app.add_exception_handler(NotFoundOrUnauthorized, _not_found_or_unauthorized)
    app.add_exception_handler(ViolationError, _violations)
