import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from utils.errors import LedgerError, validation_failed_from

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError):
        return JSONResponse(content=exc.to_dict(), status_code=exc.status_code)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            content={"success": False, "error": str(exc.detail)},
            status_code=exc.status_code,
            headers=exc.headers,
        )

    # Bad request bodies/query strings are reported like any other validation failure
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        failure = validation_failed_from(exc)
        return JSONResponse(content=failure.to_dict(), status_code=failure.status_code)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            content={"success": False, "error": "Internal server error"},
            status_code=500,
        )
