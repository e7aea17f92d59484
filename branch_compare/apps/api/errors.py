"""Maps application errors onto JSON error responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from branch_compare.exceptions import BranchCompareError, ValidationError

logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    fields = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        fields.append(f"{location} ({error.get('msg', 'invalid')})")
    return "Missing or invalid fields: " + ", ".join(fields)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BranchCompareError)
    async def handle_branch_compare_error(request: Request, exc: BranchCompareError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.detail)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        error = ValidationError(_describe_validation_errors(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_dict())
