import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exception_handlers import http_exception_handler

logger = logging.getLogger(__name__)


class StudentApiError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail)


class BadRequest(StudentApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"


class NotFound(StudentApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Student not found"


class Conflict(StudentApiError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Student already exists"


async def student_api_error_handler(request: Request, exc: StudentApiError):
    logger.warning(
        "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail
    )
    return await http_exception_handler(request, exc)


def setup_error_handling(app: FastAPI):
    app.add_exception_handler(StudentApiError, student_api_error_handler)
