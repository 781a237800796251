from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from sweetshop.core.logging import get_logger

logger = get_logger(__name__)

IMAGE_ONLY_MESSAGE = "Only image files are allowed!"
FILE_TOO_LARGE_MESSAGE = "File too large"


class UploadRejectedError(ValueError):
    """Raised (or returned) when a declared content type is not an image."""

    def __init__(self, message: str = IMAGE_ONLY_MESSAGE):
        super().__init__(message)
        self.message = message


class FileTooLargeError(ValueError):
    def __init__(self, limit: int, message: str = FILE_TOO_LARGE_MESSAGE):
        super().__init__(message)
        self.message = message
        self.limit = limit


class AppException(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class BadRequestException(AppException):
    def __init__(self, detail: str = "Bad Request"):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


class InvalidFileTypeException(AppException):
    def __init__(self, detail: str = IMAGE_ONLY_MESSAGE):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


class FileTooLargeException(AppException):
    def __init__(self, detail: str = FILE_TOO_LARGE_MESSAGE):
        super().__init__(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Render application errors as ``{"success": false, "error": ...}`` without internals."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
    )
