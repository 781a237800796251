from __future__ import annotations

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from sweetshop.core.exceptions import FILE_TOO_LARGE_MESSAGE
from sweetshop.core.logging import get_logger

logger = get_logger(__name__)

# Room for multipart boundaries, part headers and small form fields
MULTIPART_OVERHEAD = 64 * 1024


class UploadSizeLimitMiddleware:
    """Reject upload requests whose declared Content-Length exceeds the limit.

    Runs before the multipart body is read, so oversized uploads are refused
    without being buffered. Requests without Content-Length (chunked) fall
    through to the streaming check in ``ImageUpload.save``.
    """

    def __init__(self, app: ASGIApp, max_file_size: int, path_prefix: str) -> None:
        self.app = app
        self.max_body_size = max_file_size + MULTIPART_OVERHEAD
        self.path_prefix = path_prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].startswith(self.path_prefix):
            length = Headers(scope=scope).get("content-length")
            if length and length.isdigit() and int(length) > self.max_body_size:
                logger.warning(f"Refused {scope['path']}: content-length {length} > {self.max_body_size}")
                response = JSONResponse(
                    status_code=413,
                    content={"success": False, "error": FILE_TOO_LARGE_MESSAGE},
                )
                await response(scope, receive, send)
                return
        await self.app(scope, receive, send)
