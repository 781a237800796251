from __future__ import annotations

import os
from typing import Any

from starlette.responses import Response
from starlette.staticfiles import StaticFiles

IMAGE_CONTENT_TYPES = {
    ".webp": "image/webp",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
}
CACHE_CONTROL = "public, max-age=31536000"


class UploadStaticFiles(StaticFiles):
    """Static mount for stored images with explicit image content types and long caching."""

    def file_response(self, full_path: Any, stat_result: os.stat_result, scope: Any, status_code: int = 200) -> Response:
        response = super().file_response(full_path, stat_result, scope, status_code)
        ext = os.path.splitext(str(full_path))[1].lower()
        content_type = IMAGE_CONTENT_TYPES.get(ext)
        if content_type:
            response.headers["content-type"] = content_type
        response.headers["cache-control"] = CACHE_CONTROL
        return response
