"""Content-type gate for image uploads.

Only the client-declared type is inspected; the bytes are never sniffed, so this
is an advisory filter and not a security boundary.
"""
from __future__ import annotations

from typing import Optional

from sweetshop.core.exceptions import IMAGE_ONLY_MESSAGE, UploadRejectedError
from sweetshop.services.uploads.types import FilterResult

IMAGE_PREFIX = "image/"


def accept_image(declared_mime_type: Optional[str]) -> bool:
    if not isinstance(declared_mime_type, str):
        return False
    return declared_mime_type.strip().startswith(IMAGE_PREFIX)


def check_image(declared_mime_type: Optional[str]) -> FilterResult:
    if accept_image(declared_mime_type):
        return FilterResult(error=None, accepted=True)
    return FilterResult(error=UploadRejectedError(IMAGE_ONLY_MESSAGE), accepted=False)
