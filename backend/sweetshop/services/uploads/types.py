from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from sweetshop.core.exceptions import UploadRejectedError


@dataclass(frozen=True)
class UploadRequest:
    """A single incoming file as declared by the client. Every field is untrusted."""

    original_name: Optional[str]
    declared_mime_type: Optional[str]
    size_bytes: Optional[int] = None

    @classmethod
    def from_upload_file(cls, upload: Any) -> "UploadRequest":
        return cls(
            original_name=getattr(upload, "filename", None),
            declared_mime_type=getattr(upload, "content_type", None),
            size_bytes=getattr(upload, "size", None),
        )

    @classmethod
    def coerce(cls, file: Any) -> "UploadRequest":
        """Accept an UploadRequest, an UploadFile-like object or a plain mapping."""
        if isinstance(file, cls):
            return file
        if isinstance(file, dict):
            return cls(
                original_name=file.get("original_name", file.get("filename")),
                declared_mime_type=file.get("declared_mime_type", file.get("content_type")),
                size_bytes=file.get("size_bytes", file.get("size")),
            )
        return cls.from_upload_file(file)


@dataclass(frozen=True)
class StoredUpload:
    filename: str
    path: Path
    size_bytes: int
    content_type: Optional[str] = None


@dataclass(frozen=True)
class UploadLimits:
    file_size: int


@dataclass(frozen=True)
class FilterResult:
    error: Optional[UploadRejectedError]
    accepted: bool
