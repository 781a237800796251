from __future__ import annotations

from typing import Any, Callable, Optional

from fastapi import File, UploadFile

from sweetshop.core.exceptions import (
    FileTooLargeError,
    FileTooLargeException,
    InvalidFileTypeException,
    UploadRejectedError,
)
from sweetshop.core.logging import get_logger
from sweetshop.services.uploads.mime_filter import check_image
from sweetshop.services.uploads.policy import UploadPolicy
from sweetshop.services.uploads.storage import Callback, DiskStorage
from sweetshop.services.uploads.types import FilterResult, StoredUpload, UploadLimits, UploadRequest

logger = get_logger(__name__)

CHUNK_SIZE = 64 * 1024


class ImageUpload:
    """
    Image upload handler exposing ``storage``, ``file_filter`` and ``limits``.

    ``filter`` and the storage resolvers are pure; ``file_filter`` and the
    ``storage.get_*`` methods are callback adapters for callers that expect
    ``callback(error, value)``. ``single`` returns a FastAPI dependency that
    persists one file from a multipart field.
    """

    def __init__(self, policy: UploadPolicy) -> None:
        self.policy = policy
        self.storage = DiskStorage(policy.destination, policy.make_filename)
        self.limits = UploadLimits(file_size=policy.max_file_size)

    @classmethod
    def from_settings(cls, settings: Any) -> "ImageUpload":
        return cls(UploadPolicy.from_settings(settings))

    def filter(self, file: Any) -> FilterResult:
        return check_image(UploadRequest.coerce(file).declared_mime_type)

    def file_filter(self, request: Any, file: Any, callback: Callback) -> None:
        result = self.filter(file)
        callback(result.error, result.accepted)

    async def save(self, upload: UploadFile) -> StoredUpload:
        """
        Persist an accepted upload under a sanitized name.

        Rejected content types are never written. When the stream grows past
        ``limits.file_size`` the partial file is removed.
        Starlette has already spooled the multipart body by the time this runs;
        early refusal of oversized requests happens in UploadSizeLimitMiddleware.

        Raises:
            UploadRejectedError: declared content type is not an image
            FileTooLargeError: upload exceeds the size limit
        """
        file = UploadRequest.from_upload_file(upload)
        result = self.filter(file)
        if not result.accepted:
            logger.warning(
                f"Rejected upload {file.original_name!r} with content type {file.declared_mime_type!r}"
            )
            raise result.error

        limit = self.limits.file_size
        if file.size_bytes is not None and file.size_bytes > limit:
            logger.warning(f"Rejected upload {file.original_name!r}: {file.size_bytes} bytes > {limit}")
            raise FileTooLargeError(limit)

        self.storage.ensure_destination()
        filename = self.storage.resolve_filename(file)
        written = 0
        out = self.storage.open_for_write(filename)
        try:
            with out:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > limit:
                        raise FileTooLargeError(limit)
                    out.write(chunk)
        except BaseException:
            self.storage.discard(filename)
            raise

        logger.info(f"Stored upload {file.original_name!r} as {filename} ({written} bytes)")
        return StoredUpload(
            filename=filename,
            path=self.storage.path_for(filename),
            size_bytes=written,
            content_type=file.declared_mime_type,
        )

    def single(self, field_name: str = "image") -> Callable[..., Any]:
        """Dependency storing the file sent in ``field_name``; yields None when absent."""

        async def dependency(
            upload: Optional[UploadFile] = File(None, alias=field_name),
        ) -> Optional[StoredUpload]:
            if upload is None:
                return None
            try:
                return await self.save(upload)
            except UploadRejectedError as e:
                raise InvalidFileTypeException(e.message)
            except FileTooLargeError as e:
                raise FileTooLargeException(e.message)
            finally:
                await upload.close()

        return dependency
