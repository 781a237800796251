from sweetshop.services.uploads.mime_filter import accept_image, check_image
from sweetshop.services.uploads.orchestrator import ImageUpload
from sweetshop.services.uploads.policy import DEFAULT_MAX_FILE_SIZE, UploadPolicy
from sweetshop.services.uploads.sanitizer import ALLOWED_EXTENSIONS, sanitize_filename
from sweetshop.services.uploads.storage import DiskStorage
from sweetshop.services.uploads.types import FilterResult, StoredUpload, UploadLimits, UploadRequest

__all__ = [
    "ALLOWED_EXTENSIONS",
    "DEFAULT_MAX_FILE_SIZE",
    "DiskStorage",
    "FilterResult",
    "ImageUpload",
    "StoredUpload",
    "UploadLimits",
    "UploadPolicy",
    "UploadRequest",
    "accept_image",
    "check_image",
    "sanitize_filename",
]
