from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from sweetshop.services.uploads.sanitizer import DEFAULT_PLACEHOLDER, sanitize_filename

DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024


@dataclass(frozen=True)
class UploadPolicy:
    """Everything an ImageUpload needs to know; one instance per upload flavour."""

    destination: Path
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    placeholder: str = DEFAULT_PLACEHOLDER
    clock: Optional[Callable[[], int]] = None
    suffix: Optional[Callable[[], int]] = None

    def __post_init__(self) -> None:
        if self.max_file_size <= 0:
            raise ValueError("max_file_size must be positive")

    @classmethod
    def from_settings(cls, settings: Any) -> "UploadPolicy":
        return cls(
            destination=Path(settings.UPLOAD_DIR),
            max_file_size=settings.MAX_UPLOAD_SIZE,
            placeholder=settings.UPLOAD_PLACEHOLDER_NAME,
        )

    def make_filename(self, original_name: Optional[str]) -> str:
        return sanitize_filename(
            original_name,
            clock=self.clock,
            suffix=self.suffix,
            placeholder=self.placeholder,
        )
