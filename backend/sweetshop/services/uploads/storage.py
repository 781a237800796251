from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO, Callable, Optional

from sweetshop.core.logging import get_logger
from sweetshop.services.uploads.types import UploadRequest

logger = get_logger(__name__)

Callback = Callable[[Optional[Exception], Any], None]


class DiskStorage:
    """Resolves where accepted uploads go and what they are called.

    The destination never depends on the request or the filename, so no
    client-supplied value reaches a directory component of the path.
    """

    def __init__(self, destination: Path, filename_factory: Callable[[Optional[str]], str]) -> None:
        self.destination = Path(destination).resolve()
        self._filename_factory = filename_factory

    def resolve_destination(self, request: Any = None) -> Path:
        return self.destination

    def resolve_filename(self, file: UploadRequest) -> str:
        return self._filename_factory(file.original_name)

    def get_destination(self, request: Any, file: Any, callback: Callback) -> None:
        callback(None, str(self.resolve_destination(request)))

    def get_filename(self, request: Any, file: Any, callback: Callback) -> None:
        callback(None, self.resolve_filename(UploadRequest.coerce(file)))

    def ensure_destination(self) -> Path:
        self.destination.mkdir(parents=True, exist_ok=True)
        return self.destination

    def path_for(self, filename: str) -> Path:
        path = (self.destination / filename).resolve()
        if path.parent != self.destination:
            raise ValueError("Invalid file path outside upload root")
        return path

    def open_for_write(self, filename: str) -> BinaryIO:
        # "xb" refuses to overwrite an existing upload
        return self.path_for(filename).open("xb")

    def discard(self, filename: str) -> bool:
        path = self.path_for(filename)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        logger.info(f"Removed upload {filename}")
        return True
