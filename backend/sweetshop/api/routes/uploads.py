from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from sweetshop.api.deps import public_base_url
from sweetshop.core.config import Settings
from sweetshop.core.exceptions import BadRequestException
from sweetshop.schemas.upload import ImageUploadResponse, UploadLimitsRead
from sweetshop.services.uploads import ImageUpload, StoredUpload
from sweetshop.utils.image_urls import absolute_image_url, public_image_path


def create_upload_router(image_upload: ImageUpload, app_settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.post("/image", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
    async def upload_image(
        request: Request,
        stored: Optional[StoredUpload] = Depends(image_upload.single("image")),
    ) -> ImageUploadResponse:
        """Store one product image sent as multipart field ``image``."""
        if stored is None:
            raise BadRequestException("No image file provided")

        image_url = absolute_image_url(
            public_base_url(request, app_settings),
            public_image_path(stored.filename, app_settings.UPLOAD_URL_PREFIX),
            app_settings.PLACEHOLDER_IMAGE_URL,
            app_settings.UPLOAD_URL_PREFIX,
        )
        return ImageUploadResponse(
            filename=stored.filename,
            image_url=image_url,
            size=stored.size_bytes,
            content_type=stored.content_type,
        )

    @router.get("/limits", response_model=UploadLimitsRead)
    async def upload_limits() -> UploadLimitsRead:
        return UploadLimitsRead(max_file_size=image_upload.limits.file_size)

    return router
