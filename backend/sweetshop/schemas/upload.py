from typing import Optional

from pydantic import BaseModel


class ImageUploadResponse(BaseModel):
    filename: str
    image_url: str
    size: int
    content_type: Optional[str] = None


class UploadLimitsRead(BaseModel):
    max_file_size: int
    allowed_content_types: str = "image/*"
