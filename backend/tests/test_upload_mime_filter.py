import pytest

from sweetshop.core.exceptions import IMAGE_ONLY_MESSAGE, UploadRejectedError
from sweetshop.services.uploads.mime_filter import accept_image, check_image

IMAGE_TYPES = ["image/jpeg", "image/png", "image/gif", "image/webp", "image/svg+xml", "image/x-icon"]
NON_IMAGE_TYPES = [
    "application/pdf",
    "application/x-msdownload",
    "application/x-php",
    "text/html",
    "text/plain",
    "",
    None,
    "IMAGE",
    "imagejpeg",
]


@pytest.mark.parametrize("mime", IMAGE_TYPES)
def test_accepts_image_types(mime: str) -> None:
    assert accept_image(mime) is True
    result = check_image(mime)
    assert result.accepted is True
    assert result.error is None


@pytest.mark.parametrize("mime", NON_IMAGE_TYPES)
def test_rejects_non_image_types_with_message(mime) -> None:
    assert accept_image(mime) is False
    result = check_image(mime)
    assert result.accepted is False
    assert isinstance(result.error, UploadRejectedError)
    assert str(result.error) == IMAGE_ONLY_MESSAGE == "Only image files are allowed!"
