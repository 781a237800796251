import pytest

from sweetshop.services.uploads import sanitize_filename
from sweetshop.utils.image_urls import absolute_image_url, public_image_path

BASE = "http://localhost:5000"
PLACEHOLDER = "https://via.placeholder.com/300x200?text=Sweet+Image"


def test_public_image_path() -> None:
    assert public_image_path("a.jpg") == "/uploads/a.jpg"
    assert public_image_path("a.jpg", "/media/") == "/media/a.jpg"


@pytest.mark.parametrize(
    "image_url,expected",
    [
        (None, PLACEHOLDER),
        ("", PLACEHOLDER),
        ("https://cdn.example.com/a.jpg", "https://cdn.example.com/a.jpg"),
        ("HTTP://cdn.example.com/a.jpg", "HTTP://cdn.example.com/a.jpg"),
        ("/uploads/a.jpg", f"{BASE}/uploads/a.jpg"),
        ("uploads/a.jpg", f"{BASE}/uploads/a.jpg"),
        ("a.jpg", f"{BASE}/uploads/a.jpg"),
        ("images/a.jpg", "images/a.jpg"),
        ("uploads-1-2.jpg", f"{BASE}/uploads/uploads-1-2.jpg"),
        ("/uploadsX/a.jpg", "/uploadsX/a.jpg"),
        ("uploadsX/a.jpg", "uploadsX/a.jpg"),
    ],
)
def test_absolute_image_url(image_url, expected) -> None:
    assert absolute_image_url(BASE + "/", image_url, PLACEHOLDER) == expected


def test_sanitized_name_starting_with_prefix_goes_under_uploads() -> None:
    stored = sanitize_filename("uploads.jpg", clock=lambda: 1, suffix=lambda: 2)
    assert stored == "uploads-1-2.jpg"
    assert absolute_image_url(BASE, stored, PLACEHOLDER) == f"{BASE}/uploads/uploads-1-2.jpg"
