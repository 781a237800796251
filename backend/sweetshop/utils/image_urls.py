from __future__ import annotations

from typing import Optional

DEFAULT_UPLOAD_PREFIX = "/uploads"


def public_image_path(filename: str, prefix: str = DEFAULT_UPLOAD_PREFIX) -> str:
    return f"{prefix.rstrip('/')}/{filename}"


def absolute_image_url(
    base_url: str,
    image_url: Optional[str],
    placeholder: str,
    prefix: str = DEFAULT_UPLOAD_PREFIX,
) -> str:
    """Turn a stored image reference into a URL a browser can load."""
    if not image_url:
        return placeholder

    lower = image_url.lower()
    if lower.startswith("http://") or lower.startswith("https://"):
        return image_url

    base = base_url.rstrip("/")
    bare_prefix = prefix.strip("/")
    if image_url.startswith(f"/{bare_prefix}/"):
        return f"{base}{image_url}"
    if image_url.startswith(f"{bare_prefix}/"):
        return f"{base}/{image_url}"
    # Plain filename: assume it lives in the uploads folder
    if "/" not in image_url:
        return f"{base}{public_image_path(image_url, prefix)}"
    return image_url
