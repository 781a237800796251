import itertools

import pytest

from sweetshop.core.config import Settings
from sweetshop.services.uploads import ImageUpload, UploadPolicy


@pytest.fixture
def upload_dir(tmp_path):
    """Fixture providing an isolated upload directory."""
    return tmp_path / "uploads"


@pytest.fixture
def fixed_clock():
    return lambda: 1700000000000


@pytest.fixture
def counter_suffix():
    counter = itertools.count(1)
    return lambda: next(counter)


@pytest.fixture
def image_upload(upload_dir, fixed_clock, counter_suffix):
    policy = UploadPolicy(destination=upload_dir, clock=fixed_clock, suffix=counter_suffix)
    return ImageUpload(policy)


@pytest.fixture
def app_settings(upload_dir):
    return Settings(
        UPLOAD_DIR=str(upload_dir),
        PUBLIC_BASE_URL="http://testserver",
        ALLOWED_ORIGINS="*",
        LOG_DIR=None,
    )
