from __future__ import annotations

import pytest

pytest.importorskip("httpx")

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from sweetshop.api.middleware import MULTIPART_OVERHEAD, UploadSizeLimitMiddleware


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.add_middleware(UploadSizeLimitMiddleware, max_file_size=100, path_prefix="/api/uploads")

    @app.post("/api/uploads/image")
    async def upload(request: Request):
        return {"received": len(await request.body())}

    @app.post("/other")
    async def other(request: Request):
        return {"received": len(await request.body())}

    return TestClient(app)


def test_small_body_passes_through(client: TestClient) -> None:
    response = client.post("/api/uploads/image", content=b"x" * 50)
    assert response.status_code == 200
    assert response.json() == {"received": 50}


def test_body_within_multipart_overhead_passes_through(client: TestClient) -> None:
    size = 100 + MULTIPART_OVERHEAD
    response = client.post("/api/uploads/image", content=b"x" * size)
    assert response.status_code == 200


def test_oversized_body_is_refused(client: TestClient) -> None:
    response = client.post("/api/uploads/image", content=b"x" * (100 + MULTIPART_OVERHEAD + 1))
    assert response.status_code == 413
    assert response.json() == {"success": False, "error": "File too large"}


def test_other_paths_are_not_limited(client: TestClient) -> None:
    response = client.post("/other", content=b"x" * (100 + MULTIPART_OVERHEAD + 1))
    assert response.status_code == 200
