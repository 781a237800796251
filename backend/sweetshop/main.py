from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sweetshop.api.middleware import UploadSizeLimitMiddleware
from sweetshop.api.routes import create_upload_router, health
from sweetshop.api.static import UploadStaticFiles
from sweetshop.core.config import Settings, settings
from sweetshop.core.exceptions import AppException, app_exception_handler
from sweetshop.core.logging import configure_logging, get_logger
from sweetshop.services.uploads import ImageUpload

logger = get_logger(__name__)


def _allowed_origins(app_settings: Settings) -> list[str]:
    allowed_origins = ["http://localhost:5173", "http://localhost:3000"]
    if app_settings.ALLOWED_ORIGINS and app_settings.ALLOWED_ORIGINS != "*":
        allowed_origins = [origin.strip() for origin in app_settings.ALLOWED_ORIGINS.split(",")] + allowed_origins
    elif app_settings.ALLOWED_ORIGINS == "*":
        allowed_origins = ["*"]
    return allowed_origins


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL, app_settings.LOG_DIR, app_settings.LOG_FILE)

    image_upload = ImageUpload.from_settings(app_settings)
    uploads_dir = image_upload.storage.destination

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        image_upload.storage.ensure_destination()
        logger.info(f"{app_settings.PROJECT_NAME} is starting up, storing uploads in {uploads_dir}")
        yield
        logger.info(f"{app_settings.PROJECT_NAME} is shutting down...")

    app = FastAPI(title=app_settings.PROJECT_NAME, version=app_settings.VERSION, lifespan=lifespan)
    app.state.settings = app_settings

    # Added first so CORS wraps its 413 responses
    app.add_middleware(
        UploadSizeLimitMiddleware,
        max_file_size=image_upload.limits.file_size,
        path_prefix=f"{app_settings.API_PREFIX}/uploads",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(app_settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )
    app.add_exception_handler(AppException, app_exception_handler)

    # Include routers
    app.include_router(health, tags=["Health"])
    app.include_router(
        create_upload_router(image_upload, app_settings),
        prefix=f"{app_settings.API_PREFIX}/uploads",
        tags=["Uploads"],
    )
    app.mount(app_settings.UPLOAD_URL_PREFIX, UploadStaticFiles(directory=uploads_dir, check_dir=False), name="uploads")
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("sweetshop.main:app", host="0.0.0.0", port=settings.PORT)
