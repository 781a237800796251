from fastapi import APIRouter, Depends

from sweetshop.api.deps import get_settings
from sweetshop.core.config import Settings

router = APIRouter()

@router.get("/health")
async def health_check(app_settings: Settings = Depends(get_settings)):
    """Health check endpoint."""
    return {"status": "healthy", "service": app_settings.PROJECT_NAME}

@router.get("/")
async def root(app_settings: Settings = Depends(get_settings)):
    """Root endpoint."""
    return {
        "message": f"Welcome to {app_settings.PROJECT_NAME}",
        "version": app_settings.VERSION,
        "endpoints": {
            "uploads": f"{app_settings.API_PREFIX}/uploads",
            "images": app_settings.UPLOAD_URL_PREFIX,
        },
    }
