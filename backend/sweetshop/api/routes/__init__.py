from .health import router as health
from .uploads import create_upload_router

__all__ = ["health", "create_upload_router"]
