from fastapi import Request

from sweetshop.core.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def public_base_url(request: Request, app_settings: Settings) -> str:
    if app_settings.PUBLIC_BASE_URL:
        return app_settings.PUBLIC_BASE_URL.rstrip("/")
    return str(request.base_url).rstrip("/")
